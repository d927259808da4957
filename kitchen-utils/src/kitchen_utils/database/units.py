"""Unit conversion utilities for kitchen inventory."""

import logging
import pathlib
from typing import Optional, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

# Units an inventory item may be stocked in
INVENTORY_UNITS = {"pieces", "kg", "g", "liters", "ml", "cups", "tbsp", "tsp", "dozen"}

# Mass conversions to grams
MASS_CONVERSIONS = {
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "kg": 1000.0,
    "kilogram": 1000.0,
    "kilograms": 1000.0,
}

# Volume conversions to ml
VOLUME_CONVERSIONS = {
    "ml": 1.0,
    "milliliter": 1.0,
    "milliliters": 1.0,
    "l": 1000.0,
    "liter": 1000.0,
    "liters": 1000.0,
    "litre": 1000.0,
    "litres": 1000.0,
    # US cups
    "cup": 236.588,
    "cups": 236.588,
    # US tablespoons
    "tbsp": 14.7868,
    "tablespoon": 14.7868,
    "tablespoons": 14.7868,
    # US teaspoons
    "tsp": 4.92892,
    "teaspoon": 4.92892,
    "teaspoons": 4.92892,
}

# Count conversions to pieces
COUNT_CONVERSIONS = {
    "piece": 1.0,
    "pieces": 1.0,
    "each": 1.0,
    "dozen": 12.0,
}

BASE_UNITS = (
    ("g", MASS_CONVERSIONS),
    ("ml", VOLUME_CONVERSIONS),
    ("pieces", COUNT_CONVERSIONS),
)


def convert_to_base(
    quantity: Optional[Union[float, int]], unit: Optional[str]
) -> Tuple[float, Optional[str]]:
    """Convert a quantity to grams, milliliters or pieces.

    Args:
        quantity: The numeric quantity (can be None for missing values)
        unit: The unit string (can be None for missing values)

    Returns:
        A tuple of (amount, base_unit). The amount is NaN and the base unit
        None when the quantity is missing or the unit is not recognized.

    Examples:
        >>> convert_to_base(2, "kg")
        (2000.0, 'g')
        >>> convert_to_base(1, "dozen")
        (12.0, 'pieces')
        >>> convert_to_base(None, "ml")
        (nan, None)
    """
    if quantity is None or unit is None:
        return np.nan, None

    try:
        amount = float(quantity)
    except (ValueError, TypeError):
        return np.nan, None

    unit_normalized = str(unit).lower().strip()
    for base_unit, conversions in BASE_UNITS:
        if unit_normalized in conversions:
            return amount * conversions[unit_normalized], base_unit

    logger.warning(f"Unknown unit '{unit}', cannot convert to a base unit")
    return np.nan, None


def get_all_units_from_db(db_path: Union[str, pathlib.Path]) -> set:
    """Get all unique units used by inventory items in the database.

    Args:
        db_path: Path to the SQLite database

    Returns:
        Set of all unique units found in the database
    """
    from .utils import get_connection

    conn = get_connection(db_path)
    try:
        cursor = conn.cursor()
        cursor.execute("SELECT DISTINCT unit FROM inventory WHERE unit IS NOT NULL")
        return {row[0] for row in cursor.fetchall()}
    finally:
        conn.close()


def validate_unit_coverage(db_path: Union[str, pathlib.Path]) -> set:
    """Check that every inventory unit in the database has a conversion.

    Args:
        db_path: Path to the SQLite database

    Returns:
        Set of units with no conversion rule (empty when all are covered).
    """
    known_units = set(MASS_CONVERSIONS) | set(VOLUME_CONVERSIONS) | set(COUNT_CONVERSIONS)
    unknown_units = {
        unit for unit in get_all_units_from_db(db_path)
        if unit.lower().strip() not in known_units
    }

    if unknown_units:
        logger.warning(f"Found {len(unknown_units)} unknown units in database:")
        for unit in sorted(unknown_units):
            logger.warning(f"  - '{unit}'")
    else:
        logger.info("All inventory units in database have conversion coverage")
    return unknown_units
