"""Database utilities for kitchen recipe and inventory databases."""

from .schema import DDL, create_schema
from .utils import (
    get_connection,
    get_coverage_frame,
    get_dashboard_counts,
    load_inventory,
    load_recipes,
    transaction,
    upsert_inventory_item,
    upsert_recipe,
    upsert_user,
)
from .units import (
    INVENTORY_UNITS,
    convert_to_base,
    get_all_units_from_db,
    validate_unit_coverage,
)

__all__ = [
    "DDL",
    "create_schema",
    "get_connection",
    "transaction",
    "upsert_user",
    "upsert_recipe",
    "upsert_inventory_item",
    "load_recipes",
    "load_inventory",
    "get_dashboard_counts",
    "get_coverage_frame",
    "INVENTORY_UNITS",
    "convert_to_base",
    "get_all_units_from_db",
    "validate_unit_coverage",
]
