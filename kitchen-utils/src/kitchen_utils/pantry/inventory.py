"""Inventory records and stock flags."""

import dataclasses
import datetime
import logging
import math
import re
from typing import Any, Iterable, List, Mapping, Optional, Union

from kitchen_utils.config import config
from kitchen_utils.database.units import convert_to_base
from kitchen_utils.ingredients.number_utils import _to_float
from kitchen_utils.pantry.models import InventoryFlags

logger = logging.getLogger(__name__)

INVENTORY_ID_RE = re.compile(r"^I-\d{5}$")

# Items below these amounts (in base units) are low on stock
LOW_STOCK_LIMITS = {
    "g": 100.0,
    "ml": 100.0,
    "pieces": 2.0,
}

DateLike = Union[datetime.date, str, None]


def is_valid_inventory_id(inventory_id: Optional[str]) -> bool:
    """Check that an inventory id has the ``I-#####`` form."""
    return bool(inventory_id) and bool(INVENTORY_ID_RE.match(inventory_id))


def _get(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclasses.dataclass
class InventoryItem:
    """Dataclass for holding an inventory record."""

    inventory_id: Optional[str]
    ingredient_name: str
    quantity: Optional[float] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    purchase_date: Optional[str] = None
    expiration_date: Optional[str] = None
    location: Optional[str] = None
    cost: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InventoryItem":
        """Build an InventoryItem from a snake_case or camelCase mapping.

        Raises:
            ValueError: If the ingredient name is missing.
        """
        name = _get(data, "ingredient_name", "ingredientName", "name")
        if not name or not str(name).strip():
            raise ValueError("Inventory item is missing an ingredient name")

        return cls(
            inventory_id=_get(data, "inventory_id", "inventoryId", "id"),
            ingredient_name=str(name).strip(),
            quantity=_get(data, "quantity"),
            unit=_get(data, "unit"),
            category=_get(data, "category"),
            purchase_date=_get(data, "purchase_date", "purchaseDate"),
            expiration_date=_get(data, "expiration_date", "expirationDate"),
            location=_get(data, "location"),
            cost=_get(data, "cost"),
        )

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


def parse_date(value: DateLike) -> Optional[datetime.date]:
    """Parse a date or an ISO ``YYYY-MM-DD`` string (time part ignored).

    Returns None when the value is missing or unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        logger.debug(f"Unparseable date: {value!r}")
        return None


def _today(today: DateLike) -> datetime.date:
    return parse_date(today) or datetime.date.today()


def is_expired(item: InventoryItem, today: DateLike = None) -> bool:
    """Check if an item's expiration date is before today."""
    expires = parse_date(item.expiration_date)
    return expires is not None and expires < _today(today)


def is_expiring_soon(
    item: InventoryItem, today: DateLike = None, days: Optional[int] = None
) -> bool:
    """Check if an item expires after today but within ``days`` days.

    ``days`` defaults to the configured ``EXPIRING_SOON_DAYS``.
    """
    expires = parse_date(item.expiration_date)
    if expires is None:
        return False
    if days is None:
        days = config.EXPIRING_SOON_DAYS
    remaining = (expires - _today(today)).days
    return 0 < remaining <= days


def is_low_stock(item: InventoryItem) -> bool:
    """Check if an item's quantity is below the limit for its unit type.

    Items in units with no conversion are never flagged.
    """
    amount, base_unit = convert_to_base(item.quantity, item.unit)
    if base_unit is None or math.isnan(amount):
        return False
    return amount < LOW_STOCK_LIMITS[base_unit]


def total_value(items: Iterable[InventoryItem]) -> float:
    """Sum the cost of all items. Missing costs count as zero."""
    return round(sum(_to_float(item.cost) for item in items or []), 2)


def filter_inventory(items: Iterable[InventoryItem], query: Optional[str]) -> List[InventoryItem]:
    """Keep items whose name, category or location contains the query."""
    items = list(items or [])
    needle = (query or "").strip().lower()
    if not needle:
        return items
    return [
        item
        for item in items
        if any(
            needle in str(field or "").lower()
            for field in (item.ingredient_name, item.category, item.location)
        )
    ]


SORT_FIELDS = {
    "ingredient_name": "ingredient_name",
    "ingredientName": "ingredient_name",
    "quantity": "quantity",
    "category": "category",
    "location": "location",
    "expiration_date": "expiration_date",
    "expirationDate": "expiration_date",
}


def _sort_value(value: Any) -> tuple:
    # Numbers sort before text; missing values sort as empty text
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, float(value), "")
    return (1, 0.0, "" if value is None else str(value))


def sort_inventory(
    items: Iterable[InventoryItem], sort_by: str = "ingredient_name", ascending: bool = True
) -> List[InventoryItem]:
    """Sort items by one column of the inventory table.

    The sort is stable, so items with equal values keep their order.

    Raises:
        ValueError: If ``sort_by`` is not a sortable column.
    """
    field = SORT_FIELDS.get(sort_by)
    if field is None:
        raise ValueError(f"Cannot sort inventory by {sort_by!r}")
    return sorted(
        items or [],
        key=lambda item: _sort_value(getattr(item, field)),
        reverse=not ascending,
    )


def flag_inventory(
    items: Iterable[InventoryItem], today: DateLike = None, days: Optional[int] = None
) -> List[InventoryFlags]:
    """Compute expiry and stock flags for every item."""
    today = _today(today)
    return [
        InventoryFlags(
            inventory_id=item.inventory_id,
            ingredient_name=item.ingredient_name,
            expired=is_expired(item, today),
            expiring_soon=is_expiring_soon(item, today, days),
            low_stock=is_low_stock(item),
        )
        for item in items or []
    ]
