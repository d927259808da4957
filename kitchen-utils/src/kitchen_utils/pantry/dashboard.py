"""Dashboard summary of the kitchen."""

from typing import Iterable, Optional, Sequence

from kitchen_utils.ingredients.number_utils import _to_float
from kitchen_utils.pantry.inventory import (
    DateLike,
    InventoryItem,
    flag_inventory,
    total_value,
)
from kitchen_utils.pantry.models import DashboardStats


def dashboard_stats(
    total_users: int,
    recipes: Optional[Sequence],
    inventory: Optional[Iterable[InventoryItem]],
    today: DateLike = None,
) -> DashboardStats:
    """Summarize record counts and inventory health for the dashboard.

    Args:
        total_users: Number of registered users.
        recipes: All recipes (only their count is used).
        inventory: All inventory items.
        today: Reference date for expiry flags. Defaults to today.

    Returns:
        DashboardStats with counts, expiry and stock totals, and the
        inventory value.
    """
    try:
        users = max(int(_to_float(total_users)), 0)
    except (ValueError, OverflowError):
        users = 0

    items = list(inventory or [])
    flags = flag_inventory(items, today)
    return DashboardStats(
        total_users=users,
        recipe_count=len(recipes or []),
        inventory_count=len(items),
        expired_count=sum(f.expired for f in flags),
        expiring_soon_count=sum(f.expiring_soon for f in flags),
        low_stock_count=sum(f.low_stock for f in flags),
        inventory_value=total_value(items),
    )
