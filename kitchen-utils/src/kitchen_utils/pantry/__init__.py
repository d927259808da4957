"""Pantry views: recipe coverage, suggestions, inventory flags and dashboard."""

from .coverage import coverage_percent, evaluate_coverage
from .dashboard import dashboard_stats
from .inventory import (
    InventoryItem,
    filter_inventory,
    flag_inventory,
    is_expired,
    is_expiring_soon,
    is_low_stock,
    is_valid_inventory_id,
    parse_date,
    sort_inventory,
    total_value,
)
from .models import (
    DashboardStats,
    InventoryFlags,
    RecipeCoverage,
    RecipeSuggestion,
    SuggestionResult,
)
from .suggestions import clamp_threshold, rank_suggestions, recipe_ingredients

__all__ = [
    "evaluate_coverage",
    "coverage_percent",
    "rank_suggestions",
    "clamp_threshold",
    "recipe_ingredients",
    "InventoryItem",
    "is_valid_inventory_id",
    "parse_date",
    "is_expired",
    "is_expiring_soon",
    "is_low_stock",
    "total_value",
    "filter_inventory",
    "sort_inventory",
    "flag_inventory",
    "dashboard_stats",
    "RecipeCoverage",
    "RecipeSuggestion",
    "SuggestionResult",
    "InventoryFlags",
    "DashboardStats",
]
