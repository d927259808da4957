import dataclasses
from typing import Any, List, Optional

from kitchen_utils.ingredients.models import IngredientMatch


@dataclasses.dataclass
class RecipeCoverage:
    have: List[IngredientMatch]
    missing: List[str]
    percent: int


@dataclasses.dataclass
class RecipeSuggestion:
    recipe: Any  # Recipe record or the mapping it was given as
    percent: int


@dataclasses.dataclass
class SuggestionResult:
    all: List[RecipeSuggestion]
    suggested: List[RecipeSuggestion]
    threshold: int


@dataclasses.dataclass
class InventoryFlags:
    inventory_id: Optional[str]
    ingredient_name: str
    expired: bool
    expiring_soon: bool
    low_stock: bool


@dataclasses.dataclass
class DashboardStats:
    total_users: int
    recipe_count: int
    inventory_count: int
    expired_count: int = 0
    expiring_soon_count: int = 0
    low_stock_count: int = 0
    inventory_value: float = 0.0
