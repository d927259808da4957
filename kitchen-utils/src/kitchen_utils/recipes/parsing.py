"""Recipe parsing utilities."""

import dataclasses
import re
from typing import Any, List, Mapping, Optional, Union

RECIPE_ID_RE = re.compile(r"^R-\d{5}$")


def is_valid_recipe_id(recipe_id: Optional[str]) -> bool:
    """Check that a recipe id has the ``R-#####`` form."""
    return bool(recipe_id) and bool(RECIPE_ID_RE.match(recipe_id))


def parse_ingredient_lines(text: Union[str, List[str], None]) -> List[str]:
    """Split free text into ingredient lines.

    Lines are separated by newlines; each line is stripped and empty lines
    are dropped. A list is cleaned with the same rule.

    Examples:
        >>> parse_ingredient_lines("400g spaghetti\\r\\n\\n  2 eggs ")
        ['400g spaghetti', '2 eggs']
    """
    if text is None:
        return []
    if isinstance(text, str):
        lines = re.split(r"\r?\n", text)
    else:
        lines = [str(line) for line in text if line is not None]
    return [line.strip() for line in lines if line.strip()]


def _get(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in data, accepting camelCase aliases."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclasses.dataclass
class Recipe:
    """Dataclass for holding a recipe record."""

    recipe_id: str
    title: str
    ingredients: List[str]
    instructions: List[str] = dataclasses.field(default_factory=list)
    chef: Optional[str] = None
    meal_type: Optional[str] = None
    cuisine_type: Optional[str] = None
    prep_time: Optional[int] = None
    difficulty: Optional[str] = None
    servings: Optional[int] = None
    created_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Recipe":
        """Build a Recipe from a snake_case or camelCase mapping.

        Raises:
            ValueError: If the id or title is missing.
        """
        recipe_id = _get(data, "recipe_id", "recipeId", "id")
        title = _get(data, "title")
        if not recipe_id:
            raise ValueError("Recipe is missing an id")
        if not title:
            raise ValueError(f"Recipe {recipe_id} is missing a title")

        return cls(
            recipe_id=str(recipe_id),
            title=str(title).strip(),
            ingredients=parse_ingredient_lines(_get(data, "ingredients", default=[])),
            instructions=parse_ingredient_lines(_get(data, "instructions", default=[])),
            chef=_get(data, "chef"),
            meal_type=_get(data, "meal_type", "mealType"),
            cuisine_type=_get(data, "cuisine_type", "cuisineType"),
            prep_time=_get(data, "prep_time", "prepTime"),
            difficulty=_get(data, "difficulty"),
            servings=_get(data, "servings"),
            created_date=_get(data, "created_date", "createdDate"),
        )

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)
