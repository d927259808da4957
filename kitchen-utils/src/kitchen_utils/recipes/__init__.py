"""Recipe records and parsing utilities."""

from .parsing import Recipe, is_valid_recipe_id, parse_ingredient_lines

__all__ = [
    "Recipe",
    "is_valid_recipe_id",
    "parse_ingredient_lines",
]
