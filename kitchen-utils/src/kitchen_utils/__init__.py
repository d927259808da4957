"""Kitchen Utils - Utilities for matching recipes against a kitchen inventory."""

__version__ = "0.1.0"

from . import database, ingredients, pantry, recipes

__all__ = ["database", "ingredients", "pantry", "recipes"]
