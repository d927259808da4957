"""Ranking of recipes by how much of each the inventory covers."""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from kitchen_utils.config import config
from kitchen_utils.ingredients.matching import is_available
from kitchen_utils.pantry.coverage import coverage_percent
from kitchen_utils.pantry.models import RecipeSuggestion, SuggestionResult
from kitchen_utils.recipes.parsing import parse_ingredient_lines

logger = logging.getLogger(__name__)


def clamp_threshold(threshold: Any = None) -> int:
    """Coerce a caller-supplied threshold into an integer in [0, 100].

    Out-of-range values are clamped. None or non-numeric values fall back
    to the configured ``SUGGESTION_THRESHOLD``.
    """
    if isinstance(threshold, int) and not isinstance(threshold, bool):
        return max(0, min(100, threshold))
    try:
        value = int(float(threshold))
    except (ValueError, TypeError, OverflowError):
        value = config.SUGGESTION_THRESHOLD
    return max(0, min(100, value))


def recipe_ingredients(recipe: Any) -> List[str]:
    """Get the ingredient lines of a Recipe record or a plain mapping.

    A list is used as given so the percent matches ``evaluate_coverage``;
    only free text is split into lines.
    """
    if isinstance(recipe, Mapping):
        ingredients = recipe.get("ingredients")
    else:
        ingredients = getattr(recipe, "ingredients", None)
    if ingredients is None or isinstance(ingredients, str):
        return parse_ingredient_lines(ingredients)
    return list(ingredients)


def recipe_percent(ingredient_lines: List[str], item_names: List[str]) -> int:
    """Coverage percent of one recipe, counting lines with any matching item."""
    have_count = sum(1 for line in ingredient_lines if is_available(line, item_names))
    return coverage_percent(have_count, max(len(ingredient_lines), 1))


def rank_suggestions(
    recipes: Optional[Iterable[Any]],
    item_names: Optional[Iterable[str]],
    threshold: Any = None,
) -> SuggestionResult:
    """Rank recipes by how much of each the inventory covers.

    Recipes are sorted by coverage percent, highest first. The sort is
    stable, so recipes with equal coverage keep their original order.

    Args:
        recipes: Recipe records or mappings with an ``ingredients`` list.
        item_names: Names of the items currently in the inventory.
        threshold: Minimum percent for a recipe to be suggested. Clamped to
            [0, 100]; defaults to the configured ``SUGGESTION_THRESHOLD``.

    Returns:
        SuggestionResult with every recipe ranked in ``all`` and the ones at
        or above the threshold in ``suggested``.
    """
    threshold = clamp_threshold(threshold)
    items = list(item_names or [])

    ranked = [
        RecipeSuggestion(recipe, recipe_percent(recipe_ingredients(recipe), items))
        for recipe in recipes or []
    ]
    ranked.sort(key=lambda suggestion: suggestion.percent, reverse=True)
    suggested = [s for s in ranked if s.percent >= threshold]

    logger.info(
        f"Ranked {len(ranked)} recipes against {len(items)} inventory items, "
        f"{len(suggested)} at or above {threshold}%"
    )
    return SuggestionResult(all=ranked, suggested=suggested, threshold=threshold)
