"""Scoring of recipe ingredient lines against inventory item names."""

import logging
from typing import Iterable, Optional

from kitchen_utils.ingredients.models import IngredientMatch
from kitchen_utils.ingredients.normalization import extract_keyword, normalize_text

logger = logging.getLogger(__name__)

# Discrete match scores
NO_MATCH = 0
KEYWORD_MATCH = 0.8
CONTAINMENT_MATCH = 1

# An ingredient line counts as available at or above this score
HAVE_THRESHOLD = KEYWORD_MATCH


def _contains_either(a: str, b: str) -> bool:
    """Check if either non-empty string contains the other."""
    if not a or not b:
        return False
    return b in a or a in b


def match_score(ingredient_line: Optional[str], item_name: Optional[str]) -> float:
    """Score how well an inventory item satisfies a recipe ingredient line.

    The first applicable rule wins:

    1. One normalized string contains the other: ``1``.
    2. The line's keyword (see ``extract_keyword``) contains, or is contained
       in, the normalized item name: ``0.8``.
    3. Otherwise ``0``.

    Empty strings never match.

    Args:
        ingredient_line: Free-text recipe line, e.g. "400g spaghetti".
        item_name: Inventory item name, e.g. "Spaghetti Pasta".

    Returns:
        One of 0, 0.8 or 1.

    Examples:
        >>> match_score("fresh tomatoes", "Tomatoes")
        1
        >>> match_score("400g spaghetti", "Spaghetti Pasta")
        0.8
        >>> match_score("2 large eggs", "Fresh Tomatoes")
        0
    """
    line = normalize_text(ingredient_line)
    item = normalize_text(item_name)

    if _contains_either(line, item):
        return CONTAINMENT_MATCH

    keyword = extract_keyword(ingredient_line)
    if _contains_either(item, keyword):
        return KEYWORD_MATCH

    return NO_MATCH


def best_match(ingredient_line: str, item_names: Iterable[str]) -> IngredientMatch:
    """Find the inventory item that best satisfies an ingredient line.

    Ties keep the first item encountered. Scanning stops early on a
    containment match since nothing can beat it.

    Returns:
        IngredientMatch with the best item and its score. ``matched_item`` is
        None when no item scores above zero.
    """
    best_item = None
    best_score = NO_MATCH
    for item_name in item_names or ():
        score = match_score(ingredient_line, item_name)
        if score > best_score:
            best_item, best_score = item_name, score
            if score == CONTAINMENT_MATCH:
                break

    logger.debug(f"Best match for '{ingredient_line}': {best_item!r} ({best_score})")
    return IngredientMatch(ingredient_line, best_item, best_score)


def is_available(ingredient_line: str, item_names: Iterable[str]) -> bool:
    """Check if any inventory item satisfies the ingredient line."""
    return any(
        match_score(ingredient_line, item_name) >= HAVE_THRESHOLD
        for item_name in item_names or ()
    )
