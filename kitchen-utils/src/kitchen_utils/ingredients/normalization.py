"""Ingredient text normalization utilities."""

import re
from typing import List, Optional

from kitchen_utils.ingredients.number_utils import _is_quantity

# Units of measure that carry no information about what the ingredient is
UNIT_STOP_WORDS = {"g", "kg", "ml", "l", "tbsp", "tsp", "cup", "cups"}

# Descriptive words that qualify an ingredient rather than name it
DESCRIPTOR_STOP_WORDS = {"large", "small", "ripe", "fresh", "pieces", "slice", "slices"}

STOP_WORDS = UNIT_STOP_WORDS | DESCRIPTOR_STOP_WORDS

# Number of trailing content tokens kept as the keyword
KEYWORD_TOKENS = 2

_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """Normalize ingredient or inventory text for comparison.

    Lower-cases the text, turns every character that is neither a word
    character nor whitespace into a space, collapses whitespace runs and
    strips the ends.

    Args:
        text: Raw ingredient line or inventory item name. None is treated
              as an empty string.

    Returns:
        Normalized text with no punctuation and no repeated whitespace.

    Examples:
        >>> normalize_text("Fresh  Tomatoes!")
        'fresh tomatoes'
        >>> normalize_text("Salt & pepper, to taste")
        'salt pepper to taste'
    """
    if text is None:
        return ""
    text = _PUNCTUATION_RE.sub(" ", str(text).lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def content_tokens(ingredient_line: Optional[str]) -> List[str]:
    """Split an ingredient line into tokens that name the ingredient.

    Stop words (units and descriptors) and quantity tokens such as "4" or
    "400g" are dropped.
    """
    normalized = normalize_text(ingredient_line)
    if not normalized:
        return []
    return [
        token
        for token in normalized.split(" ")
        if token not in STOP_WORDS and not _is_quantity(token)
    ]


def extract_keyword(ingredient_line: Optional[str]) -> str:
    """Reduce an ingredient line to its trailing content words.

    Ingredient lines usually read ``<quantity> <unit> <adjectives> <noun>``,
    so the last content tokens approximate the ingredient name.

    Args:
        ingredient_line: Raw ingredient line, e.g. "2 ripe avocados".

    Returns:
        Up to the last two content tokens joined by a space, or an empty
        string when nothing is left.

    Examples:
        >>> extract_keyword("2 ripe avocados")
        'avocados'
        >>> extract_keyword("100g Pecorino Romano")
        'pecorino romano'
    """
    return " ".join(content_tokens(ingredient_line)[-KEYWORD_TOKENS:])
