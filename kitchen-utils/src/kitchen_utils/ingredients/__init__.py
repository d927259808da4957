"""Ingredient normalization and matching utilities."""

from .matching import (
    CONTAINMENT_MATCH,
    HAVE_THRESHOLD,
    KEYWORD_MATCH,
    NO_MATCH,
    best_match,
    is_available,
    match_score,
)
from .models import IngredientMatch
from .normalization import STOP_WORDS, content_tokens, extract_keyword, normalize_text

__all__ = [
    "normalize_text",
    "content_tokens",
    "extract_keyword",
    "STOP_WORDS",
    "match_score",
    "best_match",
    "is_available",
    "NO_MATCH",
    "KEYWORD_MATCH",
    "CONTAINMENT_MATCH",
    "HAVE_THRESHOLD",
    "IngredientMatch",
]
