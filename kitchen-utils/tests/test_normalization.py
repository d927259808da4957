import re

import pytest
from kitchen_utils.ingredients.normalization import (
    STOP_WORDS,
    content_tokens,
    extract_keyword,
    normalize_text,
)


@pytest.mark.parametrize(
    "input_text, expected_text",
    [
        ("Fresh Tomatoes", "fresh tomatoes"),
        ("  lots   of   whitespace  ", "lots of whitespace"),
        ("Salt & pepper, to taste", "salt pepper to taste"),
        ("1/2 cup sugar", "1 2 cup sugar"),
        ("tomato,diced", "tomato diced"),
        ("Crème fraîche!", "crème fraîche"),
        ("tabs\tand\nnewlines", "tabs and newlines"),
        ("---", ""),
    ],
)
def test_normalize_text(input_text, expected_text):
    """Test that normalize_text lower-cases and strips punctuation and whitespace."""
    assert normalize_text(input_text) == expected_text


@pytest.mark.parametrize("empty", ["", None, "   "])
def test_normalize_text_empty(empty):
    """Test that normalize_text treats empty and missing input as an empty string."""
    assert normalize_text(empty) == ""


@pytest.mark.parametrize(
    "input_text",
    ["Hello,, world!!", "a  -  b", "(about 2 oz) gin", "x\t\t\ty", "...tomatoes..."],
)
def test_normalize_text_has_no_punctuation_or_repeated_whitespace(input_text):
    normalized = normalize_text(input_text)
    assert not re.search(r"\s\s", normalized)
    assert not re.search(r"[^\w\s]", normalized)
    assert normalized == normalized.strip()


@pytest.mark.parametrize(
    "input_text, expected_keyword",
    [
        ("2 ripe avocados", "avocados"),
        ("400g spaghetti", "spaghetti"),
        ("4 large eggs", "eggs"),
        ("100g Pecorino Romano", "pecorino romano"),
        ("Black pepper", "black pepper"),
        ("2 slices sourdough bread", "sourdough bread"),
        ("1 cup extra virgin olive oil", "olive oil"),
        ("tomato, diced", "tomato diced"),
        ("2 tbsp", ""),
        ("", ""),
    ],
)
def test_extract_keyword(input_text, expected_keyword):
    """Test that extract_keyword keeps the last two content words."""
    assert extract_keyword(input_text) == expected_keyword


def test_content_tokens_drops_stop_words_and_quantities():
    assert content_tokens("2 kg small fresh ripe tomatoes") == ["tomatoes"]
    assert content_tokens("3 pieces 1.5 ml salt") == ["salt"]


def test_stop_words_include_units_and_descriptors():
    for word in ("g", "kg", "ml", "l", "tbsp", "tsp", "cup", "cups"):
        assert word in STOP_WORDS
    for word in ("large", "small", "ripe", "fresh", "pieces", "slice", "slices"):
        assert word in STOP_WORDS
