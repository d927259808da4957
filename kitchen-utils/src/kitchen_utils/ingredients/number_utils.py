import re

_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def _is_quantity(text: str) -> bool:
    """Check if a token reads as a number, ignoring any glued-on unit.

    '4', '2.5' and '400g' are quantities; 'g' and 'eggs' are not.
    """
    return bool(_LEADING_NUMBER_RE.match(text))


def _to_float(value, default: float = 0.0) -> float:
    """Convert a stored quantity or cost to float, falling back to default."""
    if value is None:
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default
