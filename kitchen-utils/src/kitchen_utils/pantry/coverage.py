"""Recipe coverage against an inventory snapshot."""

import logging
import math
from typing import Iterable, List, Optional, Sequence

from kitchen_utils.ingredients.matching import HAVE_THRESHOLD, best_match
from kitchen_utils.pantry.models import RecipeCoverage

logger = logging.getLogger(__name__)


def coverage_percent(have_count: int, total: int) -> int:
    """Percentage of ``total`` covered by ``have_count``, rounded half up.

    Returns 0 when ``total`` is not positive.

    Examples:
        >>> coverage_percent(1, 8)
        13
    """
    if total <= 0:
        return 0
    percent = int(math.floor(100 * have_count / total + 0.5))
    return max(0, min(100, percent))


def evaluate_coverage(
    ingredient_lines: Optional[Sequence[str]],
    item_names: Optional[Iterable[str]],
) -> RecipeCoverage:
    """Classify each ingredient line of a recipe as available or missing.

    Every line is scored against every inventory item and keeps its best
    match. Lines whose best score reaches ``HAVE_THRESHOLD`` go to ``have``
    together with the matched item; the rest go to ``missing``. Both lists
    keep the recipe's ingredient order.

    Args:
        ingredient_lines: The recipe's ingredient lines.
        item_names: Names of the items currently in the inventory.

    Returns:
        RecipeCoverage with the have/missing split and the coverage percent.
        An empty ingredient list gives 0 percent.
    """
    lines: List[str] = list(ingredient_lines or [])
    items: List[str] = list(item_names or [])

    have = []
    missing = []
    for line in lines:
        match = best_match(line, items)
        if match.score >= HAVE_THRESHOLD:
            have.append(match)
        else:
            missing.append(line)

    percent = coverage_percent(len(have), len(lines))
    logger.debug(
        f"Coverage: {len(have)}/{len(lines)} ingredients available ({percent}%)"
    )
    return RecipeCoverage(have=have, missing=missing, percent=percent)
