#!/usr/bin/env python3
"""
Suggest recipes that can be cooked with the current inventory.
Ranks every recipe by the share of its ingredients found in the inventory
and lists what is missing for the suggested ones.
"""

import argparse
import logging

from kitchen_utils.config import config
from kitchen_utils.database import get_connection, load_inventory, load_recipes
from kitchen_utils.pantry import evaluate_coverage, rank_suggestions

logging.basicConfig(
    level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Main function to print ranked recipe suggestions."""
    parser = argparse.ArgumentParser(
        description="Rank recipes by how much of each the inventory covers"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=config.KITCHEN_DB_PATH,
        help="Path to the database file",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=config.SUGGESTION_THRESHOLD,
        help="Minimum coverage percent for a recipe to be suggested (clamped to 0-100)",
    )
    parser.add_argument(
        "--show-all",
        action="store_true",
        help="Print every ranked recipe, not just the suggested ones",
    )
    args = parser.parse_args()
    config.validate()

    conn = get_connection(args.db_path)
    try:
        recipes = load_recipes(conn)
        inventory = load_inventory(conn)
    finally:
        conn.close()

    item_names = [item.ingredient_name for item in inventory]
    result = rank_suggestions(recipes, item_names, args.threshold)

    shown = result.all if args.show_all else result.suggested
    if not shown:
        print(f"No recipes reach {result.threshold}% coverage.")
        return

    print(f"Recipes at or above {result.threshold}% coverage:" if not args.show_all else "All recipes:")
    for suggestion in shown:
        recipe = suggestion.recipe
        print(f"  {suggestion.percent:>3}%  {recipe.recipe_id}  {recipe.title}")
        coverage = evaluate_coverage(recipe.ingredients, item_names)
        for match in coverage.have:
            print(f"         have    {match.line}  ({match.matched_item})")
        for line in coverage.missing:
            print(f"         missing {line}")


if __name__ == "__main__":
    main()
