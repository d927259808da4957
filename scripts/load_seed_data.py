#!/usr/bin/env python3
"""
Loads sample recipes and inventory from a JSON file into a SQLite database.
"""

import argparse
import json
import logging
import pathlib

from tqdm.auto import tqdm

from kitchen_utils.config import config
from kitchen_utils.database import (
    create_schema,
    get_connection,
    transaction,
    upsert_inventory_item,
    upsert_recipe,
)
from kitchen_utils.pantry import InventoryItem, is_valid_inventory_id
from kitchen_utils.recipes import Recipe, is_valid_recipe_id

logging.basicConfig(
    level=config.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def load_seed(conn, seed: dict) -> tuple:
    """Load recipes and inventory from a parsed seed file.

    Records that fail validation are logged and skipped.

    Returns:
        Tuple of (recipes loaded, inventory items loaded)
    """
    recipe_count = 0
    item_count = 0

    with transaction(conn) as cur:
        for data in tqdm(seed.get("recipes", []), desc="Loading recipes"):
            try:
                recipe = Recipe.from_dict(data)
            except ValueError as e:
                logger.error(f"⚠ Skipping recipe: {e}")
                continue
            if not is_valid_recipe_id(recipe.recipe_id):
                logger.warning(f"Recipe id '{recipe.recipe_id}' is not of the form R-#####")
            upsert_recipe(cur, recipe)
            recipe_count += 1

        for data in tqdm(seed.get("inventory", []), desc="Loading inventory"):
            try:
                item = InventoryItem.from_dict(data)
                if not is_valid_inventory_id(item.inventory_id):
                    logger.warning(
                        f"Inventory id '{item.inventory_id}' is not of the form I-#####"
                    )
                upsert_inventory_item(cur, item)
            except ValueError as e:
                logger.error(f"⚠ Skipping inventory item: {e}")
                continue
            item_count += 1

    return recipe_count, item_count


def main():
    """Main function to load seed data into the database."""
    parser = argparse.ArgumentParser(description="Load seed recipes and inventory")
    parser.add_argument(
        "--seed-file",
        type=str,
        default="data/seed.json",
        help="Path to the JSON seed file",
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=config.KITCHEN_DB_PATH,
        help="Path to the database file",
    )
    args = parser.parse_args()

    seed_file = pathlib.Path(args.seed_file)
    if not seed_file.exists():
        logger.error(f"Seed file not found: {seed_file}")
        return

    seed = json.loads(seed_file.read_text(encoding="utf-8"))
    pathlib.Path(args.db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(args.db_path)
    try:
        create_schema(conn)
        recipe_count, item_count = load_seed(conn, seed)
    finally:
        conn.close()

    logger.info(
        f"✓ Loaded {recipe_count} recipes and {item_count} inventory items into {args.db_path}"
    )


if __name__ == "__main__":
    main()
