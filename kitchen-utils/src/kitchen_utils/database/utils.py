"""Database utility functions for kitchen databases."""

import contextlib
import logging
import pathlib
import sqlite3
from typing import Generator, List, Optional, Union

import pandas as pd

from kitchen_utils.ingredients.matching import HAVE_THRESHOLD, best_match
from kitchen_utils.pantry.inventory import InventoryItem
from kitchen_utils.recipes.parsing import Recipe, parse_ingredient_lines

logger = logging.getLogger(__name__)

COVERAGE_COLUMNS = [
    "recipe_id",
    "title",
    "position",
    "ingredient_line",
    "matched_item",
    "score",
    "have",
]


def get_connection(db_path: Union[str, pathlib.Path]) -> sqlite3.Connection:
    """Get a SQLite database connection with foreign keys enabled.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with foreign keys enabled
    """
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextlib.contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Context manager for database transactions.

    Args:
        conn: SQLite database connection

    Yields:
        Database cursor for executing queries

    Example:
        with transaction(conn) as cur:
            upsert_recipe(cur, recipe)
    """
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def upsert_user(
    cur: sqlite3.Cursor,
    user_id: str,
    email: str,
    fullname: Optional[str] = None,
    role: Optional[str] = None,
) -> None:
    """Insert a user or update the existing row with the same id."""
    cur.execute(
        """
        INSERT INTO app_user(user_id, email, fullname, role) VALUES (?, ?, ?, ?)
        ON CONFLICT(user_id) DO UPDATE SET
            email = excluded.email,
            fullname = excluded.fullname,
            role = excluded.role
        """,
        (user_id, email, fullname, role),
    )


def upsert_recipe(cur: sqlite3.Cursor, recipe: Recipe) -> str:
    """Insert a recipe or replace the existing one with the same id.

    The ingredient lines are rewritten in order.

    Returns:
        The recipe id
    """
    cur.execute(
        """
        INSERT INTO recipe(
            recipe_id, title, chef, meal_type, cuisine_type, prep_time,
            difficulty, servings, instructions, created_date
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        ON CONFLICT(recipe_id) DO UPDATE SET
            title = excluded.title,
            chef = excluded.chef,
            meal_type = excluded.meal_type,
            cuisine_type = excluded.cuisine_type,
            prep_time = excluded.prep_time,
            difficulty = excluded.difficulty,
            servings = excluded.servings,
            instructions = excluded.instructions,
            created_date = excluded.created_date
        """,
        (
            recipe.recipe_id,
            recipe.title,
            recipe.chef,
            recipe.meal_type,
            recipe.cuisine_type,
            recipe.prep_time,
            recipe.difficulty,
            recipe.servings,
            "\n".join(recipe.instructions),
            recipe.created_date,
        ),
    )
    cur.execute("DELETE FROM recipe_ingredient WHERE recipe_id = ?", (recipe.recipe_id,))
    cur.executemany(
        "INSERT INTO recipe_ingredient(recipe_id, position, line) VALUES (?, ?, ?)",
        [(recipe.recipe_id, i, line) for i, line in enumerate(recipe.ingredients)],
    )
    return recipe.recipe_id


def upsert_inventory_item(cur: sqlite3.Cursor, item: InventoryItem) -> str:
    """Insert an inventory item or replace the existing one with the same id.

    Returns:
        The inventory id

    Raises:
        ValueError: If the item has no inventory id
    """
    if not item.inventory_id:
        raise ValueError(f"Inventory item '{item.ingredient_name}' has no inventory id")

    cur.execute(
        """
        INSERT OR REPLACE INTO inventory(
            inventory_id, ingredient_name, quantity, unit, category,
            purchase_date, expiration_date, location, cost
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            item.inventory_id,
            item.ingredient_name,
            item.quantity,
            item.unit,
            item.category,
            item.purchase_date,
            item.expiration_date,
            item.location,
            item.cost,
        ),
    )
    return item.inventory_id


def load_recipes(conn: sqlite3.Connection) -> List[Recipe]:
    """Load all recipes with their ingredient lines in recipe order.

    Recipes are returned ordered by id.
    """
    cur = conn.cursor()
    cur.execute("SELECT recipe_id, position, line FROM recipe_ingredient ORDER BY recipe_id, position")
    lines_by_recipe = {}
    for recipe_id, _, line in cur.fetchall():
        lines_by_recipe.setdefault(recipe_id, []).append(line)

    cur.execute(
        """
        SELECT recipe_id, title, chef, meal_type, cuisine_type, prep_time,
               difficulty, servings, instructions, created_date
        FROM recipe
        ORDER BY recipe_id
        """
    )
    recipes = []
    for row in cur.fetchall():
        (recipe_id, title, chef, meal_type, cuisine_type, prep_time,
         difficulty, servings, instructions, created_date) = row
        recipes.append(
            Recipe(
                recipe_id=recipe_id,
                title=title,
                ingredients=lines_by_recipe.get(recipe_id, []),
                instructions=parse_ingredient_lines(instructions),
                chef=chef,
                meal_type=meal_type,
                cuisine_type=cuisine_type,
                prep_time=prep_time,
                difficulty=difficulty,
                servings=servings,
                created_date=created_date,
            )
        )
    logger.debug(f"Loaded {len(recipes)} recipes")
    return recipes


def load_inventory(conn: sqlite3.Connection) -> List[InventoryItem]:
    """Load all inventory items ordered by id."""
    cur = conn.cursor()
    cur.execute(
        """
        SELECT inventory_id, ingredient_name, quantity, unit, category,
               purchase_date, expiration_date, location, cost
        FROM inventory
        ORDER BY inventory_id
        """
    )
    items = [InventoryItem(*row) for row in cur.fetchall()]
    logger.debug(f"Loaded {len(items)} inventory items")
    return items


def get_dashboard_counts(conn: sqlite3.Connection) -> dict:
    """Count users, recipes and inventory items.

    Returns:
        Dictionary with total_users, recipe_count and inventory_count
    """
    cur = conn.cursor()
    counts = {}
    for key, table in (
        ("total_users", "app_user"),
        ("recipe_count", "recipe"),
        ("inventory_count", "inventory"),
    ):
        cur.execute(f"SELECT COUNT(*) FROM {table}")
        counts[key] = cur.fetchone()[0]
    return counts


def get_coverage_frame(conn: sqlite3.Connection) -> pd.DataFrame:
    """Match every recipe ingredient line against the current inventory.

    Args:
        conn: SQLite database connection

    Returns:
        DataFrame with one row per (recipe, ingredient line) and columns:
        recipe_id, title, position, ingredient_line, matched_item, score, have
    """
    recipes = load_recipes(conn)
    item_names = [item.ingredient_name for item in load_inventory(conn)]
    logger.info(
        f"Matching {len(recipes)} recipes against {len(item_names)} inventory items"
    )

    rows = []
    for recipe in recipes:
        for position, line in enumerate(recipe.ingredients):
            match = best_match(line, item_names)
            rows.append(
                {
                    "recipe_id": recipe.recipe_id,
                    "title": recipe.title,
                    "position": position,
                    "ingredient_line": line,
                    "matched_item": match.matched_item if match.score >= HAVE_THRESHOLD else None,
                    "score": match.score,
                    "have": match.score >= HAVE_THRESHOLD,
                }
            )

    return pd.DataFrame(rows, columns=COVERAGE_COLUMNS)
