"""Database schema definitions for kitchen databases."""

import sqlite3

DDL = """
CREATE TABLE IF NOT EXISTS app_user(
    user_id  TEXT PRIMARY KEY,
    email    TEXT UNIQUE NOT NULL,
    fullname TEXT,
    role     TEXT
);

CREATE TABLE IF NOT EXISTS recipe(
    recipe_id    TEXT PRIMARY KEY,
    title        TEXT NOT NULL,
    chef         TEXT,
    meal_type    TEXT,
    cuisine_type TEXT,
    prep_time    INTEGER,
    difficulty   TEXT,
    servings     INTEGER,
    instructions TEXT,
    created_date TEXT
);

CREATE TABLE IF NOT EXISTS recipe_ingredient(
    recipe_id TEXT,
    position  INTEGER,
    line      TEXT NOT NULL,
    PRIMARY KEY(recipe_id, position),
    FOREIGN KEY(recipe_id) REFERENCES recipe(recipe_id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS inventory(
    inventory_id    TEXT PRIMARY KEY,
    ingredient_name TEXT NOT NULL,
    quantity        REAL,
    unit            TEXT,
    category        TEXT,
    purchase_date   TEXT,
    expiration_date TEXT,
    location        TEXT,
    cost            REAL
);

"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the database schema for recipes and inventory.

    Args:
        conn: SQLite database connection
    """
    conn.executescript(DDL)
    conn.execute("PRAGMA foreign_keys = ON")
