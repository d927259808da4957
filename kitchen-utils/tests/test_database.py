import sqlite3

import pytest
from kitchen_utils.database import (
    create_schema,
    get_connection,
    get_coverage_frame,
    get_dashboard_counts,
    load_inventory,
    load_recipes,
    transaction,
    upsert_inventory_item,
    upsert_recipe,
    upsert_user,
    validate_unit_coverage,
)
from kitchen_utils.pantry import InventoryItem, rank_suggestions
from kitchen_utils.recipes import Recipe

CARBONARA = Recipe(
    recipe_id="R-00001",
    title="Classic Spaghetti Carbonara",
    ingredients=[
        "400g spaghetti",
        "200g pancetta",
        "4 large eggs",
        "100g Pecorino Romano",
        "Black pepper",
    ],
    instructions=["Boil salted water for pasta", "Cook pancetta until crispy"],
    chef="MarioRossi",
    meal_type="Dinner",
    servings=4,
)

SPAGHETTI = InventoryItem(
    inventory_id="I-00002",
    ingredient_name="Spaghetti Pasta",
    quantity=2,
    unit="kg",
    category="Grains",
    expiration_date="2025-12-15",
    location="Pantry",
    cost=8.9,
)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test_kitchen.db"


@pytest.fixture
def temp_db(db_path):
    conn = get_connection(db_path)
    create_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def seeded_db(temp_db):
    with transaction(temp_db) as cur:
        upsert_user(cur, "U-00001", "chef@example.com", "Mario Rossi", "chef")
        upsert_recipe(cur, CARBONARA)
        upsert_inventory_item(cur, SPAGHETTI)
    return temp_db


def test_round_trip_recipe(seeded_db):
    recipes = load_recipes(seeded_db)
    assert len(recipes) == 1
    assert recipes[0].recipe_id == "R-00001"
    assert recipes[0].ingredients == CARBONARA.ingredients
    assert recipes[0].instructions == CARBONARA.instructions
    assert recipes[0].servings == 4


def test_upsert_recipe_replaces_ingredient_lines(seeded_db):
    updated = Recipe(
        recipe_id="R-00001",
        title="Quick Carbonara",
        ingredients=["400g spaghetti", "2 eggs"],
    )
    with transaction(seeded_db) as cur:
        upsert_recipe(cur, updated)

    recipes = load_recipes(seeded_db)
    assert len(recipes) == 1
    assert recipes[0].title == "Quick Carbonara"
    assert recipes[0].ingredients == ["400g spaghetti", "2 eggs"]


def test_load_inventory(seeded_db):
    items = load_inventory(seeded_db)
    assert items == [SPAGHETTI]


def test_upsert_inventory_item_requires_id(temp_db):
    item = InventoryItem(inventory_id=None, ingredient_name="Salt")
    with pytest.raises(ValueError):
        with transaction(temp_db) as cur:
            upsert_inventory_item(cur, item)
    assert load_inventory(temp_db) == []


def test_transaction_rolls_back(temp_db):
    with pytest.raises(sqlite3.IntegrityError):
        with transaction(temp_db) as cur:
            upsert_recipe(cur, CARBONARA)
            cur.execute("INSERT INTO recipe(recipe_id, title) VALUES (?, NULL)", ("R-00002",))
    assert load_recipes(temp_db) == []


def test_get_dashboard_counts(seeded_db):
    assert get_dashboard_counts(seeded_db) == {
        "total_users": 1,
        "recipe_count": 1,
        "inventory_count": 1,
    }


def test_get_coverage_frame(seeded_db):
    df = get_coverage_frame(seeded_db)

    assert list(df["ingredient_line"]) == CARBONARA.ingredients
    assert list(df["have"]) == [True, False, False, False, False]
    assert df.loc[0, "matched_item"] == "Spaghetti Pasta"
    assert df.loc[0, "score"] == 0.8
    assert df["matched_item"].iloc[1:].isna().all()
    assert round(100 * df["have"].mean()) == 20


def test_get_coverage_frame_empty(temp_db):
    df = get_coverage_frame(temp_db)
    assert df.empty
    assert "have" in df.columns


def test_suggestions_from_database(seeded_db):
    recipes = load_recipes(seeded_db)
    names = [item.ingredient_name for item in load_inventory(seeded_db)]
    result = rank_suggestions(recipes, names, threshold=20)
    assert [(s.recipe.recipe_id, s.percent) for s in result.suggested] == [("R-00001", 20)]


def test_validate_unit_coverage(seeded_db, db_path):
    assert validate_unit_coverage(db_path) == set()

    odd = InventoryItem(inventory_id="I-00003", ingredient_name="Basil", quantity=1, unit="bunch")
    with transaction(seeded_db) as cur:
        upsert_inventory_item(cur, odd)
    assert validate_unit_coverage(db_path) == {"bunch"}
