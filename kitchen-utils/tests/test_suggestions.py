import pytest
from kitchen_utils.pantry import (
    clamp_threshold,
    evaluate_coverage,
    rank_suggestions,
    recipe_ingredients,
)
from kitchen_utils.recipes import Recipe

INVENTORY = ["Fresh Tomatoes", "Spaghetti Pasta"]


@pytest.fixture
def recipes():
    return [
        {
            "id": "R-00001",
            "ingredients": [
                "400g spaghetti",
                "200g pancetta",
                "4 large eggs",
                "100g Pecorino Romano",
                "Black pepper",
            ],
        },
        {"id": "R-00002", "ingredients": ["1 tomato", "Feta cheese", "Olive oil"]},
        {"id": "R-00003", "ingredients": ["400g spaghetti", "2 ripe tomatoes"]},
        {"id": "R-00004", "ingredients": ["Salt", "Spaghetti"]},
        {"id": "R-00005", "ingredients": []},
    ]


def _ids(suggestions):
    return [s.recipe["id"] for s in suggestions]


def test_rank_suggestions_orders_by_percent(recipes):
    result = rank_suggestions(recipes, INVENTORY, threshold=60)

    assert _ids(result.all) == ["R-00003", "R-00004", "R-00002", "R-00001", "R-00005"]
    assert [s.percent for s in result.all] == [100, 50, 33, 20, 0]
    assert _ids(result.suggested) == ["R-00003"]
    assert result.threshold == 60


def test_ties_keep_collection_order():
    recipes = [
        {"id": "a", "ingredients": ["eggs"]},
        {"id": "b", "ingredients": ["spaghetti"]},
        {"id": "c", "ingredients": ["flour"]},
        {"id": "d", "ingredients": ["tomatoes"]},
    ]
    result = rank_suggestions(recipes, INVENTORY, threshold=0)
    assert _ids(result.all) == ["b", "d", "a", "c"]
    assert _ids(result.suggested) == ["b", "d", "a", "c"]


@pytest.mark.parametrize(
    "threshold, expected",
    [
        (150, 100),
        (100, 100),
        (-20, 0),
        (60, 60),
        ("75", 75),
        (33.7, 33),
        (10**400, 100),
        (-10**400, 0),
    ],
)
def test_clamp_threshold(threshold, expected):
    assert clamp_threshold(threshold) == expected


@pytest.mark.parametrize("threshold", [None, "lots", float("nan")])
def test_clamp_threshold_falls_back_to_config(threshold, monkeypatch):
    from kitchen_utils.config import config

    monkeypatch.setattr(config, "SUGGESTION_THRESHOLD", 45)
    assert clamp_threshold(threshold) == 45


def test_threshold_above_100_behaves_like_100(recipes):
    over = rank_suggestions(recipes, INVENTORY, threshold=150)
    at = rank_suggestions(recipes, INVENTORY, threshold=100)
    assert _ids(over.suggested) == _ids(at.suggested) == ["R-00003"]
    assert _ids(over.all) == _ids(at.all)


def test_threshold_below_zero_suggests_everything(recipes):
    result = rank_suggestions(recipes, INVENTORY, threshold=-5)
    assert len(result.suggested) == len(recipes)


def test_empty_collections():
    assert rank_suggestions([], INVENTORY).all == []
    assert rank_suggestions(None, INVENTORY).suggested == []

    result = rank_suggestions([{"id": "x", "ingredients": ["eggs"]}], [])
    assert [s.percent for s in result.all] == [0]
    assert result.suggested == []


def test_accepts_recipe_records():
    recipe = Recipe(recipe_id="R-00010", title="Pasta", ingredients=["400g spaghetti"])
    result = rank_suggestions([recipe], INVENTORY, threshold=100)
    assert result.suggested[0].recipe is recipe
    assert result.suggested[0].percent == 100


def test_recipe_ingredients():
    assert recipe_ingredients({"ingredients": ["  eggs ", ""]}) == ["  eggs ", ""]
    assert recipe_ingredients({"ingredients": "eggs\nflour"}) == ["eggs", "flour"]
    assert recipe_ingredients({}) == []
    assert recipe_ingredients(object()) == []


@pytest.mark.parametrize(
    "lines",
    [
        ["400g spaghetti", ""],
        ["400g spaghetti", "   ", "2 eggs"],
        ["1 tomato", "Feta cheese", "Olive oil"],
    ],
)
def test_rank_percent_matches_coverage(lines):
    result = rank_suggestions([{"id": "x", "ingredients": lines}], INVENTORY, threshold=0)
    assert result.all[0].percent == evaluate_coverage(lines, INVENTORY).percent
