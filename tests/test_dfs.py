import pytest

from alchemypath.dfs import build_tree_dfs, main_dfs


@pytest.fixture
def book():
    recipes = {
        "water": [], "fire": [], "earth": [], "air": [],
        "steam": [["water", "fire"]],
        "lava": [["earth", "fire"]],
        "pressure": [["air", "air"]],
        "stone": [["lava", "air"], ["earth", "pressure"]],
        "ghost": [["mystery", "air"]],
        "loop": [["steam", "air"]],
    }
    tiers = {
        "water": 0, "fire": 0, "earth": 0, "air": 0,
        "steam": 1, "lava": 1, "pressure": 1, "stone": 2,
        "ghost": 3, "loop": 1,
    }
    return recipes, tiers


def test_base_target(book):
    recipes, tiers = book
    res = main_dfs(recipes, tiers, "fire", 3)
    assert res.target_element == "fire"
    assert [n.result for n in res.recipe_tree] == ["fire"]
    assert res.visited_nodes == 1
    assert res.search_time == 0


def test_simple_recipe(book):
    recipes, tiers = book
    res = main_dfs(recipes, tiers, "steam", 3)
    assert res.target_element == "steam"
    assert len(res.recipe_tree) == 1
    assert res.recipe_tree[0].sources == ("water", "fire")
    assert res.visited_nodes == res.recipe_tree[0].count()


def test_all_recipes_found(book):
    recipes, tiers = book
    res = main_dfs(recipes, tiers, "stone", 5)
    assert [t.sources for t in res.recipe_tree] == [
        ("lava", "air"),
        ("earth", "pressure"),
    ]
    assert res.visited_nodes == sum(t.count() for t in res.recipe_tree)


def test_max_recipes_limits(book):
    recipes, tiers = book
    res = main_dfs(recipes, tiers, "stone", 1)
    assert [t.sources for t in res.recipe_tree] == [("lava", "air")]


def test_zero_max_paths_gives_nothing(book):
    recipes, tiers = book
    assert build_tree_dfs(recipes, tiers, "stone", 0, frozenset(), 0, 15, {}) == []


def test_unknown_target_becomes_leaf(book):
    recipes, tiers = book
    trees = build_tree_dfs(recipes, tiers, "nothing", 5, frozenset(), 0, 15, {})
    assert [(t.result, t.sources, t.children) for t in trees] == [
        ("nothing", None, [])
    ]


def test_visited_target_becomes_leaf(book):
    recipes, tiers = book
    trees = build_tree_dfs(recipes, tiers, "steam", 5, frozenset({"steam"}), 0, 15, {})
    assert len(trees) == 1
    assert trees[0].sources is None


def test_depth_limit_makes_leaf(book):
    recipes, tiers = book
    trees = build_tree_dfs(recipes, tiers, "stone", 5, frozenset(), 3, 2, {})
    assert len(trees) == 1
    assert trees[0].result == "stone"
    assert trees[0].children == []


def test_unbuildable_and_tier_skips(book):
    recipes, tiers = book
    assert main_dfs(recipes, tiers, "ghost", 5).recipe_tree == []
    assert main_dfs(recipes, tiers, "loop", 5).recipe_tree == []


def test_memo_filled(book):
    recipes, tiers = book
    memo = {}
    trees = build_tree_dfs(recipes, tiers, "stone", 5, frozenset(), 0, 15, memo)
    assert memo["stone"] is trees
    assert build_tree_dfs(recipes, tiers, "stone", 5, frozenset(), 0, 15, memo) is trees