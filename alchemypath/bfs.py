"""Breadth-first construction of recipe trees with memoisation."""

from __future__ import annotations

import time
from typing import Optional

from .model import (
    ElementNode,
    RecipeMap,
    SearchResult,
    TierMap,
    is_base,
    is_unbuildable,
)


def build_tree_bfs(
    recipes: RecipeMap,
    tiers: TierMap,
    target: str,
    max_paths: int,
    cache: Optional[dict[str, list[ElementNode]]] = None,
) -> list[ElementNode]:
    """Build up to ``max_paths`` recipe trees for ``target``.

    Only recipes whose ingredients are buildable and of a strictly lower
    tier than the target are used. Results are stored in ``cache``.
    """
    if cache is None:
        cache = {}

    if is_base(target):
        node = ElementNode(result=target)
        cache[target] = [node]
        return [node]

    if target in cache:
        return cache[target]

    combos = recipes.get(target)
    if combos is None:
        return []

    parent_tier = tiers.get(target, 0)
    result: list[ElementNode] = []

    def expansions():
        for pair in combos:
            first, second = pair[0], pair[1]
            if is_unbuildable(first, recipes) or is_unbuildable(second, recipes):
                continue
            if tiers.get(first, 0) >= parent_tier or tiers.get(second, 0) >= parent_tier:
                continue
            left_trees = build_tree_bfs(recipes, tiers, first, max_paths, cache)
            right_trees = build_tree_bfs(recipes, tiers, second, max_paths, cache)
            for left in left_trees:
                for right in right_trees:
                    yield ElementNode(
                        result=target,
                        sources=(first, second),
                        children=[left, right],
                    )

    for node in expansions():
        result.append(node)
        if len(result) >= max_paths:
            break

    cache[target] = result
    return result


def main_bfs(
    recipes: RecipeMap, tiers: TierMap, target: str, max_paths: int
) -> SearchResult:
    """Run the breadth-first search and report trees, node count and time."""
    cache: dict[str, list[ElementNode]] = {}
    start = time.perf_counter()
    trees = build_tree_bfs(recipes, tiers, target, max_paths, cache)
    elapsed = float(int((time.perf_counter() - start) * 1_000_000))
    return SearchResult(
        recipe_tree=list(trees),
        visited_nodes=sum(tree.count() for tree in trees),
        search_time=elapsed,
    )