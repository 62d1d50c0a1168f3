"""Depth-first construction of recipe trees with a depth limit."""

from __future__ import annotations

import time
from collections.abc import Set
from typing import Optional

from .model import (
    ElementNode,
    RecipeMap,
    SearchResult,
    TierMap,
    is_base,
    is_unbuildable,
)

DEFAULT_MAX_DEPTH = 15


def build_tree_dfs(
    recipes: RecipeMap,
    tiers: TierMap,
    target: str,
    max_paths: int,
    visited: Set[str] = frozenset(),
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
    memo: Optional[dict[str, list[ElementNode]]] = None,
) -> list[ElementNode]:
    """Build up to ``max_paths`` recipe trees for ``target`` depth first.

    An element already on the current path, one beyond ``max_depth`` or one
    without recipes becomes a leaf node.
    """
    if memo is None:
        memo = {}

    if is_base(target):
        return [ElementNode(result=target)]

    if target in memo:
        return memo[target]

    if target in visited or depth > max_depth:
        return [ElementNode(result=target)]

    combos = recipes.get(target)
    if not combos:
        return [ElementNode(result=target)]

    path = frozenset(visited) | {target}
    parent_tier = tiers.get(target, 0)
    result: list[ElementNode] = []

    for combo in combos:
        if len(result) >= max_paths:
            break
        first, second = combo[0], combo[1]
        if is_unbuildable(first, recipes) or is_unbuildable(second, recipes):
            continue
        if tiers.get(first, 0) >= parent_tier or tiers.get(second, 0) >= parent_tier:
            continue
        left_trees = build_tree_dfs(
            recipes, tiers, first, max_paths, path, depth + 1, max_depth, memo
        )
        right_trees = build_tree_dfs(
            recipes, tiers, second, max_paths, path, depth + 1, max_depth, memo
        )
        for left in left_trees:
            if len(result) >= max_paths:
                break
            for right in right_trees:
                if len(result) >= max_paths:
                    break
                result.append(
                    ElementNode(
                        result=target,
                        sources=(first, second),
                        children=[left, right],
                    )
                )

    memo[target] = result
    return result


def main_dfs(
    recipes: RecipeMap, tiers: TierMap, target: str, max_recipes: int
) -> SearchResult:
    """Run the depth-first search and report trees, node count and time."""
    start = time.perf_counter()

    if is_base(target):
        return SearchResult(
            target_element=target,
            recipe_tree=[ElementNode(result=target)],
            visited_nodes=1,
            search_time=0.0,
        )

    memo: dict[str, list[ElementNode]] = {}
    trees = build_tree_dfs(
        recipes, tiers, target, max_recipes, frozenset(), 0,
        DEFAULT_MAX_DEPTH, memo,
    )
    elapsed = float(int((time.perf_counter() - start) * 1_000_000))
    return SearchResult(
        target_element=target,
        recipe_tree=list(trees),
        visited_nodes=sum(tree.count() for tree in trees),
        search_time=elapsed,
    )