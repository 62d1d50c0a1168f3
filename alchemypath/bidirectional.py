"""Bidirectional recipe search.

A backward pass from the base elements records which recipes are reachable.
A forward pass from the target then builds trees from those recipes.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field

from .model import (
    BASE_ELEMENTS,
    ElementNode,
    RecipeMap,
    SearchResult,
    TierMap,
    is_base,
    is_unbuildable,
)


@dataclass
class BidirectionalState:
    """Caches shared by the backward and forward passes."""

    forward_cache: dict[str, list[ElementNode]] = field(default_factory=dict)
    backward_cache: dict[str, list[tuple[str, ...]]] = field(default_factory=dict)
    visited_nodes: int = 0


def generate_backward_paths(
    recipes: RecipeMap, tiers: TierMap, state: BidirectionalState
) -> None:
    """Record every recipe reachable from the base elements in ``state``."""
    queue: deque[str] = deque()
    for element in sorted(BASE_ELEMENTS):
        queue.append(element)
        state.backward_cache[element] = [(element,)]

    seen = set(BASE_ELEMENTS)

    while queue:
        current = queue.popleft()
        current_tier = tiers.get(current, 0)

        for result, combos in recipes.items():
            result_tier = tiers.get(result, 0)
            if current_tier >= result_tier:
                continue

            for combo in combos:
                first, second = combo[0], combo[1]
                if current not in (first, second):
                    continue
                other = second if first == current else first
                if tiers.get(other, 0) >= result_tier:
                    continue
                if other in state.backward_cache:
                    state.backward_cache.setdefault(result, []).append(tuple(combo))
                    if result not in seen:
                        queue.append(result)
                        seen.add(result)


def _trees_from_backward(
    recipes: RecipeMap,
    tiers: TierMap,
    target: str,
    max_paths: int,
    state: BidirectionalState,
) -> list[ElementNode]:
    result: list[ElementNode] = []
    target_tier = tiers.get(target, 0)

    for path in state.backward_cache[target]:
        if len(path) == 1:
            result.append(ElementNode(result=target))
            state.visited_nodes += 1
        elif len(path) == 2:
            left_name, right_name = path
            if tiers.get(left_name, 0) >= target_tier or tiers.get(right_name, 0) >= target_tier:
                continue
            left_trees = forward_build_tree(recipes, tiers, left_name, max_paths, state)
            right_trees = forward_build_tree(recipes, tiers, right_name, max_paths, state)
            for left in left_trees:
                if len(result) >= max_paths:
                    break
                for right in right_trees:
                    if len(result) >= max_paths:
                        break
                    result.append(
                        ElementNode(
                            result=target,
                            sources=tuple(path),
                            children=[left, right],
                        )
                    )
                    state.visited_nodes += 1
        if len(result) >= max_paths:
            break

    return result


def forward_build_tree(
    recipes: RecipeMap,
    tiers: TierMap,
    target: str,
    max_paths: int,
    state: BidirectionalState,
) -> list[ElementNode]:
    """Build up to ``max_paths`` trees for ``target``, preferring backward paths.

    Every node created is counted in ``state.visited_nodes``.
    """
    if is_base(target):
        node = ElementNode(result=target)
        state.forward_cache[target] = [node]
        state.visited_nodes += 1
        return [node]

    if target in state.forward_cache:
        return state.forward_cache[target]

    if target in state.backward_cache:
        result = _trees_from_backward(recipes, tiers, target, max_paths, state)
        if result:
            state.forward_cache[target] = result
            return result

    combos = recipes.get(target)
    if combos is None:
        return []

    parent_tier = tiers.get(target, 0)
    result = []

    def expansions():
        for pair in combos:
            first, second = pair[0], pair[1]
            if is_unbuildable(first, recipes) or is_unbuildable(second, recipes):
                continue
            if tiers.get(first, 0) >= parent_tier or tiers.get(second, 0) >= parent_tier:
                continue
            left_trees = forward_build_tree(recipes, tiers, first, max_paths, state)
            right_trees = forward_build_tree(recipes, tiers, second, max_paths, state)
            for left in left_trees:
                for right in right_trees:
                    yield ElementNode(
                        result=target,
                        sources=(first, second),
                        children=[left, right],
                    )

    for node in expansions():
        state.visited_nodes += 1
        result.append(node)
        if len(result) >= max_paths:
            break

    state.forward_cache[target] = result
    return result


def main_bidirectional_bfs(
    recipes: RecipeMap, tiers: TierMap, target: str, max_paths: int
) -> SearchResult:
    """Run the bidirectional search and report trees, node count and time."""
    state = BidirectionalState()
    generate_backward_paths(recipes, tiers, state)

    start = time.perf_counter()
    trees = forward_build_tree(recipes, tiers, target, max_paths, state)
    elapsed = float(int((time.perf_counter() - start) * 1_000_000))

    return SearchResult(
        recipe_tree=list(trees),
        visited_nodes=state.visited_nodes,
        search_time=elapsed,
    )