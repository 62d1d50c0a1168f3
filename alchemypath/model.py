"""Core data types shared by the recipe search algorithms."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

RecipeMap = Mapping[str, Sequence[Sequence[str]]]
TierMap = Mapping[str, int]

BASE_ELEMENTS = frozenset({"water", "fire", "earth", "air"})


def is_base(element: str) -> bool:
    """Return True if the element is one of the four starting elements."""
    return element in BASE_ELEMENTS


def is_unbuildable(element: str, recipes: RecipeMap) -> bool:
    """Return True if the element is not basic and has no known recipe."""
    return not is_base(element) and not recipes.get(element)


@dataclass
class ElementNode:
    """One element in a recipe tree, with the pair that produced it."""

    result: str
    sources: Optional[tuple[str, ...]] = None
    children: list[ElementNode] = field(default_factory=list)

    def count(self) -> int:
        """Number of nodes in the tree rooted at this node."""
        return 1 + sum(child.count() for child in self.children)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation of the tree."""
        return {
            "name": self.result,
            "sources": list(self.sources) if self.sources is not None else None,
            "children": [child.to_dict() for child in self.children] or None,
        }


@dataclass
class SearchResult:
    """Outcome of a search: the trees found, node count and elapsed time."""

    target_element: str = ""
    recipe_tree: list[ElementNode] = field(default_factory=list)
    visited_nodes: int = 0
    search_time: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation of the result."""
        return {
            "targetElement": self.target_element,
            "tree": [node.to_dict() for node in self.recipe_tree],
            "nodes": self.visited_nodes,
            "time": self.search_time,
        }