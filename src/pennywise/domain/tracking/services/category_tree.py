"""Category hierarchy built once from a flat category list."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Iterator, List, Optional, Set

from pennywise.domain.tracking.entities import Category


class CategoryTree:
    """Index categories by id and by parent for repeated tree walks.

    The stored form only has ``parent_id`` back-references. Building both maps
    up front turns every descendant lookup into a walk over the children
    index instead of a scan of the whole list per level. The hierarchy is
    assumed acyclic; a visited set keeps a walk finite if it is not.
    """

    def __init__(self, categories: Iterable[Category]):
        self._nodes: dict[str, Category] = {}
        self._children: dict[str, List[str]] = defaultdict(list)

        for category in categories:
            self._nodes[category.id] = category
            if category.parent_id is not None:
                self._children[category.parent_id].append(category.id)

    @classmethod
    def from_categories(cls, categories: Iterable[Category]) -> CategoryTree:
        return cls(categories)

    @classmethod
    def coerce(cls, categories: Iterable[Category] | CategoryTree) -> CategoryTree:
        """Reuse an existing tree, or build one from a flat list."""
        if isinstance(categories, CategoryTree):
            return categories
        return cls(categories)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._nodes.values())

    def get(self, category_id: str) -> Optional[Category]:
        return self._nodes.get(category_id)

    def children_of(self, category_id: str) -> List[Category]:
        return [self._nodes[child] for child in self._children.get(category_id, [])]

    def find_child(self, parent_id: str, child_id: str) -> Optional[Category]:
        for child in self.children_of(parent_id):
            if child.id == child_id:
                return child
        return None

    def descendant_ids(self, category_id: str) -> Set[str]:
        """Return ``category_id`` plus the ids of everything below it.

        The id itself is included even when it is not a known category, so a
        filter on a deleted category still matches its own transactions.
        """
        found: Set[str] = {category_id}
        stack = [category_id]

        while stack:
            current = stack.pop()
            for child in self._children.get(current, []):
                if child not in found:
                    found.add(child)
                    stack.append(child)

        return found

    def expand(self, category_ids: Iterable[str]) -> Set[str]:
        expanded: Set[str] = set()
        for category_id in category_ids:
            expanded |= self.descendant_ids(category_id)
        return expanded

    def roots(self) -> List[Category]:
        return [c for c in self._nodes.values() if c.parent_id is None]
