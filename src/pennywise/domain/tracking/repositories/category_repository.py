"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pennywise.domain.tracking.entities import Category


class CategoryRepository(ABC):
    """Read access to categories (flat list, parents by back-reference)."""

    @abstractmethod
    def find_all(self) -> List[Category]:
        """Return every category, in stored order."""

    @abstractmethod
    def find_by_id(self, category_id: str) -> Optional[Category]:
        """Find category by ID."""
