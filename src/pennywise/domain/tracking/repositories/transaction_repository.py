"""Transaction repository interface.

The tracker owns persistence; this package only reads. Implementations
return records in stored order.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from pennywise.domain.tracking.entities import Transaction


class TransactionRepository(ABC):
    """Read access to recorded transactions."""

    @abstractmethod
    def find_all(self) -> List[Transaction]:
        """Return every transaction, in stored order."""

    @abstractmethod
    def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Find transaction by ID."""
