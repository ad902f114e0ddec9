"""Transaction and category classification enums."""

from enum import Enum


class TransactionType(str, Enum):
    """Kinds of transaction a user can record."""

    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"  # Between own accounts, never counted as flow
    REFUND = "refund"  # Counts as income in summaries
    RECURRING = "recurring"  # Template, its generated copies carry the real type

    def is_inflow(self) -> bool:
        return self in (TransactionType.INCOME, TransactionType.REFUND)


# Types that take part in balance and summary arithmetic
MONETARY_TYPES: frozenset[TransactionType] = frozenset(
    {TransactionType.INCOME, TransactionType.EXPENSE, TransactionType.REFUND},
)


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class CategoryType(str, Enum):
    """Categories are either income or expense; fixed at creation."""

    INCOME = "income"
    EXPENSE = "expense"
