"""Value objects for the tracking domain."""

from pennywise.domain.tracking.value_objects.currency import (
    Currency,
    ensure_supported_currency,
)
from pennywise.domain.tracking.value_objects.date_range import AmountRange, DateRange
from pennywise.domain.tracking.value_objects.period import (
    DateFilter,
    Granularity,
    PeriodType,
)
from pennywise.domain.tracking.value_objects.transaction_metadata import (
    TransactionMetadata,
)
from pennywise.domain.tracking.value_objects.transaction_type import (
    MONETARY_TYPES,
    CategoryType,
    TransactionStatus,
    TransactionType,
)

__all__ = [
    "MONETARY_TYPES",
    "AmountRange",
    "CategoryType",
    "Currency",
    "DateFilter",
    "DateRange",
    "Granularity",
    "PeriodType",
    "TransactionMetadata",
    "TransactionStatus",
    "TransactionType",
    "ensure_supported_currency",
]
