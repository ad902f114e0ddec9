"""Shared domain building blocks."""

from pennywise.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
]
