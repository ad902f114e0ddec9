"""Tracking domain services."""

from pennywise.domain.tracking.services.category_tree import CategoryTree

__all__ = ["CategoryTree"]
