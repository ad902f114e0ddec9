"""Factories for the application layer."""

from pennywise.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
