"""Pennywise command line interface."""

from pennywise.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
