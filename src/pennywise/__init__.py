"""Pennywise - personal finance analytics for the tracker's exported data."""

__version__ = "0.1.0"
