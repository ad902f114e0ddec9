"""Tracking domain: transactions, categories and savings goals."""
