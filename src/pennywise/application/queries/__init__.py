"""Read-only queries for the application layer."""
