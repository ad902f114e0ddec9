"""Application layer: calculations, queries and their DTOs."""
