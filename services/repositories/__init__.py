"""Repository layer for data access."""

from .stall_repository import StallRepository

__all__ = ["StallRepository"]
