"""I/O layer - Data access for persistence."""

from .database_manager import DatabaseManager

__all__ = ["DatabaseManager"]
