"""Database layer — SQLite with foreign keys enforced."""

from src.db.connection import ConstraintViolation, Database, get_db

__all__ = ["ConstraintViolation", "Database", "get_db"]
