"""Database connection management — one SQLite connection per operation."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from fastapi import Request

from src.config import AppConfig

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS = [
    "001_languages.sql",
    "002_greetings.sql",
    "003_seed.sql",
]


class ConstraintViolation(Exception):
    """A write was rejected by a uniqueness or foreign-key constraint."""


class Database:
    """Opens a fresh connection for every call; nothing is pooled or shared."""

    def __init__(self, config: AppConfig):
        self.config = config.database
        self._ensure_db()

    def _ensure_db(self) -> None:
        """Ensure the database directory exists."""
        db_path = Path(self.config.sqlite_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection (context manager)."""
        conn = sqlite3.connect(str(self.config.sqlite_path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys=ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def execute(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        """Execute a query and return results as list of dicts."""
        with self.connection() as conn:
            cursor = conn.execute(sql, params)
            if cursor.description:
                columns = [d[0] for d in cursor.description]
                return [dict(zip(columns, row)) for row in cursor.fetchall()]
            return []

    def execute_one(self, sql: str, params: tuple = ()) -> dict[str, Any] | None:
        """Execute a query and return the first row as a dict, or None."""
        results = self.execute(sql, params)
        return results[0] if results else None

    def execute_scalar(self, sql: str, params: tuple = ()) -> Any:
        """Execute a query and return the first column of the first row, or None."""
        with self.connection() as conn:
            row = conn.execute(sql, params).fetchone()
            return row[0] if row is not None else None

    def execute_write(self, sql: str, params: tuple = ()) -> int:
        """Execute an INSERT/UPDATE/DELETE and return the affected row count.

        Raises ConstraintViolation when SQLite rejects the write with an
        integrity error (duplicate code, missing language, ...).
        """
        try:
            with self.connection() as conn:
                cursor = conn.execute(sql, params)
                return cursor.rowcount
        except sqlite3.IntegrityError as e:
            raise ConstraintViolation(str(e)) from e

    def run_migration(self, sql: str) -> None:
        """Run a migration SQL script."""
        with self.connection() as conn:
            conn.executescript(sql)
        logger.info("Migration applied successfully")

    def initialize_schema(self) -> None:
        """Apply pending migrations; each file runs at most once per database."""
        self.run_migration(
            "CREATE TABLE IF NOT EXISTS schema_migrations ("
            " name TEXT PRIMARY KEY,"
            " applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now')))"
        )
        applied = {r["name"] for r in self.execute("SELECT name FROM schema_migrations")}

        for migration_file in MIGRATIONS:
            if migration_file in applied:
                continue
            migration_path = MIGRATIONS_DIR / migration_file
            if migration_path.exists():
                sql = migration_path.read_text(encoding="utf-8")
                self.run_migration(sql)
                self.execute_write(
                    "INSERT INTO schema_migrations (name) VALUES (?)", (migration_file,)
                )
                logger.info("Applied migration: %s", migration_file)
            else:
                logger.warning("Migration file not found: %s", migration_path)


def init_db(config: AppConfig) -> Database:
    """Create a database for the given config and apply migrations."""
    db = Database(config)
    db.initialize_schema()
    return db


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the Database attached to the running app."""
    return request.app.state.db
