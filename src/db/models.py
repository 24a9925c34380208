"""Database model helpers — records and repositories for languages and greetings."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Protocol

from src.db.connection import Database

logger = logging.getLogger(__name__)

# Millisecond-resolution UTC timestamp, same format as the column defaults.
_NOW = "strftime('%Y-%m-%dT%H:%M:%fZ', 'now')"


@dataclass
class Language:
    id: str
    name: str
    code: str
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class Greeting:
    id: str
    language_id: str
    greeting_text: str
    formal: bool = False
    created_at: str | None = None
    updated_at: str | None = None


def _language(row: dict[str, Any]) -> Language:
    return Language(
        **{k: row[k] for k in ("id", "name", "code", "created_at", "updated_at")}
    )


def _greeting(row: dict[str, Any]) -> Greeting:
    return Greeting(
        id=row["id"],
        language_id=row["language_id"],
        greeting_text=row["greeting_text"],
        formal=bool(row["formal"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class LanguageStore(Protocol):
    def get_by_id(self, language_id: str) -> Language | None: ...

    def get_by_code(self, code: str) -> Language | None: ...

    def get_all(self) -> list[Language]: ...

    def create(self, name: str, code: str) -> str: ...

    def update(self, language_id: str, name: str, code: str) -> bool: ...

    def delete(self, language_id: str) -> bool: ...


class GreetingStore(Protocol):
    def get_by_id(self, greeting_id: str) -> Greeting | None: ...

    def get_all(self) -> list[Greeting]: ...

    def get_by_language_id(self, language_id: str) -> list[Greeting]: ...

    def get_by_language_code(self, code: str, formal: bool | None = None) -> Greeting | None: ...

    def create(self, language_id: str, greeting_text: str, formal: bool) -> str: ...

    def update(self, greeting_id: str, language_id: str, greeting_text: str, formal: bool) -> bool: ...

    def delete(self, greeting_id: str) -> bool: ...


class LanguageRepository:
    """Database operations for languages."""

    def __init__(self, db: Database, log: logging.Logger | None = None):
        self.db = db
        self.log = log or logger

    def get_by_id(self, language_id: str) -> Language | None:
        row = self.db.execute_one("SELECT * FROM languages WHERE id = ?", (language_id,))
        return _language(row) if row else None

    def get_by_code(self, code: str) -> Language | None:
        row = self.db.execute_one("SELECT * FROM languages WHERE code = ?", (code,))
        return _language(row) if row else None

    def get_all(self) -> list[Language]:
        rows = self.db.execute("SELECT * FROM languages ORDER BY name")
        return [_language(r) for r in rows]

    def create(self, name: str, code: str) -> str:
        """Insert a language and return its new id.

        A duplicate code raises ConstraintViolation.
        """
        language_id = str(uuid.uuid4())
        self.db.execute_write(
            "INSERT INTO languages (id, name, code) VALUES (?, ?, ?)",
            (language_id, name, code),
        )
        self.log.info("Created language with id %s", language_id)
        return language_id

    def update(self, language_id: str, name: str, code: str) -> bool:
        updated = self.db.execute_write(
            f"UPDATE languages SET name = ?, code = ?, updated_at = {_NOW} WHERE id = ?",
            (name, code, language_id),
        )
        if updated:
            self.log.info("Updated language with id %s", language_id)
        return updated > 0

    def delete(self, language_id: str) -> bool:
        """Delete a language; its greetings go with it (ON DELETE CASCADE)."""
        deleted = self.db.execute_write("DELETE FROM languages WHERE id = ?", (language_id,))
        if deleted:
            self.log.info("Deleted language with id %s", language_id)
        return deleted > 0


class GreetingRepository:
    """Database operations for greetings."""

    def __init__(self, db: Database, log: logging.Logger | None = None):
        self.db = db
        self.log = log or logger

    def get_by_id(self, greeting_id: str) -> Greeting | None:
        row = self.db.execute_one("SELECT * FROM greetings WHERE id = ?", (greeting_id,))
        return _greeting(row) if row else None

    def get_all(self) -> list[Greeting]:
        rows = self.db.execute("SELECT * FROM greetings ORDER BY greeting_text")
        return [_greeting(r) for r in rows]

    def get_by_language_id(self, language_id: str) -> list[Greeting]:
        rows = self.db.execute(
            "SELECT * FROM greetings WHERE language_id = ? ORDER BY greeting_text",
            (language_id,),
        )
        return [_greeting(r) for r in rows]

    def get_by_language_code(self, code: str, formal: bool | None = None) -> Greeting | None:
        """Return one greeting for a language code.

        Without a formality filter the informal greeting wins (formal sorts
        0 before 1); ties within the same formality come back in storage order.
        """
        sql = """SELECT g.* FROM greetings g
                 JOIN languages l ON g.language_id = l.id
                 WHERE l.code = ?"""
        params: list[Any] = [code]
        if formal is not None:
            sql += " AND g.formal = ?"
            params.append(int(formal))
        sql += " ORDER BY g.formal LIMIT 1"

        row = self.db.execute_one(sql, tuple(params))
        return _greeting(row) if row else None

    def create(self, language_id: str, greeting_text: str, formal: bool) -> str:
        """Insert a greeting and return its new id.

        An unknown language_id raises ConstraintViolation; nothing is written.
        """
        greeting_id = str(uuid.uuid4())
        self.db.execute_write(
            """INSERT INTO greetings (id, language_id, greeting_text, formal)
               VALUES (?, ?, ?, ?)""",
            (greeting_id, language_id, greeting_text, int(formal)),
        )
        self.log.info("Created greeting with id %s", greeting_id)
        return greeting_id

    def update(self, greeting_id: str, language_id: str, greeting_text: str, formal: bool) -> bool:
        updated = self.db.execute_write(
            f"""UPDATE greetings
                SET language_id = ?, greeting_text = ?, formal = ?, updated_at = {_NOW}
                WHERE id = ?""",
            (language_id, greeting_text, int(formal), greeting_id),
        )
        if updated:
            self.log.info("Updated greeting with id %s", greeting_id)
        return updated > 0

    def delete(self, greeting_id: str) -> bool:
        deleted = self.db.execute_write("DELETE FROM greetings WHERE id = ?", (greeting_id,))
        if deleted:
            self.log.info("Deleted greeting with id %s", greeting_id)
        return deleted > 0
