"""SQLite storage for student records: connection handling and schema."""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Iterable, Mapping
from typing import Any, Union

log = logging.getLogger(__name__)

Params = Union[Iterable[Any], Mapping[str, Any]]

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS Students (
        student_id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        password TEXT NOT NULL,
        gender TEXT NOT NULL,
        email TEXT NOT NULL,
        phone_number TEXT NOT NULL,
        address TEXT NOT NULL)""",
    """CREATE TABLE IF NOT EXISTS Courses (
        student_id INTEGER,
        course_name TEXT NOT NULL,
        FOREIGN KEY (student_id) REFERENCES Students(student_id),
        PRIMARY KEY (student_id, course_name))""",
    """CREATE TABLE IF NOT EXISTS Attendance (
        student_id INTEGER,
        course_name TEXT NOT NULL,
        classes_attended INTEGER,
        FOREIGN KEY (student_id) REFERENCES Students(student_id),
        PRIMARY KEY (student_id, course_name))""",
    """CREATE TABLE IF NOT EXISTS Progress (
        student_id INTEGER,
        course_name TEXT NOT NULL,
        percentage REAL,
        FOREIGN KEY (student_id) REFERENCES Students(student_id),
        PRIMARY KEY (student_id, course_name))""",
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class DatabaseManager:
    """An open SQLite database holding the student tables."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        try:
            self._conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"could not open database {self.path!r}: {exc}") from exc
        self._conn.row_factory = sqlite3.Row
        log.debug("Database connected: %s", self.path)
        for statement in _SCHEMA:
            self.execute(statement)
        log.debug("Database initialized")

    def execute(self, query: str, params: Params = ()) -> sqlite3.Cursor:
        """Run a modifying statement, commit it and return its cursor."""
        try:
            cursor = self._conn.execute(query, params)
            self._conn.commit()
        except sqlite3.Error as exc:
            log.debug("Query error: %s", exc)
            raise DatabaseError(str(exc)) from exc
        return cursor

    def select(self, query: str, params: Params = ()) -> list[sqlite3.Row]:
        """Run a query and return all of its rows."""
        try:
            return self._conn.execute(query, params).fetchall()
        except sqlite3.Error as exc:
            log.debug("Select query error: %s", exc)
            raise DatabaseError(str(exc)) from exc

    def close(self) -> None:
        """Close the connection; closing twice is harmless."""
        self._conn.close()

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()