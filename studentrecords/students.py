"""Student profiles."""

from __future__ import annotations

from dataclasses import dataclass

from .database import DatabaseManager

_COLUMNS = "student_id, name, password, gender, email, phone_number, address"


@dataclass(frozen=True)
class StudentRecord:
    """One row of the Students table."""

    student_id: int
    name: str
    password: str
    gender: str
    email: str
    phone_number: str
    address: str


class Students:
    """Adds, reads, updates and deletes student profiles."""

    def __init__(self, db: DatabaseManager) -> None:
        self.db = db

    def add(
        self,
        name: str,
        password: str,
        gender: str,
        email: str,
        phone_number: str,
        address: str,
    ) -> int:
        """Insert a student and return the new student id."""
        cursor = self.db.execute(
            "INSERT INTO Students (name, password, gender, email, phone_number, address) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (name, password, gender, email, phone_number, address),
        )
        return cursor.lastrowid

    def all(self) -> list[StudentRecord]:
        """Return every student, ordered by id."""
        rows = self.db.select(f"SELECT {_COLUMNS} FROM Students ORDER BY student_id")
        return [StudentRecord(**dict(row)) for row in rows]

    def update(
        self,
        student_id: int,
        name: str,
        password: str,
        gender: str,
        email: str,
        phone_number: str,
        address: str,
    ) -> None:
        """Replace all details of a student."""
        self.db.execute(
            "UPDATE Students SET name = ?, password = ?, gender = ?, "
            "email = ?, phone_number = ?, address = ? WHERE student_id = ?",
            (name, password, gender, email, phone_number, address, student_id),
        )

    def delete(self, student_id: int) -> None:
        """Remove a student."""
        self.db.execute("DELETE FROM Students WHERE student_id = ?", (student_id,))

    def get(self, student_id: int) -> StudentRecord | None:
        """Return one student's profile, or None if there is no such student."""
        rows = self.db.select(
            f"SELECT {_COLUMNS} FROM Students WHERE student_id = ?", (student_id,)
        )
        return StudentRecord(**dict(rows[0])) if rows else None

    def update_password(self, student_id: int, new_password: str) -> None:
        """Change a student's password."""
        self.db.execute(
            "UPDATE Students SET password = ? WHERE student_id = ?",
            (new_password, student_id),
        )