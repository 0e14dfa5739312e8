"""Class attendance per student and course."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .database import DatabaseManager

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceRecord:
    """Classes attended in one course."""

    course_name: str
    classes_attended: int


class Attendance:
    """Records and lists how many classes students attended."""

    def __init__(self, db: DatabaseManager) -> None:
        self.db = db

    def add(self, student_id: int, course_name: str, classes_attended: int) -> bool:
        """Record attendance; return False if one already exists for the course."""
        existing = self.db.select(
            "SELECT 1 FROM Attendance WHERE student_id = ? AND course_name = ?",
            (student_id, course_name),
        )
        if existing:
            log.debug(
                "Attendance already exists for student ID %s and course %s",
                student_id,
                course_name,
            )
            return False
        self.db.execute(
            "INSERT INTO Attendance (student_id, course_name, classes_attended) "
            "VALUES (?, ?, ?)",
            (student_id, course_name, int(classes_attended)),
        )
        return True

    def for_student(self, student_id: int) -> list[AttendanceRecord]:
        """Return a student's attendance, sorted by course name."""
        rows = self.db.select(
            "SELECT course_name, classes_attended FROM Attendance "
            "WHERE student_id = ? ORDER BY course_name",
            (student_id,),
        )
        return [AttendanceRecord(row["course_name"], row["classes_attended"]) for row in rows]