"""Courses a student is enrolled in."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .database import DatabaseManager

log = logging.getLogger(__name__)


class Courses:
    """Enrols students in courses and lists their enrolments."""

    def __init__(self, db: DatabaseManager) -> None:
        self.db = db

    def add(self, student_id: int, courses: Iterable[str]) -> list[str]:
        """Enrol a student in each course, skipping existing enrolments.

        Returns the course names that were newly added, in the given order.
        """
        added = []
        for course in courses:
            existing = self.db.select(
                "SELECT 1 FROM Courses WHERE student_id = ? AND course_name = ?",
                (student_id, course),
            )
            if existing:
                log.debug("Course %s already exists for student ID %s", course, student_id)
                continue
            self.db.execute(
                "INSERT INTO Courses (student_id, course_name) VALUES (?, ?)",
                (student_id, course),
            )
            added.append(course)
        return added

    def for_student(self, student_id: int) -> list[str]:
        """Return the names of a student's courses, sorted by name."""
        rows = self.db.select(
            "SELECT course_name FROM Courses WHERE student_id = ? ORDER BY course_name",
            (student_id,),
        )
        return [row["course_name"] for row in rows]