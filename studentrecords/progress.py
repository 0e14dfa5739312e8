"""Course progress as a percentage per student and course."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .database import DatabaseManager

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressRecord:
    """Progress made in one course."""

    course_name: str
    percentage: float


class Progress:
    """Records and lists students' progress in their courses."""

    def __init__(self, db: DatabaseManager) -> None:
        self.db = db

    def add(self, student_id: int, course_name: str, percentage: float) -> bool:
        """Record progress; return False if one already exists for the course."""
        existing = self.db.select(
            "SELECT 1 FROM Progress WHERE student_id = ? AND course_name = ?",
            (student_id, course_name),
        )
        if existing:
            log.debug(
                "Progress already exists for student ID %s and course %s",
                student_id,
                course_name,
            )
            return False
        self.db.execute(
            "INSERT INTO Progress (student_id, course_name, percentage) VALUES (?, ?, ?)",
            (student_id, course_name, float(percentage)),
        )
        return True

    def for_student(self, student_id: int) -> list[ProgressRecord]:
        """Return a student's progress, sorted by course name."""
        rows = self.db.select(
            "SELECT course_name, percentage FROM Progress "
            "WHERE student_id = ? ORDER BY course_name",
            (student_id,),
        )
        return [ProgressRecord(row["course_name"], row["percentage"]) for row in rows]