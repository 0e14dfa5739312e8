"""Command-line entry point: a demonstration run or a dump of every table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from .attendance import Attendance
from .courses import Courses
from .database import DatabaseError, DatabaseManager
from .progress import Progress
from .students import Students

DEFAULT_DATABASE = "../SIMS/student_management.db"

DEMO_STUDENT_ID = 1
DEMO_COURSES = ("Mathematics", "Physics", "Chemistry", "Biology", "Computer Science")


def _number(value: float) -> str:
    return f"{value:g}"


def dump(db: DatabaseManager, out: TextIO) -> None:
    """Write the contents of every table to ``out``."""
    print("=== Students ===", file=out)
    for student in Students(db).all():
        print(
            f"ID: {student.student_id} Name: {student.name} "
            f"Password: {student.password} Gender: {student.gender} "
            f"Email: {student.email} Phone: {student.phone_number} "
            f"Address: {student.address}",
            file=out,
        )

    print("=== Courses ===", file=out)
    for row in db.select(
        "SELECT student_id, course_name FROM Courses ORDER BY student_id, course_name"
    ):
        print(f"Student ID: {row['student_id']} Course: {row['course_name']}", file=out)

    print("=== Attendance ===", file=out)
    for row in db.select(
        "SELECT student_id, course_name, classes_attended FROM Attendance "
        "ORDER BY student_id, course_name"
    ):
        print(
            f"Student ID: {row['student_id']} Course: {row['course_name']} "
            f"Attended: {row['classes_attended']}",
            file=out,
        )

    print("=== Progress ===", file=out)
    for row in db.select(
        "SELECT student_id, course_name, percentage FROM Progress "
        "ORDER BY student_id, course_name"
    ):
        print(
            f"Student ID: {row['student_id']} Course: {row['course_name']} "
            f"Percentage: {_number(row['percentage'])}",
            file=out,
        )


def _report(out: TextIO, ok: bool, success: str, failure: str) -> None:
    print(success if ok else failure, file=out)


def demo(db: DatabaseManager, out: TextIO) -> None:
    """Exercise every operation once, writing what happens to ``out``."""
    students = Students(db)
    password = "password"
    try:
        students.add("John Doe", password, "Male", "john@example.com", "n/a", "123 Main St")
        ok = True
    except DatabaseError:
        ok = False
    _report(out, ok, "Student added successfully!", "Failed to add student.")

    for student in students.all():
        print(
            f"Student ID: {student.student_id} | Name: {student.name} "
            f"| Email: {student.email}",
            file=out,
        )

    try:
        students.update(
            DEMO_STUDENT_ID,
            "John Doe Updated",
            password,
            "Male",
            "john.updated@example.com",
            "n/a",
            "123 Main St",
        )
        ok = True
    except DatabaseError:
        ok = False
    _report(out, ok, "Student updated successfully!", "Failed to update student.")

    profile = students.get(DEMO_STUDENT_ID)
    if profile is not None:
        print(
            f"Student Profile: ID: {profile.student_id} | Name: {profile.name} "
            f"| Email: {profile.email}",
            file=out,
        )

    new_password = "password"
    try:
        students.update_password(DEMO_STUDENT_ID, new_password)
        ok = True
    except DatabaseError:
        ok = False
    _report(out, ok, "Password updated successfully!", "Failed to update password.")

    courses = Courses(db)
    try:
        courses.add(DEMO_STUDENT_ID, DEMO_COURSES)
        ok = True
    except DatabaseError:
        ok = False
    _report(out, ok, "Courses added successfully!", "Failed to add courses.")
    for name in courses.for_student(DEMO_STUDENT_ID):
        print(f"Course: {name}", file=out)

    attendance = Attendance(db)
    try:
        ok = attendance.add(DEMO_STUDENT_ID, "Mathematics", 8)
    except DatabaseError:
        ok = False
    _report(out, ok, "Attendance added successfully!", "Failed to add attendance.")
    for record in attendance.for_student(DEMO_STUDENT_ID):
        print(
            f"Course: {record.course_name} | Classes Attended: {record.classes_attended}",
            file=out,
        )

    progress = Progress(db)
    try:
        ok = progress.add(DEMO_STUDENT_ID, "Mathematics", 85.5)
    except DatabaseError:
        ok = False
    _report(out, ok, "Progress added successfully!", "Failed to add progress.")
    for record in progress.for_student(DEMO_STUDENT_ID):
        print(
            f"Course: {record.course_name} | Percentage: {_number(record.percentage)}",
            file=out,
        )

    try:
        students.delete(DEMO_STUDENT_ID)
        ok = True
    except DatabaseError:
        ok = False
    _report(out, ok, "Student deleted successfully!", "Failed to delete student.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration, or dump all tables with ``--dump``."""
    parser = argparse.ArgumentParser(prog="studentrecords", description=__doc__)
    parser.add_argument("--dump", action="store_true", help="print every table and exit")
    parser.add_argument("--db", default=DEFAULT_DATABASE, help="path of the SQLite database")
    args = parser.parse_args(argv)

    try:
        with DatabaseManager(args.db) as db:
            if args.dump:
                dump(db, sys.stdout)
            else:
                demo(db, sys.stdout)
    except DatabaseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())