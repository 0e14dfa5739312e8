# studentrecords

`studentrecords` keeps a school's student records in a single SQLite file:
student profiles, the courses each student takes, how many classes they
attended and their progress in each course. It needs nothing beyond the
Python standard library.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## The database

`studentrecords.database.DatabaseManager` opens (and if needed creates) an
SQLite file and makes sure four tables exist:

| table        | holds                                                                              |
|--------------|------------------------------------------------------------------------------------|
| `Students`   | id (assigned automatically), name, password, gender, email, phone number, address  |
| `Courses`    | one row per student and course                                                     |
| `Attendance` | classes attended, one row per student and course                                   |
| `Progress`   | percentage, one row per student and course                                         |

`DatabaseManager.execute` runs a modifying statement and commits it;
`DatabaseManager.select` returns all rows of a query as `sqlite3.Row`
values. Both take query parameters. A statement that fails, or a file that
cannot be opened, raises `DatabaseError`. The manager is a context manager
and closes its connection on leaving the `with` block (or on `close()`).

## Using it from Python

```python
from studentrecords.database import DatabaseManager
from studentrecords.students import Students
from studentrecords.courses import Courses
from studentrecords.attendance import Attendance
from studentrecords.progress import Progress

password = "password"

with DatabaseManager("school.db") as db:
    students = Students(db)
    student_id = students.add(
        name="Jane Doe",
        password=password,
        gender="Female",
        email="jane@example.com",
        phone_number="ext. 42",
        address="1 School Lane",
    )

    for record in students.all():
        print(record)

    print(Courses(db).add(student_id, ["Mathematics", "Physics"]))
    print(Courses(db).for_student(student_id))

    Attendance(db).add(student_id, "Mathematics", 8)
    print(Attendance(db).for_student(student_id))

    Progress(db).add(student_id, "Mathematics", 85.5)
    print(Progress(db).for_student(student_id))
```

The classes split the work the same way the tables do:

- `Students` (in `studentrecords.students`)
  - `add(...)` inserts a student and returns the new id;
  - `all()` returns every student as `StudentRecord` values, ordered by id;
  - `get(student_id)` returns one `StudentRecord`, or `None` if there is no
    such student;
  - `update(student_id, ...)` replaces all of a student's details;
  - `update_password(student_id, new_password)` changes only the password;
  - `delete(student_id)` removes the student's row. Rows in the other tables
    that belong to the student are left in place.
- `Courses.add(student_id, courses)` enrols a student in each course,
  skipping courses the student already has, and returns the names that were
  newly added. `Courses.for_student(student_id)` lists a student's course
  names sorted alphabetically.
- `Attendance.add` and `Progress.add` record one figure per student and
  course. They return `True` when the entry was stored and `False` when one
  already existed for that pair; the existing entry is not changed. Their
  `for_student` methods return `AttendanceRecord` and `ProgressRecord`
  values sorted by course name.

## Command line

Installing the package provides the `studentrecords` command. By default it
works on the file `../SIMS/student_management.db`, relative to the current
directory; `--db PATH` picks another file.

```
studentrecords --dump
```

prints the contents of every table: students, courses, attendance and
progress.

```
studentrecords --db school.db
```

without `--dump` runs a short walk-through against the database: it adds a
student, lists all students, updates the profile and password of the
student with id 1, enrols that student in a few courses, records attendance
and progress, prints each step's result and finally deletes student 1 again.

If the database cannot be opened or a statement fails outside those steps,
the command prints the error and exits with status 1.

## What it does not do

There are no interactive menus, no login for administrators or students and
no other user interface: the package is the storage layer plus the two
commands above. Passwords are stored as given, in plain text, and nothing
checks them.