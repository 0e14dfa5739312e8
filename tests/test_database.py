import pytest

from studentrecords.database import DatabaseError, DatabaseManager


@pytest.fixture
def db():
    with DatabaseManager(":memory:") as manager:
        yield manager


def test_schema_tables_created(db):
    rows = db.select("SELECT name FROM sqlite_master WHERE type = 'table'")
    names = {row["name"] for row in rows}
    assert {"Students", "Courses", "Attendance", "Progress"} <= names


def test_execute_and_select_round_trip(db):
    cursor = db.execute(
        "INSERT INTO Courses (student_id, course_name) VALUES (?, ?)", (7, "Physics")
    )
    assert cursor.rowcount == 1
    rows = db.select("SELECT student_id, course_name FROM Courses")
    assert [tuple(row) for row in rows] == [(7, "Physics")]


def test_bad_statement_raises(db):
    with pytest.raises(DatabaseError):
        db.execute("INSERT INTO NoSuchTable VALUES (1)")


def test_bad_select_raises(db):
    with pytest.raises(DatabaseError):
        db.select("SELECT * FROM NoSuchTable")


def test_closed_database_raises():
    manager = DatabaseManager(":memory:")
    manager.close()
    manager.close()
    with pytest.raises(DatabaseError):
        manager.select("SELECT * FROM Students")


def test_context_manager_closes():
    with DatabaseManager(":memory:") as manager:
        assert manager.select("SELECT * FROM Students") == []
    with pytest.raises(DatabaseError):
        manager.execute("DELETE FROM Students")


def test_data_persists_and_schema_is_kept(tmp_path):
    path = tmp_path / "records.db"
    with DatabaseManager(path) as manager:
        manager.execute(
            "INSERT INTO Attendance (student_id, course_name, classes_attended) VALUES (?, ?, ?)",
            (1, "Biology", 4),
        )
    with DatabaseManager(path) as manager:
        rows = manager.select("SELECT course_name, classes_attended FROM Attendance")
    assert [tuple(row) for row in rows] == [("Biology", 4)]


def test_unopenable_path_raises(tmp_path):
    with pytest.raises(DatabaseError):
        DatabaseManager(tmp_path / "missing" / "records.db")