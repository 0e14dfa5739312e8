import pytest

from studentrecords.database import DatabaseError, DatabaseManager
from studentrecords.progress import Progress, ProgressRecord


@pytest.fixture
def db():
    with DatabaseManager(":memory:") as manager:
        yield manager


@pytest.fixture
def progress(db):
    return Progress(db)


def test_add_and_read(progress):
    assert progress.add(1, "Mathematics", 85.5) is True
    assert progress.for_student(1) == [ProgressRecord("Mathematics", 85.5)]


def test_integer_percentage_comes_back_as_float(progress):
    progress.add(1, "Physics", 70)
    [record] = progress.for_student(1)
    assert isinstance(record.percentage, float)
    assert record.percentage == 70


def test_second_add_is_refused_and_keeps_value(progress):
    progress.add(1, "Mathematics", 85.5)
    assert progress.add(1, "Mathematics", 10.0) is False
    assert progress.for_student(1) == [ProgressRecord("Mathematics", 85.5)]


def test_sorted_by_course_and_kept_apart(progress):
    progress.add(1, "Physics", 60.0)
    progress.add(1, "Chemistry", 75.0)
    progress.add(2, "Art", 90.0)
    assert [r.course_name for r in progress.for_student(1)] == ["Chemistry", "Physics"]
    assert progress.for_student(2) == [ProgressRecord("Art", 90.0)]


def test_closed_database_raises(db, progress):
    db.close()
    with pytest.raises(DatabaseError):
        progress.add(1, "Mathematics", 50.0)