import pytest

from app.core.config import Settings
from app.core.exceptions import StartupError, StorageError
from app.storage.sqlite import SQLiteStorage


def test_create_assigns_increasing_ids(storage):
    first = storage.create_student("Ann", "ann@x.com", 30)
    second = storage.create_student("Bob", "bob@x.com", 25)
    assert first == 1
    assert second == 2


def test_fetch_by_id_returns_record(storage):
    student_id = storage.create_student("Ann", "ann@x.com", 30)
    student = storage.fetch_student_by_id(student_id)
    assert student.model_dump() == {"id": student_id, "name": "Ann", "email": "ann@x.com", "age": 30}


def test_fetch_by_id_unknown_raises_storage_error(storage):
    with pytest.raises(StorageError, match="no student found with id 42"):
        storage.fetch_student_by_id(42)


def test_fetch_all_is_ordered_by_id(storage):
    assert storage.fetch_all_students() == []
    for name in ("Ann", "Bob", "Cid"):
        storage.create_student(name, f"{name.lower()}@x.com", 20)
    students = storage.fetch_all_students()
    assert [s.name for s in students] == ["Ann", "Bob", "Cid"]
    assert [s.id for s in students] == [1, 2, 3]


def test_data_survives_reopening(settings, storage):
    storage.create_student("Ann", "ann@x.com", 30)
    storage.close()

    reopened = SQLiteStorage(settings)
    try:
        assert [s.email for s in reopened.fetch_all_students()] == ["ann@x.com"]
    finally:
        reopened.close()


def test_unusable_storage_path_is_a_startup_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    settings = Settings(_env_file=None, ENV="test", STORAGE_PATH=str(blocker / "storage.db"))
    with pytest.raises(StartupError):
        SQLiteStorage(settings)
