import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.storage.sqlite import SQLiteStorage


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh SQLite file per test."""
    return Settings(
        _env_file=None,
        ENV="test",
        STORAGE_PATH=str(tmp_path / "storage.db"),
    )


@pytest.fixture
def storage(settings):
    storage = SQLiteStorage(settings)
    yield storage
    storage.close()


@pytest.fixture
def client(settings, storage):
    app = create_app(settings, storage)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_student():
    return {"name": "Ann", "email": "ann@x.com", "age": 30}
