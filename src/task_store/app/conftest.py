import pytest
from fastapi.testclient import TestClient

from task_store.app.main import create_app
from task_store.app.storage import InMemoryTaskStorage


@pytest.fixture()
def storage() -> InMemoryTaskStorage:
    """Свежее хранилище с примером (id=1), как при старте процесса."""
    storage = InMemoryTaskStorage()
    storage.seed_example()
    return storage


@pytest.fixture()
def app(storage):
    return create_app(storage)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
