
import pytest
from chez.ordre.factory import create_app
from chez.ordre.services import TaskService
from chez.ordre.store import SQLTaskStore
from .fakes import MemoryTaskStore


@pytest.fixture
def app():
    app = create_app(config='chez.ordre.config.TestingConfig')
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return SQLTaskStore()


@pytest.fixture
def service(store):
    return TaskService(store=store)


@pytest.fixture
def memory_store():
    return MemoryTaskStore()


@pytest.fixture
def memory_ts(memory_store):
    return TaskService(store=memory_store)
