"""Shared fixtures.

Persistence is switched off for the module-level application so tests
never touch a database file; each test gets its own in-memory engine.
"""

import os

os.environ.setdefault("PERSISTENCE_ENABLED", "false")

import pytest

from dreamweaver.db.kv_store import KeyValueStore
from dreamweaver.db.session import create_storage_engine
from dreamweaver.db.storage import LocalStorage


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def engine():
    engine = create_storage_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return KeyValueStore(engine)


@pytest.fixture
def storage(store):
    return LocalStorage.from_store(store)
