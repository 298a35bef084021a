import asyncio
import os

import pytest

# Keep the default app importable without a MongoDB server around.
os.environ.setdefault("RECORD_STORE", "memory")

from fastapi.testclient import TestClient

from intern_portal_api.app.core.db import InMemoryRecordStore
from intern_portal_api.app.main import create_app


@pytest.fixture()
def store():
    """A connected in-memory record store."""
    record_store = InMemoryRecordStore()
    asyncio.run(record_store.connect())
    return record_store


@pytest.fixture()
def offline_store():
    """A record store whose backend never comes up."""
    record_store = InMemoryRecordStore(reachable=False)
    asyncio.run(record_store.connect())
    return record_store


@pytest.fixture()
def client(store):
    """Provide a FastAPI TestClient around an app using ``store``."""
    return TestClient(create_app(store=store))


@pytest.fixture()
def offline_client(offline_store):
    return TestClient(create_app(store=offline_store))
