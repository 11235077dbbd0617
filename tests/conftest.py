from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from flavor_store_api.app.main import create_app
from flavor_store_api.app.services.flavor_service import FlavorStore


@pytest.fixture()
def store() -> FlavorStore:
    """A freshly seeded store: strawberry (1) and mint chocolate (2)."""
    return FlavorStore()


@pytest.fixture()
def client(store):
    """Test client for an app serving ``store``, so tests can inspect it directly."""
    with TestClient(create_app(store)) as test_client:
        yield test_client
