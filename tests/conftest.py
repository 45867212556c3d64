"""Shared pytest fixtures and configuration."""

import os
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

# Set before the settings module is imported anywhere.
os.environ.setdefault("ADMIN_KEY", "test-admin-key")

from service_request_api.app.core.config import settings  # noqa: E402
from service_request_api.app.core.store import InMemoryRecordStore, RecordStore, get_store  # noqa: E402
from service_request_api.app.main import app  # noqa: E402
from service_request_api.app.services.request_service import RequestService  # noqa: E402

ADMIN_KEY = "test-admin-key"


@pytest.fixture(autouse=True)
def admin_key(monkeypatch):
    """Pin the admin key regardless of the caller's environment."""
    monkeypatch.setattr(settings, "admin_key", ADMIN_KEY)
    return ADMIN_KEY


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def service(store: InMemoryRecordStore) -> RequestService:
    return RequestService(store)


@pytest.fixture
def client(store: RecordStore):
    """TestClient wired to the ``store`` fixture (in memory unless overridden)."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"X-Admin-Key": ADMIN_KEY}


@pytest.fixture
def make_payload() -> Callable[..., Dict[str, Any]]:
    """Factory for a valid camelCase request body; keyword args override fields."""

    def _make(**overrides: Any) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "phone": "555-0100",
            "serviceType": "standard",
            "propertyType": "residential",
            "address": "1 Main St",
            "bedrooms": 3,
            "bathrooms": 2,
            "frequency": "weekly",
            "date": "2025-06-01",
            "time": "10:00",
            "notes": "Side door",
        }
        payload.update(overrides)
        return payload

    return _make
