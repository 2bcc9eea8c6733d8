from datetime import datetime
from unittest.mock import Mock

from auth_backend.dependencies import get_store
from auth_backend.errors import StoreError
from auth_backend.main import app
from auth_backend.store import UserStore


def test_health_when_database_reachable(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    # ISO-8601 timestamp
    datetime.fromisoformat(body["timestamp"])


def test_health_when_database_unreachable(client):
    broken = Mock(spec=UserStore)
    broken.ping.side_effect = StoreError("Database connection issue")
    app.dependency_overrides[get_store] = lambda: broken

    response = client.get("/health")
    assert response.status_code == 500
    assert response.json() == {"error": "Database connection issue"}
