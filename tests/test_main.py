from fastapi.testclient import TestClient

from core.config import settings
from core.database import Database
from main import create_app


def test_read_root():
    app = create_app(database=Database("sqlite+aiosqlite:///:memory:"))

    with TestClient(app) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": settings.APP_NAME}


def test_request_id_header():
    app = create_app(database=Database("sqlite+aiosqlite:///:memory:"))

    with TestClient(app) as client:
        response = client.get("/", headers={"X-Request-ID": "req-1"})
        generated = client.get("/")

    assert response.headers["X-Request-ID"] == "req-1"
    assert generated.headers["X-Request-ID"]


def test_unknown_route_uses_error_envelope():
    app = create_app(database=Database("sqlite+aiosqlite:///:memory:"))

    with TestClient(app) as client:
        response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json()["status_code"] == 404
