from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from exambuilder.app import app
from exambuilder.database import build_engine, get_db, init_db
from exambuilder.services import auth_service
from exambuilder.utils import paths


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def uploads(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "uploads"
    monkeypatch.setattr(paths, "UPLOADS_DIR", directory)
    return directory


@pytest.fixture
def client(session_factory, uploads):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _register(client: TestClient, email: str, password: str, name: str) -> dict:
    response = client.post(
        "/api/auth/register", json={"email": email, "password": password, "name": name}
    )
    assert response.status_code == 201, response.text
    return response.json()


def _auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_admin(client):
    """Register an admin over the API and return its auth headers."""

    def _make(email: str, password: str = "secret", name: str = "Admin") -> dict[str, str]:
        return _auth_headers(_register(client, email, password, name)["token"])

    return _make


@pytest.fixture
def alice(make_admin) -> dict[str, str]:
    return make_admin("alice@example.com", name="Alice")


@pytest.fixture
def bob(make_admin) -> dict[str, str]:
    return make_admin("bob@example.com", name="Bob")


@pytest.fixture
def admin_id(db) -> str:
    return auth_service.create_admin(db, "owner@example.com", "secret", "Owner").id
