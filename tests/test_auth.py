from datetime import timedelta

import pytest
from jose import jwt

from exambuilder.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
)
from exambuilder.services import auth_service


def test_register_returns_token_and_public_fields(client) -> None:
    response = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "secret", "name": "Alice"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["admin"]["email"] == "alice@example.com"
    assert data["admin"]["name"] == "Alice"
    assert set(data["admin"]) == {"id", "email", "name"}
    assert "secret" not in response.text


def test_register_duplicate_email_keeps_first_admin(client) -> None:
    payload = {"email": "alice@example.com", "password": "first", "name": "Alice"}
    first = client.post("/api/auth/register", json=payload)
    assert first.status_code == 201

    second = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "second", "name": "Mallory"},
    )
    assert second.status_code == 400
    assert second.json() == {"message": "Admin already exists"}

    login = client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "first"}
    )
    assert login.status_code == 200
    assert login.json()["admin"] == first.json()["admin"]


def test_register_rejects_invalid_email(client) -> None:
    response = client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "secret", "name": "Alice"},
    )
    assert response.status_code == 400
    assert "email" in response.json()["message"]


def test_login_failures_share_one_message(client, make_admin) -> None:
    make_admin("alice@example.com", password="secret")

    wrong_password = client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "nope"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "ghost@example.com", "password": "secret"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}


def test_login_token_verifies_to_same_admin(client, make_admin) -> None:
    make_admin("alice@example.com", password="secret")
    login = client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "secret"}
    ).json()

    response = client.get(
        "/api/auth/verify", headers={"Authorization": f"Bearer {login['token']}"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "valid": True,
        "admin": {"id": login["admin"]["id"], "email": "alice@example.com"},
    }


def test_verify_requires_token(client) -> None:
    response = client.get("/api/auth/verify")
    assert response.status_code == 401
    assert response.json() == {"message": "Access token required"}


def test_verify_rejects_garbage_token(client) -> None:
    response = client.get("/api/auth/verify", headers={"Authorization": "Bearer abc.def.ghi"})
    assert response.status_code == 403
    assert response.json() == {"message": "Invalid token"}


def test_verify_rejects_expired_token(client) -> None:
    token = auth_service.create_access_token(
        "a" * 32, "alice@example.com", expires_delta=timedelta(seconds=-5)
    )
    response = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json() == {"message": "Token expired"}


def test_password_is_stored_hashed(db) -> None:
    admin = auth_service.create_admin(db, "alice@example.com", "secret", "Alice")
    assert admin.hashed_password != "secret"
    assert auth_service.verify_password("secret", admin.hashed_password)
    assert not auth_service.verify_password("other", admin.hashed_password)


def test_same_password_hashes_differently() -> None:
    assert auth_service.hash_password("secret") != auth_service.hash_password("secret")


def test_service_register_conflict(db) -> None:
    auth_service.register(db, "alice@example.com", "secret", "Alice")
    with pytest.raises(ConflictError):
        auth_service.register(db, "alice@example.com", "other", "Alice Again")


def test_service_login_unknown_email(db) -> None:
    with pytest.raises(InvalidCredentialsError) as exc_info:
        auth_service.login(db, "ghost@example.com", "secret")
    assert exc_info.value.message == "Invalid credentials"


def test_verify_token_round_trip() -> None:
    token = auth_service.create_access_token("b" * 32, "bob@example.com")
    assert auth_service.verify_token(token) == {"id": "b" * 32, "email": "bob@example.com"}


def test_verify_token_expired_and_tampered() -> None:
    expired = auth_service.create_access_token(
        "b" * 32, "bob@example.com", expires_delta=timedelta(seconds=-1)
    )
    with pytest.raises(TokenExpiredError):
        auth_service.verify_token(expired)

    forged = jwt.encode(
        {"sub": "b" * 32, "email": "bob@example.com"}, "not-the-secret", algorithm="HS256"
    )
    with pytest.raises(InvalidTokenError):
        auth_service.verify_token(forged)


def test_register_rejects_password_longer_than_bcrypt_accepts(client) -> None:
    response = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "x" * 80, "name": "Alice"},
    )
    assert response.status_code == 400
    assert "password" in response.json()["message"]

    at_limit = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "x" * 72, "name": "Alice"},
    )
    assert at_limit.status_code == 201


def test_register_counts_password_bytes_not_characters(client) -> None:
    # 40 two-byte characters
    response = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "é" * 40, "name": "Alice"},
    )
    assert response.status_code == 400


def test_login_with_overlong_password_is_invalid_credentials(client, make_admin) -> None:
    make_admin("alice@example.com", password="secret")
    response = client.post(
        "/api/auth/login", json={"email": "alice@example.com", "password": "y" * 80}
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid credentials"}


def test_verify_password_rejects_overlong_input() -> None:
    hashed = auth_service.hash_password("secret")
    assert not auth_service.verify_password("secret" * 20, hashed)


def test_login_with_malformed_email_is_invalid_credentials(client, make_admin) -> None:
    make_admin("alice@example.com", password="secret")
    for email in ("ghost", "", "alice@"):
        response = client.post("/api/auth/login", json={"email": email, "password": "secret"})
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid credentials"}


def test_login_normalizes_email_like_register(client, make_admin) -> None:
    make_admin("alice@example.com", password="secret")
    response = client.post(
        "/api/auth/login", json={"email": "alice@EXAMPLE.com", "password": "secret"}
    )
    assert response.status_code == 200
    assert response.json()["admin"]["email"] == "alice@example.com"
