"""HTTP client for the Exam Builder API with a locally persisted session."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import requests


DEFAULT_API_URL = "http://localhost:8000/api"


def default_session_path() -> Path:
    raw = os.environ.get("EXAMBUILDER_SESSION_FILE")
    if raw:
        return Path(raw)
    return Path.home() / ".exambuilder" / "session.json"


class ApiError(Exception):
    """Non-2xx response; ``message`` is the server's text verbatim."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class SessionStore:
    """Token and admin profile kept in a JSON file between runs."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or default_session_path()

    def load(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            return None
        if not isinstance(data, dict) or not data.get("token"):
            return None
        return data

    def save(self, token: str, admin: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"token": token, "admin": admin}
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    @property
    def token(self) -> str | None:
        data = self.load()
        return data["token"] if data else None


class ExamBuilderClient:
    """Thin wrapper over the REST endpoints.

    ``session`` is anything with a requests-style ``request`` method.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        token: str | None = None,
        session: Any | None = None,
        timeout: float | None = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            headers=headers,
            timeout=self.timeout,
            **kwargs,
        )
        if not 200 <= response.status_code < 300:
            try:
                body = response.json()
            except ValueError:
                body = {}
            message = body.get("message") if isinstance(body, dict) else None
            raise ApiError(response.status_code, message or f"HTTP {response.status_code}")
        return response.json()

    # Auth
    def register(self, email: str, password: str, name: str) -> dict[str, Any]:
        data = self._request(
            "POST", "/auth/register", json={"email": email, "password": password, "name": name}
        )
        self.token = data["token"]
        return data

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data

    def verify(self) -> dict[str, Any]:
        return self._request("GET", "/auth/verify")

    # Tests
    def list_tests(self) -> list[dict[str, Any]]:
        return self._request("GET", "/tests")["tests"]

    def create_test(self, title: str, description: str = "") -> dict[str, Any]:
        return self._request(
            "POST", "/tests", json={"title": title, "description": description}
        )["test"]

    def get_test(self, test_id: str) -> dict[str, Any]:
        return self._request("GET", f"/tests/{test_id}")["test"]

    def delete_test(self, test_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"/tests/{test_id}")

    # Questions
    def add_question(
        self,
        test_id: str,
        question_text: str,
        options: dict[str, str],
        correct_answer: str,
    ) -> dict[str, Any]:
        payload = {
            "questionText": question_text,
            "optionA": options["A"],
            "optionB": options["B"],
            "optionC": options["C"],
            "optionD": options["D"],
            "correctAnswer": correct_answer,
        }
        return self._request("POST", f"/tests/{test_id}/questions", json=payload)["question"]

    def delete_question(self, test_id: str, question_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"/tests/{test_id}/questions/{question_id}")

    def upload_csv(self, test_id: str, path: Path) -> dict[str, Any]:
        with path.open("rb") as handle:
            return self._request(
                "POST",
                f"/tests/{test_id}/upload-csv",
                files={"csvFile": (path.name, handle, "text/csv")},
            )
