from __future__ import annotations

from typing import Any

from exambuilder.config import OPTION_LABELS
from exambuilder.models.db import Admin, Test
from exambuilder.utils.time_utils import to_iso


def serialize_admin(admin: Admin) -> dict[str, Any]:
    return {"id": admin.id, "email": admin.email, "name": admin.name}


def serialize_question(question: dict[str, Any]) -> dict[str, Any]:
    options = question.get("options") or {}
    return {
        "id": question.get("id"),
        "questionText": question.get("questionText", ""),
        "options": {label: options.get(label, "") for label in OPTION_LABELS},
        "correctAnswer": question.get("correctAnswer", ""),
        "createdAt": question.get("createdAt"),
    }


def serialize_test(test: Test) -> dict[str, Any]:
    return {
        "id": test.id,
        "title": test.title,
        "description": test.description,
        "questions": [serialize_question(q) for q in test.questions or []],
        "createdBy": test.created_by,
        "createdAt": to_iso(test.created_at),
        "updatedAt": to_iso(test.updated_at),
    }
