"""Question management endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DbSession

from exambuilder.database import get_db
from exambuilder.dependencies.auth import CurrentAdmin
from exambuilder.models import MessageResponse, QuestionCreate
from exambuilder.serialization import serialize_question
from exambuilder.services import test_service

router = APIRouter(prefix="/api/tests/{test_id}/questions", tags=["questions"])


@router.post("", status_code=status.HTTP_201_CREATED)
def add_question(
    test_id: str,
    payload: QuestionCreate,
    current_admin: CurrentAdmin,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Add new question to test."""
    question = test_service.add_question(
        db,
        current_admin.id,
        test_id,
        payload.questionText,
        payload.options(),
        payload.correctAnswer,
    )
    return {
        "message": "Question added successfully",
        "question": serialize_question(question),
    }


@router.delete("/{question_id}", response_model=MessageResponse)
def delete_question(
    test_id: str,
    question_id: str,
    current_admin: CurrentAdmin,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, str]:
    """Delete question from test."""
    test_service.delete_question(db, current_admin.id, test_id, question_id)
    return {"message": "Question deleted successfully"}
