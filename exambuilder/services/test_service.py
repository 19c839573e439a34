"""Service layer for test and question operations.

Every lookup filters on the owning admin, so a test that belongs to someone
else is indistinguishable from one that does not exist.
"""
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DbSession

from exambuilder.exceptions import BadRequestError, NotFoundError, StorageError
from exambuilder.models.db.test import Test
from exambuilder.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


def build_question(
    question_text: str, options: dict[str, str], correct_answer: str
) -> dict[str, object]:
    """Build an embedded question document."""
    return {
        "id": uuid.uuid4().hex,
        "questionText": question_text,
        "options": {
            "A": options["A"],
            "B": options["B"],
            "C": options["C"],
            "D": options["D"],
        },
        "correctAnswer": correct_answer,
        "createdAt": utc_now(),
    }


def create_test(
    db: DbSession, admin_id: str, title: str, description: str | None = None
) -> Test:
    """Create an empty test owned by admin_id."""
    if not (title or "").strip():
        raise BadRequestError("Title is required")

    now = datetime.now(timezone.utc)
    test = Test(
        title=title,
        description=description or "",
        questions=[],
        created_by=admin_id,
        created_at=now,
        updated_at=now,
    )
    db.add(test)
    db.commit()
    db.refresh(test)
    logger.info(f"Admin {admin_id} created test {test.id}")
    return test


def list_tests(db: DbSession, admin_id: str) -> list[Test]:
    """List tests owned by admin_id, newest first."""
    return (
        db.query(Test)
        .filter(Test.created_by == admin_id)
        .order_by(Test.created_at.desc())
        .all()
    )


def get_test(db: DbSession, admin_id: str, test_id: str) -> Test:
    """Get a test owned by admin_id or raise NotFoundError."""
    test = (
        db.query(Test)
        .filter(Test.id == test_id, Test.created_by == admin_id)
        .first()
    )
    if test is None:
        raise NotFoundError()
    return test


def _replace_questions(db: DbSession, test: Test, questions: list[dict]) -> None:
    """Store a new question list on the test in one commit."""
    test.questions = questions
    test.updated_at = datetime.now(timezone.utc)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to save questions for test {test.id}")
        raise StorageError("Error saving questions to database")
    db.refresh(test)


def add_question(
    db: DbSession,
    admin_id: str,
    test_id: str,
    question_text: str,
    options: dict[str, str],
    correct_answer: str,
) -> dict[str, object]:
    """Append one question to an owned test and return it."""
    test = get_test(db, admin_id, test_id)
    question = build_question(question_text, options, correct_answer.upper())
    _replace_questions(db, test, [*test.questions, question])
    return question


def append_questions(db: DbSession, test: Test, questions: list[dict]) -> int:
    """Append a batch of questions in a single write.

    The batch is committed in one transaction; on failure nothing is stored.
    """
    _replace_questions(db, test, [*test.questions, *questions])
    return len(questions)


def delete_question(db: DbSession, admin_id: str, test_id: str, question_id: str) -> None:
    """Remove a question by id; an unknown id leaves the list unchanged."""
    test = get_test(db, admin_id, test_id)
    remaining = [q for q in test.questions if q.get("id") != question_id]
    _replace_questions(db, test, remaining)


def delete_test(db: DbSession, admin_id: str, test_id: str) -> None:
    """Delete an owned test."""
    deleted = (
        db.query(Test)
        .filter(Test.id == test_id, Test.created_by == admin_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if not deleted:
        raise NotFoundError()
    logger.info(f"Admin {admin_id} deleted test {test_id}")
