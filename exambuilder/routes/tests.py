"""Test management endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DbSession

from exambuilder.database import get_db
from exambuilder.dependencies.auth import CurrentAdmin
from exambuilder.models import MessageResponse, TestCreate
from exambuilder.serialization import serialize_test
from exambuilder.services import test_service

router = APIRouter(prefix="/api/tests", tags=["tests"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_test(
    payload: TestCreate,
    current_admin: CurrentAdmin,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Create a new test."""
    test = test_service.create_test(db, current_admin.id, payload.title, payload.description)
    return {"message": "Test created successfully", "test": serialize_test(test)}


@router.get("")
def list_tests(
    current_admin: CurrentAdmin,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """List the current admin's tests, newest first."""
    tests = test_service.list_tests(db, current_admin.id)
    return {"tests": [serialize_test(test) for test in tests]}


@router.get("/{test_id}")
def get_test(
    test_id: str,
    current_admin: CurrentAdmin,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Get a single test with its questions."""
    test = test_service.get_test(db, current_admin.id, test_id)
    return {"test": serialize_test(test)}


@router.delete("/{test_id}", response_model=MessageResponse)
def delete_test(
    test_id: str,
    current_admin: CurrentAdmin,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, str]:
    """Delete test."""
    test_service.delete_test(db, current_admin.id, test_id)
    return {"message": "Test deleted successfully"}
