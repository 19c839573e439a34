"""Authentication routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DbSession

from exambuilder.database import get_db
from exambuilder.dependencies.auth import CurrentAdmin
from exambuilder.models.auth import (
    AdminLogin,
    AdminRegister,
    AuthResponse,
    VerifyResponse,
)
from exambuilder.serialization import serialize_admin
from exambuilder.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: AdminRegister,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Register a new admin."""
    token, admin = auth_service.register(db, data.email, data.password, data.name)
    return {
        "message": "Admin registered successfully",
        "token": token,
        "admin": serialize_admin(admin),
    }


@router.post("/login", response_model=AuthResponse)
def login(
    data: AdminLogin,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Login and get JWT token."""
    token, admin = auth_service.login(db, data.email, data.password)
    return {
        "message": "Login successful",
        "token": token,
        "admin": serialize_admin(admin),
    }


@router.get("/verify", response_model=VerifyResponse)
async def verify(current_admin: CurrentAdmin) -> VerifyResponse:
    """Check the bearer token and echo its identity claims."""
    return VerifyResponse(valid=True, admin=current_admin)
