"""Pydantic models."""
from exambuilder.models.auth import (
    AdminLogin,
    AdminRegister,
    AdminResponse,
    AuthResponse,
    MessageResponse,
    TokenClaims,
    VerifyResponse,
)
from exambuilder.models.tests import QuestionCreate, TestCreate, UploadResponse

__all__ = [
    "AdminLogin",
    "AdminRegister",
    "AdminResponse",
    "AuthResponse",
    "MessageResponse",
    "QuestionCreate",
    "TestCreate",
    "TokenClaims",
    "UploadResponse",
    "VerifyResponse",
]
