"""Pydantic models for authentication."""
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class AdminRegister(BaseModel):
    """Admin registration request."""

    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class AdminLogin(BaseModel):
    """Admin login request.

    The email is normalised like ``EmailStr`` but never rejected here, so a
    malformed address fails the same way as an unknown one.
    """

    email: str
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        try:
            return validate_email(value, check_deliverability=False).normalized
        except EmailNotValidError:
            return value


class AdminResponse(BaseModel):
    """Admin response (public info)."""

    id: str
    email: str
    name: str

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Token plus public admin fields, returned by register and login."""

    message: str
    token: str
    admin: AdminResponse


class TokenClaims(BaseModel):
    """Identity embedded in a bearer token."""

    id: str
    email: str


class VerifyResponse(BaseModel):
    valid: bool
    admin: TokenClaims


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str
