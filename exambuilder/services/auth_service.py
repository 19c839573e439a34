"""Authentication service for admin accounts and JWT handling."""
import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DbSession

from exambuilder.config import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY
from exambuilder.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
)
from exambuilder.models.auth import MAX_PASSWORD_BYTES
from exambuilder.models.db.admin import Admin

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Passwords longer than bcrypt accepts can never have been stored, so they
    simply do not match.
    """
    password = plain_password.encode("utf-8")
    if len(password) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password, hashed_password.encode("utf-8"))


def create_access_token(
    admin_id: str, email: str, expires_delta: timedelta | None = None
) -> str:
    """Create a signed JWT carrying the admin id and email."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": admin_id,
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> dict[str, str]:
    """Verify a JWT and return its identity claims.

    Raises:
        TokenExpiredError: the token is past its validity window.
        InvalidTokenError: bad signature, malformed token or missing claims.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise InvalidTokenError()

    admin_id = payload.get("sub")
    email = payload.get("email")
    if not admin_id or not email:
        raise InvalidTokenError()
    return {"id": admin_id, "email": email}


def get_admin_by_email(db: DbSession, email: str) -> Admin | None:
    """Get admin by email."""
    return db.query(Admin).filter(Admin.email == email).first()


def create_admin(db: DbSession, email: str, password: str, name: str) -> Admin:
    """Create a new admin with a hashed password."""
    admin = Admin(
        email=email,
        hashed_password=hash_password(password),
        name=name,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


def register(db: DbSession, email: str, password: str, name: str) -> tuple[str, Admin]:
    """Register an admin and issue a token.

    Returns:
        Tuple of (token, admin)
    """
    if get_admin_by_email(db, email):
        raise ConflictError()

    try:
        admin = create_admin(db, email, password, name)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise ConflictError()

    logger.info(f"Registered admin {admin.id}")
    return create_access_token(admin.id, admin.email), admin


def login(db: DbSession, email: str, password: str) -> tuple[str, Admin]:
    """Authenticate an admin and issue a token.

    Returns:
        Tuple of (token, admin)
    """
    admin = get_admin_by_email(db, email)
    if admin is None or not verify_password(password, admin.hashed_password):
        logger.warning("Rejected login attempt")
        raise InvalidCredentialsError()

    return create_access_token(admin.id, admin.email), admin
