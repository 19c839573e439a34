"""Service-level errors and their HTTP mapping."""
from fastapi import status


class ServiceError(Exception):
    """Base error raised by services; carries the response status and message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(ServiceError):
    """Raised when registering an email that is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Admin already exists"


class InvalidCredentialsError(ServiceError):
    """Unknown email or wrong password; the message never says which."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class AuthenticationRequired(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class InvalidTokenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class TokenExpiredError(InvalidTokenError):
    default_message = "Token expired"


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Test not found"


class StorageError(ServiceError):
    """Store write failed; detail is logged, not returned."""
