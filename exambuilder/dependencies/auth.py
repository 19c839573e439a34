"""Authentication dependencies for FastAPI."""
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from exambuilder.exceptions import AuthenticationRequired
from exambuilder.models.auth import TokenClaims
from exambuilder.services.auth_service import verify_token

# HTTP Bearer scheme for JWT
security = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Get the identity of the authenticated admin from the bearer token.

    Raises:
        AuthenticationRequired: 401 if no bearer token was sent.
        InvalidTokenError: 403 if the token is invalid or expired.
    """
    if credentials is None:
        raise AuthenticationRequired()

    claims = verify_token(credentials.credentials)
    return TokenClaims(**claims)


CurrentAdmin = Annotated[TokenClaims, Depends(get_current_admin)]
