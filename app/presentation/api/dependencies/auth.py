"""
Authentication Dependencies for the Presentation Layer.

Resolves the caller's user id from a Bearer token. Every user-scoped route
depends on `get_current_user_id`.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.exceptions import AuthenticationError
from app.infrastructure.security.jwt.jwt_service import JWTService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="Access token issued for the user")


def get_jwt_service(request: Request) -> JWTService:
    """Return the JWT service created at application startup."""
    return request.app.state.jwt_service


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


async def get_current_user_id(
    jwt_service: JWTServiceDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
) -> str:
    """
    Return the `sub` claim of a valid Bearer token.

    Raises:
        AuthenticationError: If the token is missing, expired or invalid
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Not authenticated")
    return jwt_service.get_subject(credentials.credentials)


CurrentUserIdDep = Annotated[str, Depends(get_current_user_id)]
