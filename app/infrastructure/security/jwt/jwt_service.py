"""
JWT Service implementation.

Thin wrapper over PyJWT that creates HS256 access tokens and decodes them
back into a validated payload.
"""

import logging
from datetime import timedelta
from typing import Any
from uuid import uuid4

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from app.core.config.settings import Settings
from app.domain.exceptions import AuthenticationError
from app.domain.utils.datetime_utils import now_utc

logger = logging.getLogger(__name__)


class TokenPayload(BaseModel):
    """Validated claims of an access token."""

    model_config = ConfigDict(extra="allow")

    sub: str = Field(..., min_length=1)
    exp: int
    iat: int | None = None
    jti: str | None = None
    iss: str | None = None
    aud: str | list[str] | None = None


class JWTService:
    """Creates and verifies access tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 30,
        issuer: str | None = None,
        audience: str | None = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expire_minutes = access_token_expire_minutes
        self.issuer = issuer
        self.audience = audience

    def create_access_token(
        self,
        user_id: str,
        expires_delta_minutes: int | None = None,
        extra_claims: dict[str, Any] | None = None,
    ) -> str:
        """Create a signed access token whose subject is the user id."""
        now = now_utc()
        minutes = (
            expires_delta_minutes
            if expires_delta_minutes is not None
            else self.access_token_expire_minutes
        )
        expires_at = now + timedelta(minutes=minutes)
        claims: dict[str, Any] = {
            **(extra_claims or {}),
            "sub": str(user_id),
            "exp": int(expires_at.timestamp()),
            "iat": int(now.timestamp()),
            "jti": str(uuid4()),
        }
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """
        Verify a token's signature, expiry, issuer and audience.

        Raises:
            AuthenticationError: If the token is missing, expired or invalid
        """
        if not token:
            raise AuthenticationError("Token is empty")
        if token.startswith("Bearer "):
            token = token[7:]

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options={"require": ["exp", "sub"]},
            )
        except ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired") from e
        except InvalidTokenError as e:
            logger.info(f"Rejected access token: {type(e).__name__}")
            raise AuthenticationError("Invalid token") from e

        try:
            return TokenPayload(**payload)
        except PydanticValidationError as e:
            raise AuthenticationError("Invalid token claims") from e

    def get_subject(self, token: str) -> str:
        """Return the user id a valid token was issued for."""
        return self.decode_token(token).sub


def get_jwt_service(settings: Settings) -> JWTService:
    """Build a JWTService from application settings."""
    return JWTService(
        secret_key=settings.JWT_SECRET_KEY.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        issuer=settings.JWT_ISSUER,
        audience=settings.JWT_AUDIENCE,
    )
