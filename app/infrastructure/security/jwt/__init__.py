"""
JWT authentication service module.

Decodes bearer tokens into the caller's user id. Issuing tokens is only
provided for tests and local tooling; login and registration live elsewhere.
"""

from app.infrastructure.security.jwt.jwt_service import JWTService, TokenPayload, get_jwt_service

__all__ = ["JWTService", "TokenPayload", "get_jwt_service"]
