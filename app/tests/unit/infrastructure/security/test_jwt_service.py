"""
Tests for the JWT service.
"""

import jwt
import pytest

from app.core.config.settings import Settings
from app.domain.exceptions import AuthenticationError
from app.infrastructure.security.jwt import JWTService, get_jwt_service


class TestJWTService:
    def test_round_trip_subject(self, jwt_service: JWTService):
        token = jwt_service.create_access_token("user-123")

        payload = jwt_service.decode_token(token)

        assert payload.sub == "user-123"
        assert payload.iss == "maternal-wellness-test"
        assert payload.aud == "maternal-wellness-api"
        assert payload.jti
        assert payload.exp > payload.iat

    def test_bearer_prefix_is_stripped(self, jwt_service: JWTService):
        token = jwt_service.create_access_token("user-123")
        assert jwt_service.get_subject(f"Bearer {token}") == "user-123"

    def test_extra_claims_cannot_override_subject(self, jwt_service: JWTService):
        token = jwt_service.create_access_token("user-123", extra_claims={"sub": "x", "role": "mum"})

        payload = jwt_service.decode_token(token)

        assert payload.sub == "user-123"
        assert payload.model_extra["role"] == "mum"

    def test_expired_token(self, jwt_service: JWTService):
        token = jwt_service.create_access_token("user-123", expires_delta_minutes=-5)

        with pytest.raises(AuthenticationError, match="expired"):
            jwt_service.decode_token(token)

    def test_wrong_secret(self, jwt_service: JWTService):
        other = JWTService(
            secret_key="another-secret-key-that-is-long-enough-123",
            issuer=jwt_service.issuer,
            audience=jwt_service.audience,
        )
        token = other.create_access_token("user-123")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            jwt_service.decode_token(token)

    def test_wrong_audience(self, jwt_service: JWTService):
        other = JWTService(
            secret_key=jwt_service.secret_key, issuer=jwt_service.issuer, audience="someone-else"
        )
        with pytest.raises(AuthenticationError):
            jwt_service.decode_token(other.create_access_token("user-123"))

    def test_missing_subject(self, jwt_service: JWTService):
        token = jwt.encode(
            {"exp": 9999999999, "iss": jwt_service.issuer, "aud": jwt_service.audience},
            jwt_service.secret_key,
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError):
            jwt_service.decode_token(token)

    @pytest.mark.parametrize("token", ["", "not-a-jwt", "Bearer "])
    def test_malformed_tokens(self, jwt_service: JWTService, token: str):
        with pytest.raises(AuthenticationError):
            jwt_service.decode_token(token)


def test_service_from_settings(test_settings: Settings):
    service = get_jwt_service(test_settings)

    assert service.algorithm == "HS256"
    assert service.issuer == "maternal-wellness-test"
    assert service.get_subject(service.create_access_token("abc")) == "abc"
