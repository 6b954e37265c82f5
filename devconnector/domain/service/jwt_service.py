"""JWT token domain service."""

from uuid import UUID

import logfire

from devconnector.config import AuthSettings
from devconnector.domain.value import Principal, UserId
from devconnector.util.jwt import InvalidTokenError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and verifies the bearer tokens that carry a Principal."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, principal: Principal, ttl_seconds: int | None = None) -> str:
        """Sign a token for principal.

        Args:
            principal: Identity to encode
            ttl_seconds: Lifetime override, defaults to the configured TTL

        Returns:
            JWT token string

        Raises:
            ValueError: If ttl_seconds is not positive
        """
        ttl = (
            ttl_seconds
            if ttl_seconds is not None
            else self.auth_settings.token_ttl_seconds
        )
        with logfire.span("jwt_service.issue", user_id=str(principal.id)):
            token = create_token(str(principal.id), self.auth_settings, ttl)
            logfire.info("JWT token issued", user_id=str(principal.id), ttl=ttl)
            return token

    def verify(self, token: str) -> Principal:
        """Verify a token and rebuild the Principal it carries.

        Args:
            token: JWT token string

        Returns:
            Principal encoded in the token

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the token is malformed or tampered with
        """
        with logfire.span("jwt_service.verify"):
            try:
                payload = verify_token(token, self.auth_settings)
                user_id = UserId(UUID(payload.user_id))
            except ValueError:
                raise InvalidTokenError("Invalid token")
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.debug("JWT token verified", user_id=str(user_id))
            return Principal(id=user_id)
