"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from devconnector.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


class InvalidTokenError(JWTError):
    """Token is malformed or its signature does not match."""

    pass


class ExpiredTokenError(JWTError):
    """Token signature is valid but the token is past its expiry."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    ttl_seconds: int,
    now: datetime | None = None,
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        settings: Authentication settings
        ttl_seconds: Token lifetime in seconds, must be positive
        now: Issue time (defaults to the current UTC time)

    Returns:
        Encoded JWT token

    Raises:
        ValueError: If ttl_seconds is not positive
    """
    if ttl_seconds <= 0:
        raise ValueError("Token TTL must be positive")

    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(seconds=ttl_seconds)

    payload = {
        "user_id": user_id,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        ExpiredTokenError: If the token is past its expiry
        InvalidTokenError: If the token is malformed or tampered with
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidTokenError("Invalid token")
    except ValueError:
        # Signature checked out but the claims do not fit the payload model
        raise InvalidTokenError("Invalid token")
