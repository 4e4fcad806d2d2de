"""
JWT Token Management
====================

Handles JWT token creation, validation, and decoding for business accounts.

Version: 0.1.0
"""

from datetime import UTC, datetime, timedelta
from typing import Any, Literal

from jose import JWTError, jwt
from pydantic import BaseModel, Field

from shared.config import settings
from shared.logging import get_logger


logger = get_logger(__name__)

TokenType = Literal["access", "refresh"]


class TokenData(BaseModel):
    """Decoded JWT token payload."""

    sub: str = Field(..., description="Subject (account ID)")
    exp: datetime = Field(..., description="Expiration time")
    iat: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Issued at")
    token_type: TokenType = Field(default="access", description="Token type (access/refresh)")

    email: str | None = None
    business_name: str | None = None


class TokenPair(BaseModel):
    """Access and refresh token pair."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Access token expiry in seconds")


def _encode(data: dict[str, Any], token_type: TokenType, expire: datetime) -> str:
    to_encode = data.copy()
    to_encode.update(
        {
            "exp": expire,
            "iat": datetime.now(UTC),
            "token_type": token_type,
        }
    )
    return jwt.encode(
        to_encode,
        settings.jwt.secret_key.get_secret_value(),
        algorithm=settings.jwt.algorithm,
    )


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data (must include 'sub' for the account ID)
        expires_delta: Custom expiration time (default from settings)

    Returns:
        str: Encoded JWT token
    """
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.jwt.access_token_expire_minutes)
    )
    encoded_jwt = _encode(data, "access", expire)

    logger.debug(
        "access_token_created",
        sub=data.get("sub"),
        expires_at=expire.isoformat(),
    )

    return encoded_jwt


def create_refresh_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT refresh token.

    Args:
        data: Payload data (must include 'sub' for the account ID)
        expires_delta: Custom expiration time (default from settings)

    Returns:
        str: Encoded JWT refresh token
    """
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(days=settings.jwt.refresh_token_expire_days)
    )
    encoded_jwt = _encode(data, "refresh", expire)

    logger.debug(
        "refresh_token_created",
        sub=data.get("sub"),
        expires_at=expire.isoformat(),
    )

    return encoded_jwt


def create_token_pair(data: dict[str, Any]) -> TokenPair:
    """Create both access and refresh tokens for the same claims."""
    return TokenPair(
        access_token=create_access_token(data),
        refresh_token=create_refresh_token(data),
        expires_in=settings.jwt.access_token_expire_minutes * 60,
    )


def decode_token(token: str, verify_type: TokenType | None = None) -> TokenData | None:
    """
    Decode and validate a JWT token.

    Args:
        token: JWT token string
        verify_type: Optional token type to verify ('access' or 'refresh')

    Returns:
        TokenData: Decoded token data, or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt.secret_key.get_secret_value(),
            algorithms=[settings.jwt.algorithm],
        )
    except JWTError as e:
        logger.warning("token_decode_failed", error=str(e))
        return None

    if verify_type and payload.get("token_type") != verify_type:
        logger.warning(
            "token_type_mismatch",
            expected=verify_type,
            actual=payload.get("token_type"),
        )
        return None

    if "sub" not in payload:
        logger.warning("token_subject_missing")
        return None

    return TokenData(
        sub=payload["sub"],
        exp=datetime.fromtimestamp(payload["exp"], tz=UTC),
        iat=datetime.fromtimestamp(payload.get("iat", 0), tz=UTC),
        token_type=payload.get("token_type", "access"),
        email=payload.get("email"),
        business_name=payload.get("business_name"),
    )
