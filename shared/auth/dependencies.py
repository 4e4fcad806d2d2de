"""
FastAPI Authentication Dependencies
===================================

Dependency injection for route protection.

Version: 0.1.0
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, Field

from shared.auth.jwt import decode_token
from shared.logging import bind_context, get_logger


logger = get_logger(__name__)

# OAuth2 scheme for token extraction from Authorization header
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/auth/login",
    auto_error=False,
)


class User(BaseModel):
    """Authenticated business account for dependency injection."""

    id: str = Field(..., description="Account ID")
    email: str | None = Field(default=None, description="Business email")
    business_name: str | None = Field(default=None, description="Registered business name")


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> User:
    """
    Extract and validate the account from a bearer token.

    Raises:
        HTTPException: 401 if token is missing or invalid
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if token is None:
        logger.warning("auth_token_missing")
        raise credentials_exception

    token_data = decode_token(token, verify_type="access")

    if token_data is None:
        logger.warning("auth_token_invalid")
        raise credentials_exception

    bind_context(user_id=token_data.sub)
    logger.debug("user_authenticated", user_id=token_data.sub)

    return User(
        id=token_data.sub,
        email=token_data.email,
        business_name=token_data.business_name,
    )
