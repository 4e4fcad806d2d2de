"""
Authentication Module
=====================

JWT-based authentication for business accounts.

Features:
- JWT access/refresh token generation and validation
- Password hashing with bcrypt
- FastAPI dependency for route protection

Usage:
    from shared.auth import (
        create_token_pair,
        get_current_user,
        hash_password,
        verify_password,
    )

    hashed = hash_password("user_password")

    if verify_password("user_password", hashed):
        tokens = create_token_pair({"sub": account_id, "email": email})

    @app.get("/protected")
    async def protected(user: User = Depends(get_current_user)):
        return {"user": user.email}
"""

from shared.auth.dependencies import (
    User,
    get_current_user,
    oauth2_scheme,
)
from shared.auth.jwt import (
    TokenData,
    TokenPair,
    create_access_token,
    create_refresh_token,
    create_token_pair,
    decode_token,
)
from shared.auth.password import hash_password, verify_password


__all__ = [
    # JWT
    "create_access_token",
    "create_refresh_token",
    "create_token_pair",
    "decode_token",
    "TokenData",
    "TokenPair",
    # Password
    "hash_password",
    "verify_password",
    # Dependencies
    "User",
    "get_current_user",
    "oauth2_scheme",
]
