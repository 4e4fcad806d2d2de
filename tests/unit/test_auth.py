"""
Unit tests for authentication module.
"""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi import HTTPException

from shared.auth import (
    create_access_token,
    create_refresh_token,
    create_token_pair,
    decode_token,
    get_current_user,
    hash_password,
    verify_password,
)
from shared.auth.jwt import TokenData


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password_returns_hash(self) -> None:
        """Test that hash_password returns a bcrypt hash."""
        password = "test_password_123"
        hashed = hash_password(password)

        assert hashed != password
        assert hashed.startswith("$2b$")
        assert len(hashed) == 60

    def test_verify_password_correct(self) -> None:
        """Test that verify_password returns True for correct password."""
        hashed = hash_password("correct_password")

        assert verify_password("correct_password", hashed) is True

    def test_verify_password_incorrect(self) -> None:
        """Test that verify_password returns False for incorrect password."""
        hashed = hash_password("correct_password")

        assert verify_password("wrong_password", hashed) is False


class TestJWTTokens:
    """Tests for JWT token functions."""

    def test_decode_access_token(self) -> None:
        """Test access token decoding with account claims."""
        token = create_access_token({
            "sub": "user123",
            "email": "owner@example.co.za",
            "business_name": "Example Holdings",
        })

        decoded = decode_token(token, verify_type="access")

        assert decoded is not None
        assert decoded.sub == "user123"
        assert decoded.email == "owner@example.co.za"
        assert decoded.business_name == "Example Holdings"
        assert decoded.token_type == "access"

    def test_create_refresh_token(self) -> None:
        """Test refresh token creation."""
        token = create_refresh_token({"sub": "user123"})

        decoded = decode_token(token, verify_type="refresh")

        assert decoded is not None
        assert decoded.token_type == "refresh"

    def test_decode_wrong_token_type(self) -> None:
        """Test that decoding with wrong type returns None."""
        access_token = create_access_token({"sub": "user123"})

        assert decode_token(access_token, verify_type="refresh") is None

    def test_decode_invalid_token(self) -> None:
        """Test that invalid token returns None."""
        assert decode_token("invalid.token.string") is None

    def test_expired_token(self) -> None:
        """Test that an expired token returns None."""
        token = create_access_token({"sub": "user123"}, expires_delta=timedelta(seconds=-1))

        assert decode_token(token) is None

    def test_missing_subject(self) -> None:
        """Test that a token without a subject returns None."""
        token = create_access_token({"email": "owner@example.co.za"})

        assert decode_token(token) is None

    def test_token_pair(self) -> None:
        """Test that a pair holds one token of each type."""
        pair = create_token_pair({"sub": "user123"})

        assert decode_token(pair.access_token, verify_type="access") is not None
        assert decode_token(pair.refresh_token, verify_type="refresh") is not None
        assert pair.token_type == "bearer"
        assert pair.expires_in > 0


class TestTokenData:
    """Tests for TokenData model."""

    def test_token_data_defaults(self) -> None:
        """Test TokenData requires only sub and exp."""
        token_data = TokenData(sub="user123", exp=datetime.now(UTC))

        assert token_data.token_type == "access"
        assert token_data.email is None
        assert token_data.business_name is None


class TestGetCurrentUser:
    """Tests for the bearer token dependency."""

    @pytest.mark.asyncio
    async def test_valid_token(self) -> None:
        """Test that a valid access token yields the user."""
        token = create_access_token({"sub": "user123", "email": "owner@example.co.za"})

        user = await get_current_user(token)

        assert user.id == "user123"
        assert user.email == "owner@example.co.za"

    @pytest.mark.asyncio
    async def test_missing_token(self) -> None:
        """Test that a missing token is rejected with 401."""
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(None)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_refresh_token_rejected(self) -> None:
        """Test that refresh tokens cannot authenticate requests."""
        token = create_refresh_token({"sub": "user123"})

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(token)

        assert exc_info.value.status_code == 401
