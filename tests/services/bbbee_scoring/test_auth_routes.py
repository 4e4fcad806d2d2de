"""
Auth Routes Tests
=================

Tests for signup, login and token refresh endpoints.

Version: 0.1.0
"""

from typing import Any

import pytest
from fastapi import status
from httpx import AsyncClient

from shared.auth import create_access_token, create_refresh_token, decode_token


class TestSignup:
    """Tests for POST /auth/signup."""

    @pytest.mark.asyncio
    async def test_signup_creates_account(
        self,
        bbbee_scoring_client: AsyncClient,
        sample_signup_data: dict[str, Any],
        fake_db: Any,
    ) -> None:
        """Test that signup stores a hashed password and the parsed date."""
        response = await bbbee_scoring_client.post("/auth/signup", json=sample_signup_data)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["email"] == sample_signup_data["email"]
        assert body["business_name"] == sample_signup_data["business_name"]

        stored = fake_db["users"].documents[0]
        assert stored["_id"] == body["user_id"]
        assert stored["password_hash"] != sample_signup_data["password"]
        assert stored["financial_year_end"].year == 2025
        assert stored["sector"] == "Construction"

    @pytest.mark.asyncio
    async def test_duplicate_email_conflict(
        self,
        bbbee_scoring_client: AsyncClient,
        registered_account: dict[str, Any],
        sample_signup_data: dict[str, Any],
    ) -> None:
        """Test that a second signup with the same email returns 409."""
        sample_signup_data["email"] = sample_signup_data["email"].upper()

        response = await bbbee_scoring_client.post("/auth/signup", json=sample_signup_data)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_invalid_financial_year_end(
        self,
        bbbee_scoring_client: AsyncClient,
        sample_signup_data: dict[str, Any],
    ) -> None:
        """Test that a badly formatted financial year end is rejected."""
        sample_signup_data["financial_year_end"] = "31-03-2025"

        response = await bbbee_scoring_client.post("/auth/signup", json=sample_signup_data)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestLogin:
    """Tests for POST /auth/login."""

    @pytest.mark.asyncio
    async def test_login_returns_token_pair(
        self,
        bbbee_scoring_client: AsyncClient,
        registered_account: dict[str, Any],
    ) -> None:
        """Test that valid credentials return tokens for the account."""
        response = await bbbee_scoring_client.post(
            "/auth/login",
            json={"email": registered_account["email"], "password": registered_account["password"]},
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["token_type"] == "bearer"

        token_data = decode_token(body["access_token"], verify_type="access")
        assert token_data is not None
        assert token_data.sub == registered_account["user_id"]
        assert token_data.business_name == registered_account["business_name"]

    @pytest.mark.asyncio
    async def test_wrong_password(
        self,
        bbbee_scoring_client: AsyncClient,
        registered_account: dict[str, Any],
    ) -> None:
        """Test that a wrong password returns 401."""
        response = await bbbee_scoring_client.post(
            "/auth/login",
            json={"email": registered_account["email"], "password": "not-the-password"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_unknown_email(self, bbbee_scoring_client: AsyncClient) -> None:
        """Test that an unknown account returns 401."""
        response = await bbbee_scoring_client.post(
            "/auth/login",
            json={"email": "nobody@example.co.za", "password": "whatever"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestRefresh:
    """Tests for POST /auth/refresh."""

    @pytest.mark.asyncio
    async def test_refresh_issues_new_pair(
        self,
        bbbee_scoring_client: AsyncClient,
        registered_account: dict[str, Any],
    ) -> None:
        """Test that a valid refresh token yields new tokens."""
        refresh_token = create_refresh_token({"sub": registered_account["user_id"]})

        response = await bbbee_scoring_client.post(
            "/auth/refresh",
            json={"refresh_token": refresh_token},
        )

        assert response.status_code == status.HTTP_200_OK
        token_data = decode_token(response.json()["access_token"], verify_type="access")
        assert token_data is not None
        assert token_data.email == registered_account["email"]

    @pytest.mark.asyncio
    async def test_access_token_rejected(
        self,
        bbbee_scoring_client: AsyncClient,
        registered_account: dict[str, Any],
    ) -> None:
        """Test that an access token cannot be used to refresh."""
        access_token = create_access_token({"sub": registered_account["user_id"]})

        response = await bbbee_scoring_client.post(
            "/auth/refresh",
            json={"refresh_token": access_token},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_deleted_account_rejected(self, bbbee_scoring_client: AsyncClient) -> None:
        """Test that a refresh token for an unknown account is rejected."""
        refresh_token = create_refresh_token({"sub": "missing-user"})

        response = await bbbee_scoring_client.post(
            "/auth/refresh",
            json={"refresh_token": refresh_token},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
