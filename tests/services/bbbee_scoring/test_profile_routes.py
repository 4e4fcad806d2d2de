"""
Profile Routes Tests
====================

Tests for the business profile endpoints.

Version: 0.1.0
"""

from typing import Any

import pytest
from fastapi import status
from httpx import AsyncClient

from shared.auth import create_access_token


class TestGetProfile:
    """Tests for GET /api/v1/profile."""

    @pytest.mark.asyncio
    async def test_returns_profile(
        self,
        bbbee_scoring_client: AsyncClient,
        registered_account: dict[str, Any],
        auth_headers: dict[str, str],
    ) -> None:
        """Test that the profile reflects the signup data."""
        response = await bbbee_scoring_client.get("/api/v1/profile", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["id"] == registered_account["user_id"]
        assert body["business_name"] == registered_account["business_name"]
        assert body["financial_year_end"] == "2025-02-28"
        assert body["sector"] == "Construction"
        assert "password_hash" not in body

    @pytest.mark.asyncio
    async def test_requires_token(self, bbbee_scoring_client: AsyncClient) -> None:
        """Test that the profile requires authentication."""
        response = await bbbee_scoring_client.get("/api/v1/profile")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_unknown_account(self, bbbee_scoring_client: AsyncClient) -> None:
        """Test that a token for a missing account returns 404."""
        token = create_access_token({"sub": "missing-user"})

        response = await bbbee_scoring_client.get(
            "/api/v1/profile",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateProfile:
    """Tests for PATCH /api/v1/profile."""

    @pytest.mark.asyncio
    async def test_updates_name_and_sector(
        self,
        bbbee_scoring_client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        """Test that business name and sector are updated."""
        response = await bbbee_scoring_client.patch(
            "/api/v1/profile",
            json={"business_name": "Thando Tourism", "sector": "Tourism"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["business_name"] == "Thando Tourism"
        assert response.json()["sector"] == "Tourism"

        profile = await bbbee_scoring_client.get("/api/v1/profile", headers=auth_headers)
        assert profile.json()["sector"] == "Tourism"

    @pytest.mark.asyncio
    async def test_sector_required(
        self,
        bbbee_scoring_client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        """Test that both business name and sector must be sent."""
        response = await bbbee_scoring_client.patch(
            "/api/v1/profile",
            json={"business_name": "Thando Tourism"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_unknown_sector_rejected(
        self,
        bbbee_scoring_client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        """Test that only published sectors can be stored."""
        response = await bbbee_scoring_client.patch(
            "/api/v1/profile",
            json={"business_name": "Thando Mining", "sector": "Mining"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
