"""
Test Configuration
==================

Pytest fixtures for Forge tests.

Route tests run the real account and category stores against an in-memory
stand-in for the Motor database, injected through FastAPI dependency
overrides.
"""

import copy
import os
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"


# =============================================================================
# In-memory MongoDB
# =============================================================================


def _matches(document: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    """Subset of the Motor cursor API used by the stores."""

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents

    def sort(
        self,
        key_or_list: str | list[tuple[str, int]],
        direction: int | None = None,
    ) -> "FakeCursor":
        keys = key_or_list if isinstance(key_or_list, list) else [(key_or_list, direction)]
        # Stable sorts, least significant key first; ties keep insertion order
        for key, key_direction in reversed(keys):
            self._documents = sorted(
                self._documents,
                key=lambda document: document[key],
                reverse=key_direction == DESCENDING,
            )
        return self

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        documents = [copy.deepcopy(d) for d in self._documents]
        return documents if length is None else documents[:length]


class FakeCollection:
    """Subset of the Motor collection API used by the stores."""

    def __init__(self, unique_fields: tuple[str, ...] = ()) -> None:
        self.documents: list[dict[str, Any]] = []
        self.unique_fields = unique_fields
        self.indexes: list[Any] = []

    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        self.indexes.append((keys, kwargs))
        return str(keys)

    async def insert_one(self, document: dict[str, Any]) -> None:
        for existing in self.documents:
            if existing["_id"] == document["_id"]:
                raise DuplicateKeyError("duplicate _id")
            for field in self.unique_fields:
                if existing.get(field) == document.get(field):
                    raise DuplicateKeyError(f"duplicate {field}")
        self.documents.append(copy.deepcopy(document))

    def find(self, query: dict[str, Any]) -> FakeCursor:
        return FakeCursor([d for d in self.documents if _matches(d, query)])

    async def find_one(
        self,
        query: dict[str, Any],
        sort: list[tuple[str, int]] | None = None,
    ) -> dict[str, Any] | None:
        cursor = self.find(query)
        if sort:
            cursor.sort(sort)
        documents = await cursor.to_list(length=1)
        return documents[0] if documents else None

    async def find_one_and_update(
        self,
        query: dict[str, Any],
        update: dict[str, Any],
        return_document: ReturnDocument = ReturnDocument.BEFORE,
    ) -> dict[str, Any] | None:
        for document in self.documents:
            if _matches(document, query):
                before = copy.deepcopy(document)
                document.update(update.get("$set", {}))
                return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else before
        return None


class FakeDatabase:
    """Dictionary of lazily created fake collections."""

    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {"users": FakeCollection(("email",))}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection()
        return self.collections[name]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Fresh in-memory database per test."""
    return FakeDatabase()


@pytest_asyncio.fixture
async def bbbee_scoring_client(fake_db: FakeDatabase) -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the B-BBEE Scoring Service."""
    from services.bbbee_scoring.main import app
    from shared.database import get_mongodb

    app.dependency_overrides[get_mongodb] = lambda: fake_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_signup_data() -> dict[str, Any]:
    """Sample signup payload."""
    return {
        "email": "owner@thandobuild.co.za",
        "password": "s3cure-passw0rd",
        "business_name": "Thando Build (Pty) Ltd",
        "financial_year_end": "28/Feb/2025",
        "address": "12 Main Road, Durban",
        "contact_number": "+27 31 555 0101",
        "sector": "Construction",
    }


@pytest_asyncio.fixture
async def registered_account(
    bbbee_scoring_client: AsyncClient,
    sample_signup_data: dict[str, Any],
) -> dict[str, Any]:
    """Sign up the sample account and return its id and credentials."""
    response = await bbbee_scoring_client.post("/auth/signup", json=sample_signup_data)
    assert response.status_code == 201
    return {**sample_signup_data, "user_id": response.json()["user_id"]}


@pytest.fixture
def auth_headers(registered_account: dict[str, Any]) -> dict[str, str]:
    """Generate authentication headers for the registered account."""
    from shared.auth import create_access_token

    token = create_access_token({
        "sub": registered_account["user_id"],
        "email": registered_account["email"],
        "business_name": registered_account["business_name"],
    })
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def generic_financials() -> dict[str, float]:
    """Financial figures for a mid-sized company."""
    return {
        "turnover": 50_000_000,
        "npat": 2_000_000,
        "total_leviable_amount": 10_000_000,
        "total_measured_procurement_spend": 20_000_000,
    }


@pytest.fixture
def sample_employees() -> list[dict[str, Any]]:
    """Employees across occupational levels."""
    return [
        {
            "name": "Lerato M",
            "race": "Black",
            "gender": "Female",
            "occupational_level": "Senior Management",
            "gross_monthly_salary": 85000,
        },
        {
            "name": "Pieter V",
            "race": "White",
            "gender": "Male",
            "occupational_level": "Executive Management",
            "gross_monthly_salary": "120000",
        },
        {
            "name": "Ayanda N",
            "race": "black",
            "gender": "FEMALE",
            "occupational_level": "Junior Management",
            "is_disabled": True,
            "gross_monthly_salary": 32000,
        },
    ]
