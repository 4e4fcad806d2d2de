"""
Account Store
=============

Business accounts in the MongoDB `users` collection, keyed by a UUID string
and unique by (lower-cased) email.

Version: 0.1.0
"""

import uuid
from datetime import UTC, date, datetime, time
from typing import Any

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from services.bbbee_scoring.models.account import Profile, SignupRequest
from shared.auth import hash_password, verify_password
from shared.database import USERS_COLLECTION, get_mongodb
from shared.logging import get_logger


logger = get_logger(__name__)


class DuplicateAccountError(Exception):
    """An account with this email already exists."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"An account already exists for {email}")


def _to_datetime(value: date) -> datetime:
    # BSON has no date type; store midnight UTC
    return datetime.combine(value, time.min, tzinfo=UTC)


def to_profile(document: dict[str, Any]) -> Profile:
    """Build the public profile from a stored account document."""
    financial_year_end = document.get("financial_year_end")
    if isinstance(financial_year_end, datetime):
        financial_year_end = financial_year_end.date()

    return Profile(
        id=document["_id"],
        email=document["email"],
        business_name=document.get("business_name", ""),
        financial_year_end=financial_year_end,
        address=document.get("address", ""),
        contact_number=document.get("contact_number", ""),
        sector=document.get("sector"),
        created_at=document.get("created_at"),
    )


class AccountStore:
    """Create, verify and update business accounts."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:  # type: ignore[type-arg]
        self.collection = db[USERS_COLLECTION]

    async def create(self, request: SignupRequest) -> dict[str, Any]:
        """
        Create an account.

        Raises:
            DuplicateAccountError: the email is already registered
        """
        now = datetime.now(UTC)
        document = {
            "_id": str(uuid.uuid4()),
            "email": request.email.lower(),
            "password_hash": hash_password(request.password),
            "business_name": request.business_name,
            "financial_year_end": _to_datetime(request.financial_year_end),
            "address": request.address,
            "contact_number": request.contact_number,
            "sector": request.sector.value if request.sector else None,
            "created_at": now,
            "updated_at": now,
        }

        try:
            await self.collection.insert_one(document)
        except DuplicateKeyError:
            raise DuplicateAccountError(document["email"]) from None

        logger.info("account_created", user_id=document["_id"])
        return document

    async def verify(self, email: str, password: str) -> dict[str, Any] | None:
        """Return the account if the credentials match, else None."""
        document = await self.collection.find_one({"email": email.lower()})
        if document is None or not verify_password(password, document["password_hash"]):
            logger.info("account_login_rejected")
            return None
        return document

    async def get_by_id(self, user_id: str) -> dict[str, Any] | None:
        return await self.collection.find_one({"_id": user_id})

    async def update_profile(
        self,
        user_id: str,
        business_name: str,
        sector: str,
    ) -> dict[str, Any] | None:
        """Set business name and sector; returns the updated account or None."""
        document = await self.collection.find_one_and_update(
            {"_id": user_id},
            {
                "$set": {
                    "business_name": business_name,
                    "sector": sector,
                    "updated_at": datetime.now(UTC),
                }
            },
            return_document=ReturnDocument.AFTER,
        )
        if document is not None:
            logger.info("profile_updated", user_id=user_id, sector=sector)
        return document


async def get_account_store(
    db: AsyncIOMotorDatabase = Depends(get_mongodb),  # type: ignore[type-arg]
) -> AccountStore:
    """Dependency that provides the account store."""
    return AccountStore(db)
