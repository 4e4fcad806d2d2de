"""
Category Document Store
=======================

Stores category submissions, one MongoDB collection per category. Each
document keeps the submitted records and the server-computed summary:

    {
        "_id": "<uuid>",
        "user_id": "<account id>",
        "category": "ownership",
        "submission": {...},
        "summary": {...},
        "created_at": datetime,
        "updated_at": datetime,
        "sequence": ObjectId,
    }

`sequence` orders submissions stored within the same millisecond, which
BSON datetimes cannot tell apart.

The stored summary is informational; scoring re-aggregates the submission.

Version: 0.1.0
"""

import uuid
from dataclasses import asdict
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from services.bbbee_scoring.models.submissions import CategoryDefinition, CategorySubmission
from shared.database import get_mongodb
from shared.logging import get_logger


logger = get_logger(__name__)

NEWEST_FIRST = [("created_at", DESCENDING), ("sequence", DESCENDING)]


class CategoryStore:
    """Create and query category submissions for a user."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:  # type: ignore[type-arg]
        self.db = db

    async def create(
        self,
        definition: CategoryDefinition,
        user_id: str,
        submission: CategorySubmission,
    ) -> dict[str, Any]:
        """
        Summarize and store a submission.

        Raises:
            ScoringError: the records cannot be aggregated
        """
        summary = submission.summarize()
        now = datetime.now(UTC)
        document = {
            "_id": str(uuid.uuid4()),
            "user_id": user_id,
            "category": definition.category.value,
            "submission": submission.model_dump(mode="json"),
            "summary": asdict(summary),
            "created_at": now,
            "updated_at": now,
            "sequence": ObjectId(),
        }

        await self.db[definition.collection].insert_one(document)

        logger.info(
            "category_submission_stored",
            category=definition.category.value,
            user_id=user_id,
            submission_id=document["_id"],
        )
        return document

    async def list_for_user(
        self,
        definition: CategoryDefinition,
        user_id: str,
    ) -> list[dict[str, Any]]:
        """All of a user's submissions for a category, newest first."""
        cursor = (
            self.db[definition.collection]
            .find({"user_id": user_id})
            .sort(NEWEST_FIRST)
        )
        return await cursor.to_list(length=None)

    async def latest_for_user(
        self,
        definition: CategoryDefinition,
        user_id: str,
    ) -> dict[str, Any] | None:
        return await self.db[definition.collection].find_one(
            {"user_id": user_id},
            sort=NEWEST_FIRST,
        )


def to_submission_document(document: dict[str, Any]) -> dict[str, Any]:
    """Rename the Mongo `_id` for API responses and drop the ordering key."""
    result = {
        key: value for key, value in document.items() if key not in ("_id", "sequence")
    }
    result["id"] = document["_id"]
    return result


async def get_category_store(
    db: AsyncIOMotorDatabase = Depends(get_mongodb),  # type: ignore[type-arg]
) -> CategoryStore:
    """Dependency that provides the category document store."""
    return CategoryStore(db)
