"""
MongoDB Client
==============

Async MongoDB client using Motor for account and category documents.

Version: 0.1.0
"""

import time
from collections.abc import Iterable
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from shared.config import settings
from shared.logging import get_logger


logger = get_logger(__name__)

USERS_COLLECTION = "users"


class MongoDBClient:
    """
    Async MongoDB client wrapper.

    Manages client lifecycle and provides database access.
    """

    _client: AsyncIOMotorClient | None = None  # type: ignore[type-arg]

    @classmethod
    def get_client(cls) -> AsyncIOMotorClient:  # type: ignore[type-arg]
        """Get or create the async client."""
        if cls._client is None:
            cls._client = AsyncIOMotorClient(
                settings.mongodb.uri,
                maxPoolSize=50,
                minPoolSize=5,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=5000,
                tz_aware=True,
            )
            logger.info(
                "mongodb_client_created",
                host=settings.mongodb.host,
                database=settings.mongodb.db,
            )
        return cls._client

    @classmethod
    def get_database(cls, name: str | None = None) -> AsyncIOMotorDatabase:  # type: ignore[type-arg]
        """
        Get a database instance.

        Args:
            name: Database name (default from settings)
        """
        client = cls.get_client()
        return client[name or settings.mongodb.db]

    @classmethod
    async def close(cls) -> None:
        """Close the client and release all connections."""
        if cls._client is not None:
            cls._client.close()
            cls._client = None
            logger.info("mongodb_client_closed")

    @classmethod
    async def health_check(cls) -> dict[str, Any]:
        """
        Check database health.

        Returns:
            dict with status and latency
        """
        try:
            start = time.perf_counter()
            result = await cls.get_client().admin.command("ping")
            latency_ms = (time.perf_counter() - start) * 1000

            return {
                "status": "healthy" if result.get("ok") == 1 else "unhealthy",
                "latency_ms": round(latency_ms, 2),
            }
        except Exception as e:
            logger.error("mongodb_health_check_failed", error=str(e))
            return {
                "status": "unhealthy",
                "error": str(e),
            }

    @classmethod
    async def create_indexes(cls, category_collections: Iterable[str]) -> None:
        """
        Create indexes for the account collection and every category collection.

        Args:
            category_collections: Names of the per-category submission collections
        """
        db = cls.get_database()

        await db[USERS_COLLECTION].create_index("email", unique=True)

        for name in category_collections:
            await db[name].create_index(
                [("user_id", ASCENDING), ("created_at", DESCENDING), ("sequence", DESCENDING)]
            )

        logger.info("mongodb_indexes_created")


async def get_mongodb() -> AsyncIOMotorDatabase:  # type: ignore[type-arg]
    """
    Dependency that provides the MongoDB database.

    Usage:
        @app.get("/profile")
        async def profile(db: AsyncIOMotorDatabase = Depends(get_mongodb)):
            return await db.users.find_one({"_id": user_id})
    """
    return MongoDBClient.get_database()
