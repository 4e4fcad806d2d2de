"""
Database Module
===============

Async MongoDB access for Forge services.

Usage:
    from shared.database import get_mongodb

    @app.get("/example")
    async def example(db: AsyncIOMotorDatabase = Depends(get_mongodb)):
        return await db.users.find_one({"_id": user_id})
"""

from shared.database.mongodb import (
    USERS_COLLECTION,
    MongoDBClient,
    get_mongodb,
)


__all__ = [
    "get_mongodb",
    "MongoDBClient",
    "USERS_COLLECTION",
]
