"""
User repository. Password hashes stay in the collection: every read here
projects them out.
"""

from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

from src.repositories.base_repository import BaseRepository

PUBLIC_PROJECTION = {"password": 0}
AUTHOR_PROJECTION = {"name": 1, "email": 1}


class UserRepository(BaseRepository):
    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection)

    async def find_by_email(
        self,
        email: str,
        correlation_id: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"email": email.lower()}, PUBLIC_PROJECTION)

    async def list_users(self, correlation_id: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self.find_many(
            {},
            sort=[("created_at", DESCENDING)],
            projection=PUBLIC_PROJECTION,
            correlation_id=correlation_id
        )

    async def find_authors(
        self,
        user_ids: Iterable[Any],
        correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Name and email of each listed user that exists."""
        object_ids = list({ObjectId(uid) for uid in user_ids})
        if not object_ids:
            return []
        return await self.find_many(
            {"_id": {"$in": object_ids}},
            projection=AUTHOR_PROJECTION,
            correlation_id=correlation_id
        )
