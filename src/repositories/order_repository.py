from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

from src.repositories.base_repository import BaseRepository


class OrderRepository(BaseRepository):
    """Orders are insert-only here; status transitions happen elsewhere."""

    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection)

    async def list_by_user(
        self,
        user_id: str,
        correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self.find_many(
            {"user_id": ObjectId(user_id)},
            sort=[("created_at", DESCENDING)],
            correlation_id=correlation_id
        )
