"""
Review repository: reviews live in their own collection and reference
products and users by ObjectId.
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

from src.core.logger import logger
from src.repositories.base_repository import BaseRepository


class ReviewRepository(BaseRepository):
    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection)

    async def find_ratings_by_product(
        self,
        product_id: str,
        correlation_id: Optional[str] = None
    ) -> List[float]:
        """All rating values currently stored for a product."""
        documents = await self.find_many(
            {"product_id": ObjectId(product_id)},
            projection={"rating": 1, "_id": 0},
            correlation_id=correlation_id
        )
        return [doc["rating"] for doc in documents if doc.get("rating") is not None]

    async def list_by_product(
        self,
        product_id: str,
        correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self.find_many(
            {"product_id": ObjectId(product_id)},
            sort=[("created_at", DESCENDING)],
            correlation_id=correlation_id
        )

    async def delete_by_product(
        self,
        product_id: str,
        correlation_id: Optional[str] = None
    ) -> int:
        """Delete every review of a product. Returns the number removed."""
        result = await self.collection.delete_many({"product_id": ObjectId(product_id)})
        logger.info(
            f"Deleted {result.deleted_count} reviews for product {product_id}",
            correlation_id=correlation_id,
            metadata={
                "event": "reviews_deleted_for_product",
                "productId": product_id,
                "deletedCount": result.deleted_count,
            }
        )
        return result.deleted_count
