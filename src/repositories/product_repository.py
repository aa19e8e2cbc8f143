"""
Product repository for domain-specific data access operations.

Extends BaseRepository with:
- Batch lookup by IDs
- Field-level set/unset updates returning the updated document
- Newest-first listing
"""

from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument

from src.core.errors import NotFoundError
from src.core.logger import logger
from src.models.field_delta import FieldDelta
from src.repositories.base_repository import BaseRepository


class ProductRepository(BaseRepository):
    """Repository for the products collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection)

    async def find_by_ids(
        self,
        product_ids: Iterable[str],
        correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Fetch several products in one read.

        Missing IDs are omitted from the result rather than reported.
        """
        object_ids = list({ObjectId(pid) for pid in product_ids})
        return await self.find_many(
            {"_id": {"$in": object_ids}},
            correlation_id=correlation_id
        )

    async def list_newest_first(self, correlation_id: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self.find_many(
            {},
            sort=[("created_at", DESCENDING)],
            correlation_id=correlation_id
        )

    async def update_fields(
        self,
        product_id: str,
        delta: FieldDelta,
        correlation_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Apply a field delta to one product in a single write and bump its
        ``version``.

        Returns:
            The updated product document

        Raises:
            NotFoundError: If no product has this ID
        """
        update = delta.to_update_document()
        update["$inc"] = {"version": 1}

        try:
            document = await self.collection.find_one_and_update(
                {"_id": ObjectId(product_id)},
                update,
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(
                f"Error updating product {product_id}",
                correlation_id=correlation_id,
                error=e,
                metadata={"collection": self.collection_name, "productId": product_id}
            )
            raise

        if document is None:
            logger.warning(
                f"Product {product_id} not found for update",
                correlation_id=correlation_id,
                metadata={"event": "product_update_not_found", "productId": product_id}
            )
            raise NotFoundError("Product not found", details={"product_id": product_id})

        logger.debug(
            f"Updated product {product_id}",
            correlation_id=correlation_id,
            metadata={
                "collection": self.collection_name,
                "productId": product_id,
                "setFields": sorted(update.get("$set", {})),
                "unsetFields": sorted(update.get("$unset", {})),
            }
        )

        return document
