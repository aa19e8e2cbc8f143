"""
Base repository pattern for MongoDB data access.

Provides generic CRUD operations for MongoDB collections with async/await support.
All domain-specific repositories should inherit from BaseRepository.
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from src.core.logger import logger


class BaseRepository:
    """
    Base repository providing generic CRUD operations for MongoDB collections.

    Usage:
        class OrderRepository(BaseRepository):
            def __init__(self, collection: AsyncIOMotorCollection):
                super().__init__(collection)
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection
        self.collection_name = collection.name

    async def create(
        self,
        document: Dict[str, Any],
        correlation_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Insert a new document.

        Args:
            document: Document data to insert
            correlation_id: Optional correlation ID for logging

        Returns:
            Dict: The inserted document including its assigned ``_id``
        """
        try:
            document = dict(document)
            result = await self.collection.insert_one(document)
            document["_id"] = result.inserted_id

            logger.info(
                f"Document created in {self.collection_name}",
                correlation_id=correlation_id,
                metadata={
                    "collection": self.collection_name,
                    "documentId": str(result.inserted_id)
                }
            )

            return document

        except Exception as e:
            logger.error(
                f"Failed to create document in {self.collection_name}",
                correlation_id=correlation_id,
                error=e,
                metadata={"collection": self.collection_name}
            )
            raise

    async def find_by_id(
        self,
        document_id: str,
        correlation_id: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Find a document by ID.

        Returns:
            Optional[Dict]: Document if found, None otherwise
        """
        try:
            document = await self.collection.find_one({"_id": ObjectId(document_id)})

            logger.debug(
                f"Document {'found' if document else 'not found'} in {self.collection_name}",
                correlation_id=correlation_id,
                metadata={
                    "collection": self.collection_name,
                    "documentId": str(document_id)
                }
            )

            return document

        except Exception as e:
            logger.error(
                f"Error finding document in {self.collection_name}",
                correlation_id=correlation_id,
                error=e,
                metadata={
                    "collection": self.collection_name,
                    "documentId": str(document_id)
                }
            )
            raise

    async def find_many(
        self,
        query: Dict[str, Any],
        skip: int = 0,
        limit: Optional[int] = None,
        sort: Optional[List[tuple]] = None,
        projection: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents matching query.

        Args:
            query: MongoDB query filter
            skip: Number of documents to skip
            limit: Maximum number of documents to return
            sort: Sort specification
            projection: Fields to include or exclude
            correlation_id: Optional correlation ID for logging

        Returns:
            List[Dict]: List of matching documents
        """
        try:
            cursor = self.collection.find(query, projection).skip(skip)

            if limit:
                cursor = cursor.limit(limit)

            if sort:
                cursor = cursor.sort(sort)

            documents = await cursor.to_list(length=limit)

            logger.debug(
                f"Found {len(documents)} documents in {self.collection_name}",
                correlation_id=correlation_id,
                metadata={
                    "collection": self.collection_name,
                    "count": len(documents)
                }
            )

            return documents

        except Exception as e:
            logger.error(
                f"Error finding documents in {self.collection_name}",
                correlation_id=correlation_id,
                error=e,
                metadata={"collection": self.collection_name}
            )
            raise

    async def delete(self, document_id: str, correlation_id: Optional[str] = None) -> bool:
        """
        Delete a document by ID.

        Returns:
            bool: True if deleted, False otherwise
        """
        try:
            result = await self.collection.delete_one({"_id": ObjectId(document_id)})

            success = result.deleted_count > 0

            if success:
                logger.info(
                    f"Document deleted from {self.collection_name}",
                    correlation_id=correlation_id,
                    metadata={
                        "collection": self.collection_name,
                        "documentId": str(document_id)
                    }
                )
            else:
                logger.warning(
                    f"No document deleted from {self.collection_name}",
                    correlation_id=correlation_id,
                    metadata={
                        "collection": self.collection_name,
                        "documentId": str(document_id)
                    }
                )

            return success

        except Exception as e:
            logger.error(
                f"Error deleting document from {self.collection_name}",
                correlation_id=correlation_id,
                error=e,
                metadata={
                    "collection": self.collection_name,
                    "documentId": str(document_id)
                }
            )
            raise
