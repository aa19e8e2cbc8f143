"""
Product service layer - business logic for product operations.

Handles validation and orchestration between repositories. Product updates
go through schema reconciliation so callers can add and drop free-form
attributes without migrations.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from src.config import get_config
from src.core.errors import InternalError, InvalidInputError, NotFoundError
from src.core.logger import logger
from src.models.field_delta import FieldDelta
from src.models.product import READ_ONLY_FIELDS, ProductCreate, ProductUpdate
from src.repositories.product_repository import ProductRepository
from src.repositories.review_repository import ReviewRepository
from src.services.schema_reconciler import reconcile_fields, validate_field_name
from src.utils.validators import is_valid_object_id


def _require_product_id(product_id: str) -> None:
    if not is_valid_object_id(product_id):
        raise InvalidInputError("Invalid product ID", details={"product_id": str(product_id)})


def _validation_details(error: ValidationError) -> Dict[str, Any]:
    return {
        "errors": [
            {"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]}
            for e in error.errors()
        ]
    }


class ProductService:
    """
    Service class for product business logic.

    Separates business logic from route handlers and data access.
    """

    def __init__(self, repository: ProductRepository, review_repository: ReviewRepository):
        self.repository = repository
        self.review_repository = review_repository

    async def list_products(self, correlation_id: Optional[str] = None) -> List[dict]:
        """All products, newest first."""
        try:
            return await self.repository.list_newest_first(correlation_id=correlation_id)
        except PyMongoError as e:
            logger.error("MongoDB error listing products", correlation_id=correlation_id, error=e)
            raise InternalError("Database error while listing products") from e

    async def get_product(self, product_id: str, correlation_id: Optional[str] = None) -> dict:
        """
        Get a product by ID.

        Raises:
            InvalidInputError: If the ID is malformed
            NotFoundError: If no product has this ID
        """
        _require_product_id(product_id)

        try:
            product = await self.repository.find_by_id(product_id, correlation_id)
        except PyMongoError as e:
            logger.error(f"MongoDB error fetching product {product_id}", correlation_id=correlation_id, error=e)
            raise InternalError("Database error while fetching product") from e

        if not product:
            raise NotFoundError("Product not found", details={"product_id": product_id})
        return product

    async def create_product(self, payload: Dict[str, Any], correlation_id: Optional[str] = None) -> dict:
        """
        Create a product. ``name``, ``price`` and ``category`` are required;
        any extra top-level attributes are stored as sent.

        Raises:
            InvalidInputError: If the payload fails validation
        """
        payload = {k: v for k, v in payload.items() if k not in READ_ONLY_FIELDS}
        for key in payload:
            validate_field_name(key)

        try:
            product = ProductCreate.model_validate(payload)
        except ValidationError as e:
            raise InvalidInputError("Product validation failed", details=_validation_details(e))

        now = datetime.now(timezone.utc)
        document = product.model_dump()
        if not document.get("image_url"):
            document["image_url"] = get_config().DEFAULT_PRODUCT_IMAGE_URL
        document.update({
            "avg_rating": 0.0,
            "review_count": 0,
            "created_at": now,
            "updated_at": now,
            "version": 0,
        })

        try:
            saved = await self.repository.create(document, correlation_id=correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while creating product") from e

        logger.info(
            f"Created product {saved['_id']}",
            correlation_id=correlation_id,
            metadata={"event": "product_created", "productId": str(saved["_id"]), "name": saved["name"]}
        )
        return saved

    async def update_product(
        self,
        product_id: str,
        payload: Dict[str, Any],
        correlation_id: Optional[str] = None
    ) -> dict:
        """
        Replace a product's free-form field set with ``payload``.

        Supplied fields are set; stored non-protected fields missing from the
        payload are removed. Service-maintained fields in the payload are
        ignored and ``updated_at`` is refreshed.

        Raises:
            InvalidInputError: If the ID or a core field is invalid
            NotFoundError: If the product does not exist at read or write time
        """
        _require_product_id(product_id)

        supplied = {k: v for k, v in payload.items() if k not in READ_ONLY_FIELDS}
        try:
            validated = ProductUpdate.model_validate(supplied)
        except ValidationError as e:
            raise InvalidInputError("Product validation failed", details=_validation_details(e))
        for key in ProductUpdate.model_fields:
            if key in supplied:
                supplied[key] = getattr(validated, key)

        stored = await self.get_product(product_id, correlation_id)
        delta = reconcile_fields(stored, supplied)

        to_set = dict(delta.to_set)
        to_set["updated_at"] = datetime.now(timezone.utc)
        write = FieldDelta(to_set=to_set, to_unset=delta.to_unset)

        try:
            updated = await self.repository.update_fields(
                product_id,
                write,
                correlation_id=correlation_id,
            )
        except PyMongoError as e:
            raise InternalError("Database error while updating product") from e

        logger.info(
            f"Updated product {product_id}",
            correlation_id=correlation_id,
            metadata={
                "event": "product_updated",
                "productId": product_id,
                "setFields": sorted(delta.to_set),
                "unsetFields": sorted(delta.to_unset),
            }
        )
        return updated

    async def delete_product(self, product_id: str, correlation_id: Optional[str] = None) -> None:
        """
        Delete a product and all of its reviews.

        Reviews are removed first; the two deletes are not atomic.

        Raises:
            NotFoundError: If no product has this ID
        """
        _require_product_id(product_id)

        try:
            await self.review_repository.delete_by_product(product_id, correlation_id=correlation_id)
            deleted = await self.repository.delete(product_id, correlation_id=correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while deleting product") from e

        if not deleted:
            raise NotFoundError("Product not found", details={"product_id": product_id})
