"""
Review service: stores reviews in their own collection and keeps the
product's rating aggregate in step.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from src.core.errors import InternalError, InvalidInputError, NotFoundError
from src.core.logger import logger
from src.models.review import ReviewCreate
from src.repositories.product_repository import ProductRepository
from src.repositories.review_repository import ReviewRepository
from src.repositories.user_repository import UserRepository
from src.services.rating_aggregator import RatingAggregator
from src.utils.validators import is_valid_object_id


class ReviewService:
    def __init__(
        self,
        repository: ReviewRepository,
        product_repository: ProductRepository,
        aggregator: RatingAggregator,
        user_repository: UserRepository,
    ):
        self.repository = repository
        self.product_repository = product_repository
        self.aggregator = aggregator
        self.user_repository = user_repository

    async def _attach_authors(self, reviews: List[dict], correlation_id: Optional[str] = None) -> List[dict]:
        """Add each reviewer's name and email as ``user``; None when the user is gone."""
        user_ids = [review["user_id"] for review in reviews if review.get("user_id")]
        try:
            authors = await self.user_repository.find_authors(user_ids, correlation_id=correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while fetching reviewers") from e

        by_id = {
            author["_id"]: {"id": str(author["_id"]), "name": author.get("name"), "email": author.get("email")}
            for author in authors
        }
        return [{**review, "user": by_id.get(review.get("user_id"))} for review in reviews]

    async def list_reviews(self, product_id: str, correlation_id: Optional[str] = None) -> List[dict]:
        """Reviews for a product, newest first, with reviewer name and email."""
        if not is_valid_object_id(product_id):
            raise InvalidInputError("Invalid product ID", details={"product_id": str(product_id)})
        try:
            reviews = await self.repository.list_by_product(product_id, correlation_id=correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while listing reviews") from e
        return await self._attach_authors(reviews, correlation_id)

    async def add_review(self, payload: Dict[str, Any], correlation_id: Optional[str] = None) -> dict:
        """
        Store a review, then recompute the product's rating aggregate.

        The review insert and the recompute are two separate writes. If the
        product is deleted between them the review stays stored and
        NotFoundError is raised from the recompute.

        Raises:
            InvalidInputError: Malformed IDs or rating outside 1..5
            NotFoundError: If the product does not exist
        """
        try:
            review = ReviewCreate.model_validate(payload)
        except ValidationError as e:
            first = e.errors()[0]
            raise InvalidInputError(
                str(first["msg"]).removeprefix("Value error, "),
                details={"field": ".".join(str(p) for p in first["loc"])},
            )

        try:
            product = await self.product_repository.find_by_id(review.product_id, correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while fetching product") from e
        if not product:
            raise NotFoundError("Product not found", details={"product_id": review.product_id})

        document = {
            "product_id": ObjectId(review.product_id),
            "user_id": ObjectId(review.user_id),
            "rating": review.rating,
            "comment": review.comment,
            "created_at": datetime.now(timezone.utc),
        }

        try:
            saved = await self.repository.create(document, correlation_id=correlation_id)
            await self.aggregator.recompute(
                review.product_id,
                seed_rating=review.rating,
                correlation_id=correlation_id,
            )
        except PyMongoError as e:
            raise InternalError("Database error while saving review") from e

        logger.info(
            f"Added review for product {review.product_id} by user {review.user_id}",
            correlation_id=correlation_id,
            metadata={
                "event": "review_added",
                "productId": review.product_id,
                "userId": review.user_id,
                "rating": review.rating,
            }
        )
        populated = await self._attach_authors([saved], correlation_id)
        return populated[0]
