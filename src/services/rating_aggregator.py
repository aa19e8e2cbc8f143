"""
Rating aggregate maintenance.

A product's ``avg_rating`` and ``review_count`` are denormalized copies of
the reviews collection. They are recomputed from the full review set after
each review is persisted (write first, then recompute and overwrite).

Two submissions racing on the same product can interleave their
read-ratings/write-aggregate steps, in which case the last write wins with
whatever rating set it read. No serialization is enforced.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from src.core.logger import logger
from src.models.field_delta import FieldDelta
from src.repositories.product_repository import ProductRepository
from src.repositories.review_repository import ReviewRepository
from src.utils.rounding import round_half_up, to_decimal


class RatingStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    avg_rating: float
    review_count: int


def compute_rating_stats(
    ratings: Iterable[float],
    seed_rating: Optional[float] = None,
) -> Optional[RatingStats]:
    """
    Compute the rating aggregate for a complete set of ratings.

    When no rating is visible yet, the aggregate is seeded from
    ``seed_rating`` (the review just written) if given; otherwise None is
    returned and the stored aggregate is left as it is.
    """
    ratings = list(ratings)
    if not ratings:
        if seed_rating is None:
            return None
        return RatingStats(avg_rating=round_half_up(seed_rating), review_count=1)

    total = sum(to_decimal(r) for r in ratings)
    return RatingStats(
        avg_rating=round_half_up(total / len(ratings)),
        review_count=len(ratings),
    )


class RatingAggregator:
    """Recomputes and stores a product's rating aggregate."""

    def __init__(self, product_repository: ProductRepository, review_repository: ReviewRepository):
        self.product_repository = product_repository
        self.review_repository = review_repository

    async def recompute(
        self,
        product_id: str,
        seed_rating: Optional[float] = None,
        correlation_id: Optional[str] = None,
    ) -> Optional[RatingStats]:
        """
        Recompute ``avg_rating``/``review_count`` for a product and write them back.

        The caller is responsible for checking the product exists beforehand.

        Args:
            product_id: Product whose aggregate is recomputed
            seed_rating: Rating of a review just inserted, used when the
                review set reads back empty
            correlation_id: Correlation ID for logging

        Returns:
            The stored stats, or None when there was nothing to write

        Raises:
            NotFoundError: If the product disappeared before write-back
        """
        ratings = await self.review_repository.find_ratings_by_product(
            product_id, correlation_id=correlation_id
        )
        stats = compute_rating_stats(ratings, seed_rating=seed_rating)

        if stats is None:
            logger.debug(
                f"No reviews for product {product_id}, aggregate left unchanged",
                correlation_id=correlation_id,
                metadata={"event": "rating_aggregate_skipped", "productId": product_id},
            )
            return None

        await self.product_repository.update_fields(
            product_id,
            FieldDelta(to_set=stats.model_dump()),
            correlation_id=correlation_id,
        )

        logger.info(
            f"Recomputed rating aggregate for product {product_id}",
            correlation_id=correlation_id,
            metadata={
                "event": "rating_aggregate_updated",
                "productId": product_id,
                "avgRating": stats.avg_rating,
                "reviewCount": stats.review_count,
                "seeded": not ratings,
            },
        )
        return stats
