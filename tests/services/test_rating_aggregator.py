"""Tests for rating aggregate recomputation"""
import pytest

from src.core.errors import NotFoundError
from src.models.field_delta import FieldDelta
from src.services.rating_aggregator import RatingAggregator, RatingStats, compute_rating_stats
from tests.helpers import PRODUCT_A_ID


class TestComputeRatingStats:
    """Test compute_rating_stats function"""

    def test_mean_and_count(self):
        stats = compute_rating_stats([5, 4, 4])

        assert stats == RatingStats(avg_rating=4.33, review_count=3)

    def test_rounds_half_up(self):
        # mean 4.125 rounds up to 4.13
        stats = compute_rating_stats([5, 5, 5, 5, 4, 4, 4, 1])

        assert stats.avg_rating == 4.13
        assert stats.review_count == 8

    def test_single_review(self):
        assert compute_rating_stats([3]) == RatingStats(avg_rating=3.0, review_count=1)

    def test_empty_without_seed_leaves_aggregate_alone(self):
        assert compute_rating_stats([]) is None

    def test_empty_with_seed_uses_fresh_rating(self):
        assert compute_rating_stats([], seed_rating=4) == RatingStats(avg_rating=4.0, review_count=1)

    def test_fractional_ratings(self):
        assert compute_rating_stats([4.5, 3]) == RatingStats(avg_rating=3.75, review_count=2)

    def test_seed_ignored_when_reviews_visible(self):
        stats = compute_rating_stats([2, 4], seed_rating=4)

        assert stats == RatingStats(avg_rating=3.0, review_count=2)


class TestRatingAggregator:
    """Test RatingAggregator.recompute"""

    @pytest.fixture
    def aggregator(self, product_repository, review_repository):
        return RatingAggregator(product_repository, review_repository)

    @pytest.mark.asyncio
    async def test_recompute_writes_only_aggregate_fields(
        self, aggregator, product_repository, review_repository
    ):
        review_repository.find_ratings_by_product.return_value = [5, 4]

        stats = await aggregator.recompute(PRODUCT_A_ID)

        assert stats == RatingStats(avg_rating=4.5, review_count=2)
        product_repository.update_fields.assert_awaited_once_with(
            PRODUCT_A_ID,
            FieldDelta(to_set={"avg_rating": 4.5, "review_count": 2}),
            correlation_id=None,
        )

    @pytest.mark.asyncio
    async def test_recompute_twice_is_idempotent(self, aggregator, product_repository, review_repository):
        review_repository.find_ratings_by_product.return_value = [1, 2, 5]

        first = await aggregator.recompute(PRODUCT_A_ID)
        second = await aggregator.recompute(PRODUCT_A_ID)

        assert first == second
        calls = product_repository.update_fields.await_args_list
        assert calls[0] == calls[1]

    @pytest.mark.asyncio
    async def test_first_review_seeds_aggregate(self, aggregator, product_repository, review_repository):
        review_repository.find_ratings_by_product.return_value = []

        stats = await aggregator.recompute(PRODUCT_A_ID, seed_rating=5)

        assert stats == RatingStats(avg_rating=5.0, review_count=1)
        product_repository.update_fields.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_no_reviews_and_no_seed_skips_write(self, aggregator, product_repository, review_repository):
        review_repository.find_ratings_by_product.return_value = []

        assert await aggregator.recompute(PRODUCT_A_ID) is None
        product_repository.update_fields.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_product_deleted_before_write_back(self, aggregator, product_repository, review_repository):
        review_repository.find_ratings_by_product.return_value = [4]
        product_repository.update_fields.side_effect = NotFoundError("Product not found")

        with pytest.raises(NotFoundError):
            await aggregator.recompute(PRODUCT_A_ID)
