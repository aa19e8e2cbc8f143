"""
Tests for ReviewService
"""
from unittest.mock import AsyncMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

from src.core.errors import InternalError, InvalidInputError, NotFoundError
from src.services.rating_aggregator import RatingAggregator
from src.services.review_service import ReviewService
from tests.helpers import PRODUCT_A_ID, USER_ID

OTHER_USER_ID = "65a1b2c3d4e5f6a7b8c9d0e2"


@pytest.fixture
def aggregator():
    return AsyncMock(spec=RatingAggregator)


@pytest.fixture
def author():
    return {"_id": ObjectId(USER_ID), "name": {"first": "Ada", "last": "Lovelace"}, "email": "ada@example.com"}


@pytest.fixture
def service(review_repository, product_repository, aggregator, user_repository):
    review_repository.create.side_effect = lambda doc, correlation_id=None: {**doc, "_id": ObjectId()}
    return ReviewService(review_repository, product_repository, aggregator, user_repository)


class TestAddReview:
    """Test adding reviews"""

    @pytest.mark.asyncio
    async def test_add_review_recomputes_aggregate(
        self, service, product_repository, user_repository, aggregator, product_a, author
    ):
        product_repository.find_by_id.return_value = product_a
        user_repository.find_authors.return_value = [author]

        saved = await service.add_review({
            "product_id": PRODUCT_A_ID,
            "user_id": USER_ID,
            "rating": 4,
            "comment": "Solid mouse",
        })

        assert saved["product_id"] == ObjectId(PRODUCT_A_ID)
        assert saved["user_id"] == ObjectId(USER_ID)
        assert saved["rating"] == 4
        assert saved["user"]["email"] == "ada@example.com"
        aggregator.recompute.assert_awaited_once_with(PRODUCT_A_ID, seed_rating=4, correlation_id=None)

    @pytest.mark.asyncio
    async def test_fractional_rating_is_stored(self, service, product_repository, review_repository, product_a):
        product_repository.find_by_id.return_value = product_a

        saved = await service.add_review({"product_id": PRODUCT_A_ID, "user_id": USER_ID, "rating": 4.5})

        assert saved["rating"] == 4.5
        assert review_repository.create.await_args.args[0]["rating"] == 4.5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 6, -1, 5.01])
    async def test_rating_out_of_range(self, service, review_repository, rating):
        with pytest.raises(InvalidInputError) as exc_info:
            await service.add_review({"product_id": PRODUCT_A_ID, "user_id": USER_ID, "rating": rating})

        assert exc_info.value.message == "Rating must be between 1 and 5"
        review_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_product_id(self, service):
        with pytest.raises(InvalidInputError) as exc_info:
            await service.add_review({"product_id": "nope", "user_id": USER_ID, "rating": 3})
        assert exc_info.value.message == "Invalid product_id"

    @pytest.mark.asyncio
    async def test_product_not_found(self, service, product_repository, review_repository, aggregator):
        product_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.add_review({"product_id": PRODUCT_A_ID, "user_id": USER_ID, "rating": 3})

        review_repository.create.assert_not_awaited()
        aggregator.recompute.assert_not_awaited()


class TestListReviews:
    @pytest.mark.asyncio
    async def test_list_reviews_attaches_reviewer(self, service, review_repository, user_repository, author):
        review_repository.list_by_product.return_value = [
            {"rating": 5, "user_id": ObjectId(USER_ID)},
            {"rating": 2, "user_id": ObjectId(OTHER_USER_ID)},
        ]
        user_repository.find_authors.return_value = [author]

        reviews = await service.list_reviews(PRODUCT_A_ID)

        assert reviews[0]["user"] == {
            "id": USER_ID,
            "name": {"first": "Ada", "last": "Lovelace"},
            "email": "ada@example.com",
        }
        assert reviews[1]["user"] is None
        assert reviews[1]["rating"] == 2

    @pytest.mark.asyncio
    async def test_list_reviews_invalid_id(self, service):
        with pytest.raises(InvalidInputError):
            await service.list_reviews("bad")

    @pytest.mark.asyncio
    async def test_reviewer_lookup_failure(self, service, review_repository, user_repository):
        review_repository.list_by_product.return_value = [{"rating": 5, "user_id": ObjectId(USER_ID)}]
        user_repository.find_authors.side_effect = PyMongoError("down")

        with pytest.raises(InternalError):
            await service.list_reviews(PRODUCT_A_ID)
