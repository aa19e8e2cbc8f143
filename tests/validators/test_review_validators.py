"""Tests for review validators"""
import pytest
from pydantic import ValidationError

from src.models.review import ReviewCreate, ReviewDB
from tests.helpers import PRODUCT_A_ID, USER_ID


class TestReviewValidators:
    """Test review validation logic"""

    def test_valid_review_creation(self):
        """Test creating a valid review"""
        review = ReviewCreate(product_id=PRODUCT_A_ID, user_id=USER_ID, rating=5, comment="Great product!")
        assert review.rating == 5
        assert review.comment == "Great product!"

    def test_comment_optional(self):
        review = ReviewCreate(product_id=PRODUCT_A_ID, user_id=USER_ID, rating=1)
        assert review.comment is None

    def test_fractional_rating(self):
        review = ReviewCreate(product_id=PRODUCT_A_ID, user_id=USER_ID, rating=4.5)
        assert review.rating == 4.5

    @pytest.mark.parametrize("rating", [0, 6, -3, 5.01, 0.99, float("nan")])
    def test_rating_validation(self, rating):
        """Test rating validation (must be between 1 and 5)"""
        with pytest.raises(ValidationError) as exc_info:
            ReviewCreate(product_id=PRODUCT_A_ID, user_id=USER_ID, rating=rating)
        assert "Rating must be between 1 and 5" in str(exc_info.value)

    def test_user_id_must_be_object_id(self):
        with pytest.raises(ValidationError) as exc_info:
            ReviewCreate(product_id=PRODUCT_A_ID, user_id="user123", rating=5)
        assert "Invalid user_id" in str(exc_info.value)

    def test_product_id_must_be_object_id(self):
        with pytest.raises(ValidationError) as exc_info:
            ReviewCreate(product_id="abc", user_id=USER_ID, rating=5)
        assert "Invalid product_id" in str(exc_info.value)

    def test_comment_length(self):
        with pytest.raises(ValidationError) as exc_info:
            ReviewCreate(product_id=PRODUCT_A_ID, user_id=USER_ID, rating=5, comment="a" * 1001)
        assert "Comment can be up to 1000 characters" in str(exc_info.value)

    @pytest.mark.parametrize("rating", [True, False])
    def test_boolean_rating_rejected(self, rating):
        with pytest.raises(ValidationError) as exc_info:
            ReviewCreate(product_id=PRODUCT_A_ID, user_id=USER_ID, rating=rating)
        assert "Rating must be a number" in str(exc_info.value)

    def test_stored_review_rejects_boolean_rating(self):
        with pytest.raises(ValidationError):
            ReviewDB(id=USER_ID, product_id=PRODUCT_A_ID, user_id=USER_ID, rating=True)
