from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.models.user import ReviewAuthor
from src.validators.review_validators import RatingTypeValidatorMixin, ReviewValidatorMixin


class ReviewCreate(ReviewValidatorMixin, BaseModel):
    product_id: str
    user_id: str
    rating: float
    comment: Optional[str] = None


class ReviewDB(RatingTypeValidatorMixin, BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    product_id: str
    user_id: str
    rating: float
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    user: Optional[ReviewAuthor] = None
