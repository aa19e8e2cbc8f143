import math

from pydantic import field_validator

from src.utils.validators import is_valid_object_id


class RatingTypeValidatorMixin:
    @field_validator('rating', mode='before')
    @classmethod
    def rating_not_bool(cls, v):
        if isinstance(v, bool):
            raise ValueError('Rating must be a number')
        return v


class ReviewValidatorMixin(RatingTypeValidatorMixin):
    @field_validator('product_id', 'user_id')
    @classmethod
    def object_id_valid(cls, v, info):
        if not is_valid_object_id(v):
            raise ValueError(f'Invalid {info.field_name}')
        return v

    @field_validator('rating')
    @classmethod
    def rating_valid(cls, v):
        if not math.isfinite(v) or v < 1 or v > 5:
            raise ValueError('Rating must be between 1 and 5')
        return v

    @field_validator('comment')
    @classmethod
    def comment_valid(cls, v):
        if v is not None and len(v) > 1000:
            raise ValueError('Comment can be up to 1000 characters')
        return v
