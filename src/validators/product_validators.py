import math

from pydantic import field_validator


class ProductValidatorMixin:
    @field_validator("name", check_fields=False)
    @classmethod
    def name_valid(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Product name cannot be empty")
        if v is not None and len(v) > 200:
            raise ValueError("Product name must be between 1 and 200 characters")
        return v

    @field_validator("price", check_fields=False)
    @classmethod
    def price_valid(cls, v):
        if v is not None and (not math.isfinite(v) or v < 0):
            raise ValueError("Price must be a non-negative number")
        return v

    @field_validator("category", check_fields=False)
    @classmethod
    def category_valid(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Category cannot be empty")
        if v is not None and len(v) > 100:
            raise ValueError("Category name must be up to 100 characters")
        return v

    @field_validator("description", check_fields=False)
    @classmethod
    def description_valid(cls, v):
        if v is not None and len(v) > 5000:
            raise ValueError("Description can be up to 5000 characters")
        return v
