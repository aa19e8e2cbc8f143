"""Product model and related schemas"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.validators.product_validators import ProductValidatorMixin


# Fields the service maintains itself; stripped from caller payloads.
READ_ONLY_FIELDS = frozenset({
    "_id",
    "id",
    "avg_rating",
    "review_count",
    "created_at",
    "updated_at",
    "version",
})

REQUIRED_FIELDS = ("name", "price", "category")


class ProductCreate(ProductValidatorMixin, BaseModel):
    """
    New product. Core fields are declared; any additional top-level
    attribute is kept as-is (flexible schema).
    """

    model_config = ConfigDict(extra="allow")

    name: str
    description: Optional[str] = None
    price: float
    category: str
    image_url: Optional[str] = None


class ProductUpdate(ProductValidatorMixin, BaseModel):
    """
    Replacement document for a product update. Core fields are validated
    when present; everything else passes through to reconciliation.
    """

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    image_url: Optional[str] = None

    @model_validator(mode="after")
    def required_fields_not_cleared(self):
        """name, price and category may be omitted but not set to null"""
        for field in REQUIRED_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class ProductDB(BaseModel):
    """Stored product as returned by the API."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: Optional[str] = None
    price: float
    category: str
    image_url: Optional[str] = None
    avg_rating: float = 0.0
    review_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: int = Field(0, description="Incremented on every write")
