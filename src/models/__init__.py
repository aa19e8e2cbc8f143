"""
Models package.

Exports the Pydantic models for products, reviews, orders and users.
"""

from .field_delta import FieldDelta
from .order import (
    ORDER_STATUS_PENDING,
    OrderCreateRequest,
    OrderDB,
    OrderItemRequest,
    OrderLineItem,
)
from .product import READ_ONLY_FIELDS, ProductCreate, ProductDB, ProductUpdate
from .review import ReviewCreate, ReviewDB
from .user import ReviewAuthor, UserAddress, UserCreate, UserDB, UserName

__all__ = [
    "FieldDelta",
    "ORDER_STATUS_PENDING",
    "OrderCreateRequest",
    "OrderDB",
    "OrderItemRequest",
    "OrderLineItem",
    "READ_ONLY_FIELDS",
    "ProductCreate",
    "ProductDB",
    "ProductUpdate",
    "ReviewCreate",
    "ReviewDB",
    "ReviewAuthor",
    "UserAddress",
    "UserCreate",
    "UserDB",
    "UserName",
]
