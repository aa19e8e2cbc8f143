"""
FastAPI dependency injection functions.
"""

from src.dependencies.services import (
    get_order_repository,
    get_order_service,
    get_product_repository,
    get_product_service,
    get_review_repository,
    get_review_service,
    get_user_repository,
    get_user_service,
)
from src.utils.correlation_id import get_correlation_id

__all__ = [
    "get_order_repository",
    "get_order_service",
    "get_product_repository",
    "get_product_service",
    "get_review_repository",
    "get_review_service",
    "get_user_repository",
    "get_user_service",
    "get_correlation_id",
]
