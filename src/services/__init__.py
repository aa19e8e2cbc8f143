"""Service layer exports."""

from src.services.order_service import OrderService
from src.services.order_snapshot_builder import OrderSnapshotBuilder
from src.services.product_service import ProductService
from src.services.rating_aggregator import RatingAggregator
from src.services.review_service import ReviewService
from src.services.user_service import UserService

__all__ = [
    "OrderService",
    "OrderSnapshotBuilder",
    "ProductService",
    "RatingAggregator",
    "ReviewService",
    "UserService",
]
