"""
Repository layer for data access.

This module contains repository classes that handle database operations
using the Repository pattern to abstract data access logic.
"""

from src.repositories.base_repository import BaseRepository
from src.repositories.order_repository import OrderRepository
from src.repositories.product_repository import ProductRepository
from src.repositories.review_repository import ReviewRepository
from src.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "OrderRepository",
    "ProductRepository",
    "ReviewRepository",
    "UserRepository",
]
