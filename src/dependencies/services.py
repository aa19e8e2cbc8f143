"""
Service layer dependency injection for FastAPI.

Provides repository and service instances with their dependencies injected.
"""

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection

from src.db.mongodb import (
    get_orders_collection,
    get_products_collection,
    get_reviews_collection,
    get_users_collection,
)
from src.repositories.order_repository import OrderRepository
from src.repositories.product_repository import ProductRepository
from src.repositories.review_repository import ReviewRepository
from src.repositories.user_repository import UserRepository
from src.services.order_service import OrderService
from src.services.order_snapshot_builder import OrderSnapshotBuilder
from src.services.product_service import ProductService
from src.services.rating_aggregator import RatingAggregator
from src.services.review_service import ReviewService
from src.services.user_service import UserService


async def get_product_repository(
    collection: AsyncIOMotorCollection = Depends(get_products_collection)
) -> ProductRepository:
    return ProductRepository(collection)


async def get_review_repository(
    collection: AsyncIOMotorCollection = Depends(get_reviews_collection)
) -> ReviewRepository:
    return ReviewRepository(collection)


async def get_order_repository(
    collection: AsyncIOMotorCollection = Depends(get_orders_collection)
) -> OrderRepository:
    return OrderRepository(collection)


async def get_user_repository(
    collection: AsyncIOMotorCollection = Depends(get_users_collection)
) -> UserRepository:
    return UserRepository(collection)


async def get_product_service(
    repo: ProductRepository = Depends(get_product_repository),
    review_repo: ReviewRepository = Depends(get_review_repository),
) -> ProductService:
    """
    FastAPI dependency to get ProductService instance.

    Usage:
        @router.get("/products")
        async def list_products(
            service: ProductService = Depends(get_product_service)
        ):
            ...
    """
    return ProductService(repo, review_repo)


async def get_review_service(
    repo: ReviewRepository = Depends(get_review_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> ReviewService:
    aggregator = RatingAggregator(product_repo, repo)
    return ReviewService(repo, product_repo, aggregator, user_repo)


async def get_order_service(
    repo: OrderRepository = Depends(get_order_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
) -> OrderService:
    return OrderService(repo, OrderSnapshotBuilder(product_repo, repo))


async def get_user_service(repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repo)
