"""
Database index management for MongoDB.

Indexes are created at application startup.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from src.config import get_config
from src.core.logger import logger


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes behind the service's queries and the unique user email.

    Args:
        db: MongoDB database instance
    """
    config = get_config()
    products = db[config.PRODUCTS_COLLECTION]
    reviews = db[config.REVIEWS_COLLECTION]
    orders = db[config.ORDERS_COLLECTION]
    users = db[config.USERS_COLLECTION]

    try:
        # Product listing (newest first)
        await products.create_index([("created_at", DESCENDING)], name="idx_created")
        await products.create_index([("category", ASCENDING)], name="idx_category")

        # Rating recompute and per-product review listing
        await reviews.create_index(
            [("product_id", ASCENDING), ("created_at", DESCENDING)],
            name="idx_product_created"
        )

        # Order history per user
        await orders.create_index(
            [("user_id", ASCENDING), ("created_at", DESCENDING)],
            name="idx_user_created"
        )

        # Registration keeps emails unique (stored lowercase)
        await users.create_index([("email", ASCENDING)], unique=True, name="idx_email_unique")

        logger.info("All database indexes created successfully", metadata={"event": "indexes_created"})

    except Exception as e:
        logger.error("Failed to create database indexes", error=e)
        raise
