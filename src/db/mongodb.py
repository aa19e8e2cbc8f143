from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from src.config import get_config
from src.core.logger import logger

_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    """Return the shared Motor client, creating it on first use."""
    global _client
    if _client is None:
        config = get_config()
        logger.debug(
            "Creating MongoDB client",
            metadata={"event": "mongodb_client_create", "db_name": config.DATABASE_NAME}
        )
        _client = AsyncIOMotorClient(
            config.DATABASE_URL,
            serverSelectionTimeoutMS=config.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            tz_aware=True,
        )
    return _client


async def get_db() -> AsyncIOMotorDatabase:
    return get_client()[get_config().DATABASE_NAME]


async def get_products_collection() -> AsyncIOMotorCollection:
    db = await get_db()
    return db[get_config().PRODUCTS_COLLECTION]


async def get_reviews_collection() -> AsyncIOMotorCollection:
    db = await get_db()
    return db[get_config().REVIEWS_COLLECTION]


async def get_orders_collection() -> AsyncIOMotorCollection:
    db = await get_db()
    return db[get_config().ORDERS_COLLECTION]


async def get_users_collection() -> AsyncIOMotorCollection:
    db = await get_db()
    return db[get_config().USERS_COLLECTION]


async def ping_db() -> bool:
    """True when the server answers a ping."""
    try:
        await get_client().admin.command("ping")
        return True
    except Exception as e:
        logger.warning(
            f"MongoDB ping failed: {e}",
            metadata={"event": "mongodb_ping_failed", "error": str(e)}
        )
        return False


def close_db() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed", metadata={"event": "mongodb_client_closed"})
