# Configuration Factory for Storefront Service
import os
from typing import Type


class Config:
    """Base configuration class"""

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    DEBUG = False

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")  # nosec B104
    PORT = int(os.getenv("PORT", 8000))

    # Database Configuration - MongoDB
    _mongo_host = os.getenv("MONGODB_HOST", "localhost")
    _mongo_port = os.getenv("MONGODB_PORT", "27017")
    _mongo_username = os.getenv("MONGO_INITDB_ROOT_USERNAME")
    _mongo_password = os.getenv("MONGO_INITDB_ROOT_PASSWORD")
    _mongo_database = os.getenv("MONGO_INITDB_DATABASE", "storefront_db")
    _mongo_auth_source = os.getenv("MONGODB_AUTH_SOURCE", "admin")

    if _mongo_username and _mongo_password:
        DATABASE_URL = f"mongodb://{_mongo_username}:{_mongo_password}@{_mongo_host}:{_mongo_port}/{_mongo_database}?authSource={_mongo_auth_source}"
    else:
        DATABASE_URL = f"mongodb://{_mongo_host}:{_mongo_port}/{_mongo_database}"

    DATABASE_NAME = _mongo_database
    MONGODB_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", 5000))

    # Collections
    PRODUCTS_COLLECTION = "products"
    REVIEWS_COLLECTION = "reviews"
    ORDERS_COLLECTION = "orders"
    USERS_COLLECTION = "users"

    # CORS
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Product defaults
    DEFAULT_PRODUCT_IMAGE_URL = os.getenv(
        "DEFAULT_PRODUCT_IMAGE_URL",
        "https://placehold.co/600x400/27272a/a5a5a5?text=Product",
    )


def get_config() -> Type[Config]:
    """
    Get configuration class based on environment
    """
    env = os.getenv("ENVIRONMENT", "development").lower()

    if env == "test":
        from .testing import TestingConfig

        return TestingConfig

    from .development import DevelopmentConfig

    return DevelopmentConfig
