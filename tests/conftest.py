"""Shared test fixtures"""
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PORT", "8000")
os.environ.setdefault("SERVICE_NAME", "storefront-service")
os.environ.setdefault("MONGO_INITDB_DATABASE", "storefront_test_db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from src.repositories.order_repository import OrderRepository
from src.repositories.product_repository import ProductRepository
from src.repositories.review_repository import ReviewRepository
from src.repositories.user_repository import UserRepository
from tests.helpers import PRODUCT_A_ID, PRODUCT_B_ID, make_cursor


@pytest.fixture
def mock_collection():
    """Mock MongoDB collection for testing"""
    collection = AsyncMock()
    collection.name = "test_collection"
    collection.find = MagicMock(return_value=make_cursor([]))
    return collection


@pytest.fixture
def product_repository():
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def review_repository():
    return AsyncMock(spec=ReviewRepository)


@pytest.fixture
def order_repository():
    return AsyncMock(spec=OrderRepository)


@pytest.fixture
def user_repository():
    repository = AsyncMock(spec=UserRepository)
    repository.find_authors.return_value = []
    return repository


@pytest.fixture
def product_a():
    """Stored product priced 49.99"""
    return {
        "_id": ObjectId(PRODUCT_A_ID),
        "name": "Wireless Mouse",
        "description": "Ergonomic mouse",
        "price": 49.99,
        "category": "Electronics",
        "image_url": "https://example.com/mouse.png",
        "avg_rating": 0.0,
        "review_count": 0,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "version": 0,
    }


@pytest.fixture
def product_b():
    """Stored product priced 89.99"""
    return {
        "_id": ObjectId(PRODUCT_B_ID),
        "name": "Mechanical Keyboard",
        "price": 89.99,
        "category": "Electronics",
        "created_at": datetime(2024, 1, 2, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 1, 2, tzinfo=timezone.utc),
    }
