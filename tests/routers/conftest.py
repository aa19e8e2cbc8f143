"""Fixtures for HTTP-level tests with the service layer mocked out"""
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.dependencies.services import (
    get_order_service,
    get_product_service,
    get_review_service,
    get_user_service,
)
from src.main import app
from src.services.order_service import OrderService
from src.services.product_service import ProductService
from src.services.review_service import ReviewService
from src.services.user_service import UserService


@pytest.fixture
def product_service():
    return AsyncMock(spec=ProductService)


@pytest.fixture
def review_service():
    return AsyncMock(spec=ReviewService)


@pytest.fixture
def order_service():
    return AsyncMock(spec=OrderService)


@pytest.fixture
def user_service():
    return AsyncMock(spec=UserService)


@pytest.fixture
def client(product_service, review_service, order_service, user_service):
    app.dependency_overrides[get_product_service] = lambda: product_service
    app.dependency_overrides[get_review_service] = lambda: review_service
    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    yield TestClient(app)
    app.dependency_overrides.clear()
