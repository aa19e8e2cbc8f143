"""
Tests for OrderService
"""
from unittest.mock import AsyncMock

import pytest
from pymongo.errors import PyMongoError

from src.core.errors import InternalError, InvalidInputError
from src.services.order_service import OrderService
from src.services.order_snapshot_builder import OrderSnapshotBuilder
from tests.helpers import PRODUCT_A_ID, USER_ID


@pytest.fixture
def snapshot_builder():
    return AsyncMock(spec=OrderSnapshotBuilder)


@pytest.fixture
def service(order_repository, snapshot_builder):
    return OrderService(order_repository, snapshot_builder)


@pytest.mark.asyncio
async def test_create_order_delegates_to_snapshot_builder(service, snapshot_builder):
    items = [{"product_id": PRODUCT_A_ID, "quantity": 1}]
    snapshot_builder.create_order.return_value = {"status": "Pending"}

    assert await service.create_order(USER_ID, items) == {"status": "Pending"}
    snapshot_builder.create_order.assert_awaited_once_with(USER_ID, items, correlation_id=None)


@pytest.mark.asyncio
async def test_list_orders_for_user(service, order_repository):
    order_repository.list_by_user.return_value = [{"total_amount": 10.0}]

    assert await service.list_orders_for_user(USER_ID) == [{"total_amount": 10.0}]


@pytest.mark.asyncio
async def test_list_orders_invalid_user(service, order_repository):
    with pytest.raises(InvalidInputError):
        await service.list_orders_for_user("someone")
    order_repository.list_by_user.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_orders_store_failure(service, order_repository):
    order_repository.list_by_user.side_effect = PyMongoError("down")

    with pytest.raises(InternalError):
        await service.list_orders_for_user(USER_ID)
