from typing import Any, Dict, List, Optional

from pymongo.errors import PyMongoError

from src.core.errors import InternalError, InvalidInputError
from src.repositories.order_repository import OrderRepository
from src.services.order_snapshot_builder import OrderSnapshotBuilder
from src.utils.validators import is_valid_object_id


class OrderService:
    """Order creation via snapshots, and per-user order history."""

    def __init__(self, repository: OrderRepository, snapshot_builder: OrderSnapshotBuilder):
        self.repository = repository
        self.snapshot_builder = snapshot_builder

    async def create_order(
        self,
        user_id: Any,
        items: Any,
        correlation_id: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.snapshot_builder.create_order(user_id, items, correlation_id=correlation_id)

    async def list_orders_for_user(self, user_id: str, correlation_id: Optional[str] = None) -> List[dict]:
        """A user's orders, most recent first."""
        if not is_valid_object_id(user_id):
            raise InvalidInputError("Invalid user ID", details={"user_id": str(user_id)})
        try:
            return await self.repository.list_by_user(user_id, correlation_id=correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while fetching orders") from e
