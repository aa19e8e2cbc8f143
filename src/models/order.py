from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

ORDER_STATUS_PENDING = "Pending"


class OrderItemRequest(BaseModel):
    """One validated cart entry."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int


class OrderLineItem(BaseModel):
    """Snapshot of a product's name and price at purchase time."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    price: float
    quantity: int


class OrderCreateRequest(BaseModel):
    """
    Raw order body. Shapes are checked by OrderSnapshotBuilder so that every
    input problem is reported the same way.
    """

    user_id: Any = None
    items: Any = None


class OrderDB(BaseModel):
    id: str
    user_id: str
    items: List[OrderLineItem]
    total_amount: float
    status: str = ORDER_STATUS_PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
