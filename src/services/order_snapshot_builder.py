"""
Order snapshot construction.

Turns a cart of ``{product_id, quantity}`` entries into an order whose line
items freeze each product's name and price as stored on the server at read
time. Prices sent by the client are never looked at.

The product read and the order write are not isolated from concurrent price
edits; the snapshot uses whatever price was visible when the products were read.
"""

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from bson import ObjectId
from pymongo.errors import PyMongoError

from src.core.errors import InternalError, InvalidInputError, NotFoundError
from src.core.logger import logger
from src.models.order import ORDER_STATUS_PENDING, OrderItemRequest, OrderLineItem
from src.repositories.order_repository import OrderRepository
from src.repositories.product_repository import ProductRepository
from src.utils.rounding import round_half_up, to_decimal
from src.utils.validators import is_valid_object_id

INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def parse_quantity(value: Any) -> int:
    """
    Parse a requested quantity into a positive integer.

    Accepts ints, integral floats and ASCII integer strings.

    Raises:
        ValueError: For booleans, fractions, non-numeric values and values < 1
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Invalid quantity: {value!r}")

    if isinstance(value, int):
        quantity = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Invalid quantity: {value!r}")
        quantity = int(value)
    elif isinstance(value, str):
        if not INTEGER_PATTERN.fullmatch(value.strip()):
            raise ValueError(f"Invalid quantity: {value!r}")
        quantity = int(value.strip())
    else:
        raise ValueError(f"Invalid quantity: {value!r}")

    if quantity < 1:
        raise ValueError(f"Quantity must be at least 1: {value!r}")
    return quantity


def validate_order_request(user_id: Any, items: Any) -> List[OrderItemRequest]:
    """
    Validate an order request before anything is read or written.

    Checks run in this order: user ID, non-empty item list, every product
    ID, every quantity.

    Raises:
        InvalidInputError: On the first failing check
    """
    if not is_valid_object_id(user_id):
        raise InvalidInputError("Invalid user ID", details={"user_id": str(user_id)})

    if not isinstance(items, list) or not items:
        raise InvalidInputError("Order must contain at least one item")

    for index, item in enumerate(items):
        if not isinstance(item, Mapping) or not is_valid_object_id(item.get("product_id")):
            raise InvalidInputError(
                "One or more product IDs are invalid",
                details={"item_index": index},
            )

    requests = []
    for index, item in enumerate(items):
        try:
            quantity = parse_quantity(item.get("quantity"))
        except ValueError:
            raise InvalidInputError(
                f"Invalid quantity for product {item['product_id']}: {item.get('quantity')!r}",
                details={"item_index": index, "product_id": str(item["product_id"])},
            )
        requests.append(OrderItemRequest(product_id=str(item["product_id"]), quantity=quantity))

    return requests


def find_missing_product_ids(
    requests: Sequence[OrderItemRequest],
    products: Sequence[Mapping[str, Any]],
) -> List[str]:
    """Requested IDs with no matching product, in request order without repeats."""
    found = {str(product["_id"]) for product in products}
    missing = []
    for request in requests:
        if request.product_id not in found and request.product_id not in missing:
            missing.append(request.product_id)
    return missing


def build_line_items(
    requests: Sequence[OrderItemRequest],
    products: Sequence[Mapping[str, Any]],
) -> Tuple[List[OrderLineItem], float]:
    """
    Build one line item per request, in request order, from server-held
    product data.

    Returns:
        Tuple of (line items, total amount rounded half-up to 2 places)

    Raises:
        InternalError: If a stored product lacks a usable name or price
    """
    by_id = {str(product["_id"]): product for product in products}
    line_items = []
    total = Decimal(0)

    for request in requests:
        product = by_id[request.product_id]
        name = product.get("name")
        price = product.get("price")
        if not isinstance(name, str) or isinstance(price, bool) or not isinstance(price, (int, float)):
            raise InternalError(
                "Stored product has an unexpected shape",
                details={"product_id": request.product_id},
            )

        line_items.append(OrderLineItem(
            product_id=request.product_id,
            name=name,
            price=float(price),
            quantity=request.quantity,
        ))
        total += to_decimal(price) * request.quantity

    return line_items, round_half_up(total)


class OrderSnapshotBuilder:
    """Validates a cart, snapshots product data and persists the order."""

    def __init__(self, product_repository: ProductRepository, order_repository: OrderRepository):
        self.product_repository = product_repository
        self.order_repository = order_repository

    async def create_order(
        self,
        user_id: Any,
        items: Any,
        correlation_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a ``Pending`` order from a cart.

        Args:
            user_id: Ordering user's ID
            items: List of ``{"product_id", "quantity"}`` mappings; any other
                keys (such as a client price) are ignored
            correlation_id: Correlation ID for logging

        Returns:
            The stored order document

        Raises:
            InvalidInputError: If the request is malformed
            NotFoundError: If any product is missing; lists every missing ID
            InternalError: If the store fails; no order is returned
        """
        requests = validate_order_request(user_id, items)

        try:
            products = await self.product_repository.find_by_ids(
                [r.product_id for r in requests], correlation_id=correlation_id
            )
        except PyMongoError as e:
            raise InternalError("Database error while reading products") from e

        missing_ids = find_missing_product_ids(requests, products)
        if missing_ids:
            logger.warning(
                "Order references missing products",
                correlation_id=correlation_id,
                metadata={"event": "order_products_missing", "missingIds": missing_ids}
            )
            raise NotFoundError(
                f"Could not find products with IDs: {', '.join(missing_ids)}",
                details={"missing_ids": missing_ids},
            )

        line_items, total_amount = build_line_items(requests, products)

        now = datetime.now(timezone.utc)
        order = {
            "user_id": ObjectId(user_id),
            "items": [
                {**item.model_dump(), "product_id": ObjectId(item.product_id)}
                for item in line_items
            ],
            "total_amount": total_amount,
            "status": ORDER_STATUS_PENDING,
            "created_at": now,
            "updated_at": now,
        }

        try:
            saved = await self.order_repository.create(order, correlation_id=correlation_id)
        except PyMongoError as e:
            raise InternalError("Database error while saving order") from e

        logger.info(
            f"Created order {saved['_id']}",
            correlation_id=correlation_id,
            metadata={
                "event": "order_created",
                "orderId": str(saved["_id"]),
                "userId": str(user_id),
                "itemCount": len(line_items),
                "totalAmount": total_amount,
            }
        )
        return saved
