from fastapi import APIRouter, Depends, status

from src.core.errors import ErrorResponseModel
from src.dependencies.services import get_order_service
from src.models.order import OrderCreateRequest, OrderDB
from src.services.order_service import OrderService
from src.utils.correlation_id import get_correlation_id
from src.utils.serialization import serialize_document

router = APIRouter()


@router.post(
    "",
    response_model=OrderDB,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}},
)
async def create_order(
    order: OrderCreateRequest,
    service: OrderService = Depends(get_order_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    Create an order from product IDs and quantities.

    Names and prices are copied from the stored products; any price in the
    request body is ignored.
    """
    created = await service.create_order(order.user_id, order.items, correlation_id=correlation_id)
    return serialize_document(created)


@router.get(
    "/user/{user_id}",
    response_model=list[OrderDB],
    responses={400: {"model": ErrorResponseModel}},
)
async def list_user_orders(
    user_id: str,
    service: OrderService = Depends(get_order_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    Order history for a user, most recent first.
    """
    orders = await service.list_orders_for_user(user_id, correlation_id)
    return [serialize_document(doc) for doc in orders]
