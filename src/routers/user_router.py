from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from src.core.errors import ErrorResponseModel
from src.dependencies.services import get_user_service
from src.models.user import UserDB
from src.services.user_service import UserService
from src.utils.correlation_id import get_correlation_id
from src.utils.serialization import serialize_document

router = APIRouter()


@router.post(
    "/auth/register",
    response_model=UserDB,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}},
)
async def register_user(
    payload: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    Register a user. The password is stored hashed and never returned.
    """
    return serialize_document(await service.register_user(payload, correlation_id))


@router.get("/users", response_model=list[UserDB])
async def list_users(
    service: UserService = Depends(get_user_service),
    correlation_id: str = Depends(get_correlation_id),
):
    users = await service.list_users(correlation_id)
    return [serialize_document(doc) for doc in users]
