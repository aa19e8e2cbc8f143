from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from src.core.errors import ErrorResponseModel
from src.dependencies.services import get_review_service
from src.models.review import ReviewDB
from src.services.review_service import ReviewService
from src.utils.correlation_id import get_correlation_id
from src.utils.serialization import serialize_document

router = APIRouter()


@router.post(
    "",
    response_model=ReviewDB,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}},
)
async def add_review(
    payload: Dict[str, Any] = Body(...),
    service: ReviewService = Depends(get_review_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    Add a review and refresh the product's average rating and review count.
    """
    return serialize_document(await service.add_review(payload, correlation_id))
