from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from src.core.errors import ErrorResponseModel
from src.dependencies.services import get_product_service, get_review_service
from src.models.product import ProductDB
from src.models.review import ReviewDB
from src.services.product_service import ProductService
from src.services.review_service import ReviewService
from src.utils.correlation_id import get_correlation_id
from src.utils.serialization import serialize_document

router = APIRouter()


@router.get("", response_model=list[ProductDB])
async def list_products(
    service: ProductService = Depends(get_product_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    List all products, newest first.
    """
    products = await service.list_products(correlation_id=correlation_id)
    return [serialize_document(doc) for doc in products]


@router.get(
    "/{product_id}",
    response_model=ProductDB,
    responses={400: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}},
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
    correlation_id: str = Depends(get_correlation_id),
):
    return serialize_document(await service.get_product(product_id, correlation_id))


@router.post(
    "",
    response_model=ProductDB,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}},
)
async def create_product(
    payload: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    Create a product. name, price and category are required; any extra
    attributes are stored with the product.
    """
    return serialize_document(await service.create_product(payload, correlation_id))


@router.put(
    "/{product_id}",
    response_model=ProductDB,
    responses={400: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}},
)
async def update_product(
    product_id: str,
    payload: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    Replace the product's attributes with the body. Extra attributes
    omitted from the body are removed; core fields are always kept.
    """
    return serialize_document(await service.update_product(product_id, payload, correlation_id))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}},
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    Delete a product together with its reviews.
    """
    await service.delete_product(product_id, correlation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{product_id}/reviews",
    response_model=list[ReviewDB],
    responses={400: {"model": ErrorResponseModel}},
)
async def list_product_reviews(
    product_id: str,
    service: ReviewService = Depends(get_review_service),
    correlation_id: str = Depends(get_correlation_id),
):
    """
    Reviews for a product, newest first, each with the reviewer's name and email.
    """
    reviews = await service.list_reviews(product_id, correlation_id)
    return [serialize_document(doc) for doc in reviews]
