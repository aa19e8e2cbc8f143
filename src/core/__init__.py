"""
Core utilities package.

- logger: Structured logging with correlation IDs
- errors: Error taxonomy and FastAPI handlers
"""

from .errors import (
    ErrorResponse,
    ErrorResponseModel,
    InternalError,
    InvalidInputError,
    NotFoundError,
    error_response_handler,
    http_exception_handler,
)
from .logger import logger

__all__ = [
    "ErrorResponse",
    "ErrorResponseModel",
    "InternalError",
    "InvalidInputError",
    "NotFoundError",
    "error_response_handler",
    "http_exception_handler",
    "logger",
]
