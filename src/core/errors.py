# Error handling utilities

import os
import traceback
from typing import Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.core.logger import logger

IS_DEVELOPMENT = os.getenv("ENVIRONMENT", "development") == "development"


class ErrorResponse(Exception):
    def __init__(self, message: str, status_code: int = 400, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(ErrorResponse):
    """Malformed identifiers, empty item lists, bad quantities or ratings."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundError(ErrorResponse):
    """A referenced product or order is absent at the moment of use."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=404, details=details)


class InternalError(ErrorResponse):
    """Store unavailable or a document with an unexpected shape."""

    def __init__(self, message: str = "Internal server error", details: dict = None):
        super().__init__(message, status_code=500, details=details)


def error_response_handler(request: Request, exc: ErrorResponse):
    extra_data = {
        "event": "error_response",
        "status_code": exc.status_code,
        "errorType": type(exc).__name__,
        "url": str(request.url),
        "method": request.method,
        **exc.details,
    }

    if IS_DEVELOPMENT and exc.status_code >= 500:
        extra_data["traceback"] = traceback.format_exc()

    logger.error(f"Error: {exc.message}", metadata=extra_data)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details},
    )


def http_exception_handler(request: Request, exc: HTTPException):
    logger.error(
        f"HTTPException: {exc.detail}",
        metadata={
            "event": "http_exception",
            "status_code": exc.status_code,
            "url": str(request.url),
            "method": request.method,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


class ErrorResponseModel(BaseModel):
    error: str
    details: Optional[dict] = None
