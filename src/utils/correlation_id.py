"""
Correlation ID utilities for request tracing.
"""

import os
import uuid
from contextvars import ContextVar
from typing import Dict

CORRELATION_ID_HEADER = os.getenv("CORRELATION_ID_HEADER", "x-correlation-id")

# Context variable to store correlation ID across async operations
correlation_id_context: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """
    Get the current correlation ID from context.
    Generates a new one if none exists.
    """
    correlation_id = correlation_id_context.get("")
    if not correlation_id:
        correlation_id = create_correlation_id()
        correlation_id_context.set(correlation_id)
    return correlation_id


def set_correlation_id(correlation_id: str) -> None:
    correlation_id_context.set(correlation_id)


def create_correlation_id() -> str:
    return str(uuid.uuid4())


def extract_correlation_id_from_headers(headers: Dict[str, str]) -> str:
    """
    Extract correlation ID from request headers (case-insensitive).
    Generates a new one if not present.
    """
    lowered = {key.lower(): value for key, value in headers.items()}
    return lowered.get(CORRELATION_ID_HEADER.lower()) or create_correlation_id()
