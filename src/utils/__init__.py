"""
Shared utilities package
"""

from .correlation_id import (
    create_correlation_id,
    extract_correlation_id_from_headers,
    get_correlation_id,
    set_correlation_id,
)
from .rounding import round_half_up
from .serialization import serialize_document
from .validators import is_valid_object_id

__all__ = [
    "create_correlation_id",
    "extract_correlation_id_from_headers",
    "get_correlation_id",
    "set_correlation_id",
    "round_half_up",
    "serialize_document",
    "is_valid_object_id",
]
