"""Constants and mock builders shared across test modules"""
from unittest.mock import AsyncMock, MagicMock

PRODUCT_A_ID = "507f1f77bcf86cd799439011"
PRODUCT_B_ID = "507f1f77bcf86cd799439012"
MISSING_PRODUCT_ID = "507f1f77bcf86cd7994390ff"
USER_ID = "65a1b2c3d4e5f6a7b8c9d0e1"


def make_cursor(documents):
    """Mock Motor cursor whose chained calls return itself."""
    cursor = MagicMock()
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


def apply_delta(document, delta):
    """In-memory equivalent of the $set/$unset write a FieldDelta renders."""
    result = {k: v for k, v in document.items() if k not in delta.to_unset}
    result.update(delta.to_set)
    return result
