"""
Schema reconciliation for flexible-schema product documents.

A product update carries the full set of top-level fields the caller wants
the product to have. Reconciliation turns that into a ``$set``/``$unset``
pair: every supplied field is set, and every stored field the caller stopped
sending is unset, except the protected core fields, which are never removed
this way.

The stored document is read before the update is issued and the two steps are
not isolated: a concurrent update landing between the read and the write can
be overwritten, because the whole delta is applied as one write.
"""

from typing import Any, FrozenSet, Mapping

from src.core.errors import InvalidInputError
from src.models.field_delta import FieldDelta

PROTECTED_FIELDS: FrozenSet[str] = frozenset({
    "_id",
    "name",
    "description",
    "price",
    "category",
    "image_url",
    "avg_rating",
    "review_count",
    "created_at",
    "updated_at",
    "version",
})


def validate_field_name(key: Any) -> None:
    """Only flat, non-operator top-level field names are accepted."""
    if not isinstance(key, str) or not key:
        raise InvalidInputError(f"Invalid field name: {key!r}")
    if key.startswith("$") or "." in key:
        raise InvalidInputError(
            f"Field names may not start with '$' or contain '.': {key}",
            details={"field": key},
        )


def reconcile_fields(stored: Mapping[str, Any], supplied: Mapping[str, Any]) -> FieldDelta:
    """
    Compute the delta that makes ``stored`` carry exactly the protected
    fields plus every field in ``supplied``.

    Args:
        stored: Product document as currently persisted
        supplied: Caller's replacement document

    Returns:
        FieldDelta with ``to_set`` = all supplied pairs and ``to_unset`` =
        stored keys that are neither protected nor supplied

    Raises:
        InvalidInputError: If a supplied key is not a flat top-level field name
    """
    for key in supplied:
        validate_field_name(key)

    to_unset = frozenset(stored.keys()) - PROTECTED_FIELDS - frozenset(supplied.keys())
    return FieldDelta(to_set=dict(supplied), to_unset=to_unset)

