from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId


def _encode(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_encode(v) for v in value]
    return value


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Render a MongoDB document as JSON-safe data with ``_id`` exposed as ``id``."""
    if doc is None:
        return None
    data = {k: _encode(v) for k, v in doc.items() if k != "_id"}
    if "_id" in doc:
        data = {"id": str(doc["_id"]), **data}
    return data
