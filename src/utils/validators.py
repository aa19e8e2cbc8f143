from bson.objectid import ObjectId


def is_valid_object_id(value) -> bool:
    """True for ObjectId instances and 24-character hex strings."""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value)
