# driver_api/utils/object_id.py
from typing import Any, Optional
from bson import ObjectId, errors


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse a path id into an ObjectId, or None if it is not a valid one"""
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would generate a fresh id
    if value is None:
        return None
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        return None
