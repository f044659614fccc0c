"""
Object utilities for hashing and JSON serialization.

Repository cache keys are built from request parameters with ``hash()``.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any


def hash(obj: Any) -> str:
    """
    Return a stable sha256 hex digest of a JSON-serializable object.

    Keys are sorted so that dictionaries built in a different order hash
    the same.

    Args:
        obj: Any JSON-serializable object or list of objects.
    """
    json_str = json.dumps(obj, sort_keys=True, default=_default_serializer)
    return hashlib.sha256(json_str.encode("utf-8")).hexdigest()


def _default_serializer(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    return str(obj)
