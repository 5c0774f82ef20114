from __future__ import annotations

import json
from typing import Any

from .errors import SerializationError
from .normalizer import sanitize_numbers
from .types import JsonValue


def _unserializable(value: Any) -> Any:
    raise SerializationError(f"{type(value).__name__} passed through sanitization and is not JSON serializable")


def sanitized_json_obj(value: Any, *, max_depth: int | None = None) -> JsonValue:
    """Return a JSON-safe object with map, record and sequence order preserved."""
    return sanitize_numbers(value, max_depth=max_depth)


def sanitized_json_dumps(value: Any, *, max_depth: int | None = None) -> str:
    """Serialize without insignificant whitespace; keys keep their decoded order.

    Raises ``SerializationError`` when an opaque value or a subtree deeper than
    ``max_depth`` is left in the output.
    """
    normalized = sanitized_json_obj(value, max_depth=max_depth)
    return json.dumps(normalized, separators=(",", ":"), ensure_ascii=False, default=_unserializable)


def sanitized_json_bytes(value: Any, *, max_depth: int | None = None) -> bytes:
    return sanitized_json_dumps(value, max_depth=max_depth).encode("utf-8")
