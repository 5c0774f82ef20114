from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .byte_encoding import encode_bytes
from .classifier import classify
from .config import get_config, max_safe_depth
from .integers import canonicalize_integer
from .types import (
    Bool,
    FixedSequence,
    JsonValue,
    KeyedMap,
    Kind,
    Opaque,
    OrderedSet,
    Record,
    ResultValue,
    Sequence,
    Text,
    Tuple,
)

logger = logging.getLogger(__name__)


def sanitize_numbers(value: Any, *, max_depth: int | None = None) -> JsonValue:
    """Normalize a decoded value tree into plain JSON-safe data.

    Integers of any width become exact base-10 strings, byte sequences become
    0x-prefixed hex and containers are rebuilt in their original order. Shapes
    that cannot be classified, and subtrees nested deeper than ``max_depth``,
    are returned as they are. ``max_depth`` is capped at ``max_safe_depth()``.
    """
    if max_depth is None:
        max_depth = get_config().max_depth
    limit = max_safe_depth()
    if max_depth > limit:
        logger.warning("max depth %d exceeds the recursion-safe bound, using %d", max_depth, limit)
        max_depth = limit
    return _normalize(value, 0, max_depth)


def _normalize(node: Any, depth: int, max_depth: int) -> Any:
    if depth > max_depth:
        logger.warning("nesting exceeds max depth %d, passing %s through", max_depth, type(node).__name__)
        return node

    kind = classify(node)
    child = depth + 1

    if kind is Kind.NULL:
        return None
    if kind is Kind.BOOL:
        return node.value if isinstance(node, Bool) else node
    if kind is Kind.RAW_BYTES:
        return encode_bytes(node)
    if kind is Kind.TEXT:
        return node.value if isinstance(node, Text) else node
    if kind is Kind.INTEGER_LIKE:
        return canonicalize_integer(node)
    if kind is Kind.OPTION:
        return None if node.value is None else _normalize(node.value, child, max_depth)
    if kind is Kind.RESULT:
        return _rebuild_result(node, child, max_depth)
    if kind is Kind.KEYED_MAP:
        return _rebuild_map(node, child, max_depth)
    if kind in (Kind.ORDERED_SET, Kind.SEQUENCE, Kind.FIXED_SEQUENCE, Kind.TUPLE):
        return [_normalize(item, child, max_depth) for item in _items(node)]
    if kind is Kind.RECORD:
        return {name: _normalize(value, child, max_depth) for name, value in _record_fields(node)}
    if kind is Kind.VARIANT:
        payload = None if node.payload is None else _normalize(node.payload, child, max_depth)
        return {node.tag: payload}

    logger.debug("passing through unrecognized %s", type(node).__name__)
    return node.value if isinstance(node, Opaque) else node


def _items(node: Any) -> Any:
    if isinstance(node, (Sequence, FixedSequence, Tuple, OrderedSet)):
        return node.items
    return node


def _rebuild_result(node: ResultValue, depth: int, max_depth: int) -> dict[str, Any]:
    key = "Ok" if node.is_ok else "Error"
    return {key: _normalize(node.payload, depth, max_depth)}


def _rebuild_map(node: KeyedMap | Mapping[Any, Any], depth: int, max_depth: int) -> dict[str, Any]:
    pairs = node.entries if isinstance(node, KeyedMap) else node.items()
    out: dict[str, Any] = {}
    for key, value in pairs:
        out[_key_text(_normalize(key, depth, max_depth))] = _normalize(value, depth, max_depth)
    return out


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    try:
        return json.dumps(key, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return str(key)


def _record_fields(node: Any) -> Any:
    if isinstance(node, Record):
        return node.fields
    if isinstance(node, BaseModel):
        return ((name, getattr(node, name)) for name in type(node).model_fields)
    return ((f.name, getattr(node, f.name)) for f in dataclasses.fields(node))
