from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from .types import (
    Bool,
    FixedSequence,
    IntegerLike,
    Kind,
    KeyedMap,
    Null,
    Opaque,
    OptionValue,
    OrderedSet,
    RawBytes,
    Record,
    ResultValue,
    Sequence,
    Text,
    Tuple,
    Variant,
)

# Checked in order; a plain value may satisfy more than one predicate
# (bool is an int, a dataclass may also be a Mapping), so order decides.
_PRIORITY: tuple[tuple[Kind, tuple[type, ...]], ...] = (
    (Kind.NULL, (Null, type(None))),
    (Kind.BOOL, (Bool, bool)),
    (Kind.RAW_BYTES, (RawBytes, bytes, bytearray, memoryview)),
    (Kind.TEXT, (Text, str)),
    (Kind.INTEGER_LIKE, (IntegerLike, int)),
    (Kind.OPTION, (OptionValue,)),
    (Kind.RESULT, (ResultValue,)),
    (Kind.KEYED_MAP, (KeyedMap, Mapping)),
    (Kind.ORDERED_SET, (OrderedSet, set, frozenset)),
    (Kind.FIXED_SEQUENCE, (FixedSequence,)),
    (Kind.SEQUENCE, (Sequence, list)),
    (Kind.TUPLE, (Tuple, tuple)),
    (Kind.RECORD, (Record,)),
    (Kind.VARIANT, (Variant,)),
)


def is_record_like(node: Any) -> bool:
    """Plain Python objects with declared, ordered fields."""
    if isinstance(node, BaseModel):
        return True
    return dataclasses.is_dataclass(node) and not isinstance(node, type)


def classify(node: Any) -> Kind:
    """Return the kind of a single node without inspecting its children."""
    if isinstance(node, Opaque):
        return Kind.OPAQUE

    for kind, classes in _PRIORITY:
        if isinstance(node, classes):
            return kind

    if isinstance(node, Decimal):
        return Kind.INTEGER_LIKE if node.is_finite() and node == node.to_integral_value() else Kind.OPAQUE

    if is_record_like(node):
        return Kind.RECORD

    return Kind.OPAQUE
