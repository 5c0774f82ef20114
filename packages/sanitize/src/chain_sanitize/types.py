from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .errors import DecodedValueError
from .scale import compact_length, parse_integer_text


class Kind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    RAW_BYTES = "raw_bytes"
    TEXT = "text"
    INTEGER_LIKE = "integer_like"
    OPTION = "option"
    RESULT = "result"
    KEYED_MAP = "keyed_map"
    ORDERED_SET = "ordered_set"
    SEQUENCE = "sequence"
    FIXED_SEQUENCE = "fixed_sequence"
    TUPLE = "tuple"
    RECORD = "record"
    VARIANT = "variant"
    OPAQUE = "opaque"


def _freeze(items: Iterable[Any]) -> tuple[Any, ...]:
    return items if isinstance(items, tuple) else tuple(items)


@dataclass(frozen=True, slots=True)
class Null:
    pass


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool


@dataclass(frozen=True, slots=True)
class IntegerLike:
    """Integer tagged with its declared width and signedness.

    ``magnitude`` is either a Python int, a ``0x`` hex / base-10 string, or raw
    bytes. Raw bytes are little-endian at the declared width unless ``compact``
    is set, in which case they hold a SCALE compact encoding.
    """

    magnitude: int | str | bytes
    bit_width: int = 64
    signed: bool = False
    compact: bool = False

    def __post_init__(self) -> None:
        if self.bit_width < 0:
            raise DecodedValueError(f"bit width must be non-negative, got {self.bit_width}")
        if isinstance(self.magnitude, bool):
            raise DecodedValueError("boolean is not an integer magnitude")
        if isinstance(self.magnitude, (bytearray, memoryview)):
            object.__setattr__(self, "magnitude", bytes(self.magnitude))
        if isinstance(self.magnitude, str):
            parse_integer_text(self.magnitude)
        elif isinstance(self.magnitude, bytes):
            if self.compact and len(self.magnitude) < compact_length(self.magnitude):
                raise DecodedValueError("compact integer truncated")
        elif not isinstance(self.magnitude, int):
            raise DecodedValueError(f"unsupported integer magnitude {type(self.magnitude).__name__}")


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class RawBytes:
    data: bytes
    length: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if self.length is not None and self.length < 0:
            raise DecodedValueError(f"declared length must be non-negative, got {self.length}")

    @classmethod
    def from_text(cls, text: str, length: int | None = None) -> RawBytes:
        return cls(text.encode("utf-8"), length)


@dataclass(frozen=True, slots=True)
class Sequence:
    items: tuple[DecodedValue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _freeze(self.items))

    @classmethod
    def of(cls, *items: DecodedValue) -> Sequence:
        return cls(items)


@dataclass(frozen=True, slots=True)
class FixedSequence:
    items: tuple[DecodedValue, ...]
    length: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _freeze(self.items))
        if len(self.items) != self.length:
            raise DecodedValueError(f"fixed sequence declares {self.length} items, got {len(self.items)}")


@dataclass(frozen=True, slots=True)
class Tuple:
    items: tuple[DecodedValue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _freeze(self.items))

    @classmethod
    def of(cls, *items: DecodedValue) -> Tuple:
        return cls(items)


@dataclass(frozen=True, slots=True)
class OrderedSet:
    items: tuple[DecodedValue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _freeze(self.items))

    @classmethod
    def of(cls, *items: DecodedValue) -> OrderedSet:
        return cls(items)


@dataclass(frozen=True, slots=True)
class KeyedMap:
    entries: tuple[tuple[DecodedValue, DecodedValue], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple((k, v) for k, v in self.entries))

    @classmethod
    def of(cls, pairs: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> KeyedMap:
        if isinstance(pairs, Mapping):
            return cls(tuple(pairs.items()))
        return cls(tuple(pairs))


@dataclass(frozen=True, slots=True)
class Record:
    fields: tuple[tuple[str, DecodedValue], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple((name, value) for name, value in self.fields))
        for name, _ in self.fields:
            if not isinstance(name, str):
                raise DecodedValueError(f"record field names must be text, got {type(name).__name__}")

    @classmethod
    def of(cls, **fields: DecodedValue) -> Record:
        return cls(tuple(fields.items()))

    def get(self, name: str, default: DecodedValue | None = None) -> DecodedValue | None:
        for field_name, value in self.fields:
            if field_name == name:
                return value
        return default


@dataclass(frozen=True, slots=True)
class Variant:
    tag: str
    payload: DecodedValue | None = None


@dataclass(frozen=True, slots=True)
class OptionValue:
    value: DecodedValue | None = None

    @property
    def is_none(self) -> bool:
        return self.value is None

    def unwrap(self) -> DecodedValue:
        if self.value is None:
            raise DecodedValueError("cannot unwrap an empty option")
        return self.value


@dataclass(frozen=True, slots=True)
class ResultValue:
    is_ok: bool
    payload: DecodedValue


@dataclass(frozen=True, slots=True)
class Opaque:
    value: Any


DecodedValue = Union[
    Null,
    Bool,
    IntegerLike,
    Text,
    RawBytes,
    Sequence,
    FixedSequence,
    Tuple,
    OrderedSet,
    KeyedMap,
    Record,
    Variant,
    OptionValue,
    ResultValue,
    Opaque,
]

JsonValue = Union[None, bool, str, list["JsonValue"], dict[str, "JsonValue"]]
