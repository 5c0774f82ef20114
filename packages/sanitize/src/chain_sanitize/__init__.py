from .byte_encoding import encode_bytes
from .canonical_json import sanitized_json_bytes, sanitized_json_dumps, sanitized_json_obj
from .classifier import classify
from .config import SanitizeConfig, get_config, max_safe_depth
from .errors import DecodedValueError, SerializationError
from .integers import canonicalize_integer, decode_integer
from .log import setup_logging
from .normalizer import sanitize_numbers
from .scale import decimal_to_int, decode_compact, encode_compact, int_to_decimal
from .types import (
    Bool,
    DecodedValue,
    FixedSequence,
    IntegerLike,
    JsonValue,
    KeyedMap,
    Kind,
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

__all__ = [
    "Bool",
    "DecodedValue",
    "FixedSequence",
    "IntegerLike",
    "JsonValue",
    "KeyedMap",
    "Kind",
    "Null",
    "Opaque",
    "OptionValue",
    "OrderedSet",
    "RawBytes",
    "Record",
    "ResultValue",
    "Sequence",
    "Text",
    "Tuple",
    "Variant",
    "DecodedValueError",
    "SerializationError",
    "SanitizeConfig",
    "get_config",
    "max_safe_depth",
    "setup_logging",
    "classify",
    "canonicalize_integer",
    "decode_integer",
    "decode_compact",
    "encode_compact",
    "int_to_decimal",
    "decimal_to_int",
    "encode_bytes",
    "sanitize_numbers",
    "sanitized_json_obj",
    "sanitized_json_dumps",
    "sanitized_json_bytes",
]
