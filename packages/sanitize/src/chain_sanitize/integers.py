from __future__ import annotations

from decimal import Decimal

from .scale import decode_compact, int_to_decimal, parse_integer_text, to_signed
from .types import IntegerLike


def decode_integer(node: IntegerLike | int | Decimal) -> int:
    """Decode an integer-tagged node to its exact Python int value.

    Plain ints and integral decimals are taken at face value. For tagged nodes
    the magnitude is decoded first (hex/decimal text, little-endian bytes or a
    compact encoding) and then reinterpreted as two's complement when the node
    is signed and the high bit of its declared width is set.
    """
    if isinstance(node, Decimal):
        return int(node)
    if isinstance(node, int):
        return int(node)

    magnitude = node.magnitude
    if isinstance(magnitude, bytes):
        if node.compact:
            value = decode_compact(magnitude)
        else:
            value = int.from_bytes(magnitude, "little")
    elif isinstance(magnitude, str):
        value = parse_integer_text(magnitude)
    else:
        value = int(magnitude)

    if node.signed:
        value = to_signed(value, node.bit_width)
    return value


def canonicalize_integer(node: IntegerLike | int | Decimal) -> str:
    """Render an integer-tagged node as an exact base-10 string."""
    return int_to_decimal(decode_integer(node))
