from __future__ import annotations

import re

from .errors import DecodedValueError

_HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]*$")
_DEC_RE = re.compile(r"^-?[0-9]+$")

COMPACT_SINGLE = 0b00
COMPACT_TWO = 0b01
COMPACT_FOUR = 0b10
COMPACT_BIG = 0b11

# Chunks stay far below the interpreter limit on int <-> decimal str conversion.
DECIMAL_CHUNK_DIGITS = 1000
_DECIMAL_CHUNK = 10**DECIMAL_CHUNK_DIGITS


def parse_integer_text(text: str) -> int:
    """Parse a 0x-prefixed hex or base-10 integer string without floating point."""
    candidate = text.strip()
    if _HEX_RE.match(candidate):
        digits = candidate[2:]
        return int(digits, 16) if digits else 0
    if _DEC_RE.match(candidate):
        return decimal_to_int(candidate)
    raise DecodedValueError(f"not an integer literal: {text!r}")


def compact_length(data: bytes) -> int:
    """Number of octets occupied by the SCALE compact integer at the start of data."""
    if not data:
        raise DecodedValueError("compact integer is empty")
    mode = data[0] & 0b11
    if mode == COMPACT_SINGLE:
        return 1
    if mode == COMPACT_TWO:
        return 2
    if mode == COMPACT_FOUR:
        return 4
    return 1 + (data[0] >> 2) + 4


def decode_compact(data: bytes) -> int:
    """Decode a SCALE compact (variable-length) unsigned integer.

    The two low bits of the first octet select the mode:

    - ``0b00``: single octet, value in the upper six bits
    - ``0b01``: two octets little-endian, value in the upper fourteen bits
    - ``0b10``: four octets little-endian, value in the upper thirty bits
    - ``0b11``: big-integer mode, ``(first >> 2) + 4`` little-endian octets follow
    """
    size = compact_length(data)
    if len(data) < size:
        raise DecodedValueError(f"compact integer truncated: need {size} bytes, got {len(data)}")

    mode = data[0] & 0b11
    if mode == COMPACT_BIG:
        return int.from_bytes(data[1:size], "little")
    return int.from_bytes(data[:size], "little") >> 2


def encode_compact(value: int) -> bytes:
    if value < 0:
        raise DecodedValueError("compact integers are unsigned")
    if value < 1 << 6:
        return bytes([value << 2])
    if value < 1 << 14:
        return ((value << 2) | COMPACT_TWO).to_bytes(2, "little")
    if value < 1 << 30:
        return ((value << 2) | COMPACT_FOUR).to_bytes(4, "little")

    body = value.to_bytes((value.bit_length() + 7) // 8, "little")
    if len(body) > 67:
        raise DecodedValueError("value too large for compact encoding")
    return bytes([((len(body) - 4) << 2) | COMPACT_BIG]) + body


def to_signed(value: int, bit_width: int) -> int:
    """Two's-complement reinterpretation of an unsigned value at the given width."""
    if bit_width <= 0 or value < 0:
        return value
    if value >> (bit_width - 1) == 1:
        return value - (1 << bit_width)
    return value


def int_to_decimal(value: int) -> str:
    """Base-10 rendering of an int of any size."""
    if value < 0:
        return "-" + int_to_decimal(-value)
    if value < _DECIMAL_CHUNK:
        return str(value)

    chunks: list[int] = []
    while value:
        value, rest = divmod(value, _DECIMAL_CHUNK)
        chunks.append(rest)
    head = str(chunks.pop())
    return head + "".join(str(chunk).zfill(DECIMAL_CHUNK_DIGITS) for chunk in reversed(chunks))


def decimal_to_int(digits: str) -> int:
    """Parse an optionally signed string of base-10 digits of any length."""
    negative = digits.startswith("-")
    body = digits[1:] if negative else digits
    if not body.isascii() or not body.isdigit():
        raise DecodedValueError(f"not a decimal integer: {digits[:32]!r}")

    head = len(body) % DECIMAL_CHUNK_DIGITS or DECIMAL_CHUNK_DIGITS
    value = int(body[:head])
    for start in range(head, len(body), DECIMAL_CHUNK_DIGITS):
        value = value * _DECIMAL_CHUNK + int(body[start : start + DECIMAL_CHUNK_DIGITS])
    return -value if negative else value
