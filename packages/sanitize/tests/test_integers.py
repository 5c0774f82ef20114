from enum import IntEnum

import pytest
from chain_sanitize import (
    DecodedValueError,
    IntegerLike,
    canonicalize_integer,
    decimal_to_int,
    decode_compact,
    decode_integer,
    encode_compact,
    int_to_decimal,
    sanitize_numbers,
)

U128_MAX = "340282366920938463463374607431768211455"


def test_unsigned_boundaries() -> None:
    assert canonicalize_integer(IntegerLike("0x0", 32)) == "0"
    assert canonicalize_integer(IntegerLike("0xFFFFFFFF", 32)) == "4294967295"
    assert canonicalize_integer(IntegerLike("0x0", 64)) == "0"
    assert canonicalize_integer(IntegerLike("0xFFFFFFFFFFFFFFFF", 64)) == "18446744073709551615"
    assert canonicalize_integer(IntegerLike("0xffffffffffffffffffffffffffffffff", 128)) == U128_MAX
    assert canonicalize_integer(IntegerLike(U128_MAX, 128)) == U128_MAX


def test_signed_boundaries() -> None:
    assert canonicalize_integer(IntegerLike("0x80000000", 32, signed=True)) == "-2147483648"
    assert canonicalize_integer(IntegerLike("0x7FFFFFFFFFFFFFFF", 64, signed=True)) == "9223372036854775807"
    assert canonicalize_integer(IntegerLike(10, 64, signed=True)) == "10"
    assert canonicalize_integer(IntegerLike(-7, 8, signed=True)) == "-7"


def test_padded_hex_magnitudes() -> None:
    assert canonicalize_integer(IntegerLike("0x000000000000000004fe9f24a6a9c00")) == "22493750000000000"
    assert canonicalize_integer(IntegerLike("0x000000000000000000ff49f24a6a9c00", 128)) == "71857424040631296"


def test_256_bit_precision() -> None:
    value = 2**256 - 1
    assert canonicalize_integer(IntegerLike(hex(value), 256)) == str(value)
    assert canonicalize_integer(IntegerLike(value.to_bytes(32, "little"), 256)) == str(value)
    assert canonicalize_integer(IntegerLike("0x" + "80" + "00" * 31, 256, signed=True)) == str(-(2**255))


def test_little_endian_bytes() -> None:
    assert canonicalize_integer(IntegerLike(b"\xff\xff\xff\xff", 32)) == "4294967295"
    assert canonicalize_integer(IntegerLike(b"\x00\x00\x00\x80", 32, signed=True)) == "-2147483648"
    assert canonicalize_integer(IntegerLike(bytearray(b"\x2a\x00"), 16)) == "42"


def test_compact_values_decode_to_true_magnitude() -> None:
    moment = IntegerLike(b"\x03\xa2\x89\xab\x5b", 64, compact=True)
    assert canonicalize_integer(moment) == "1537968546"

    u32_max = IntegerLike(b"\x03\xff\xff\xff\xff", 32, compact=True)
    assert canonicalize_integer(u32_max) == "4294967295"

    u128_max = IntegerLike(b"\x33" + b"\xff" * 16, 128, compact=True)
    assert canonicalize_integer(u128_max) == U128_MAX

    assert canonicalize_integer(IntegerLike(b"\x00", 128, compact=True)) == "0"


def test_compact_modes() -> None:
    assert decode_compact(b"\x04") == 1
    assert decode_compact(b"\xfc") == 63
    assert decode_compact(b"\x01\x01") == 64
    assert decode_compact(b"\xfd\xff") == 16383
    assert decode_compact(b"\x02\x00\x01\x00") == 16384
    assert decode_compact(encode_compact(100_000_000)) == 100_000_000
    assert encode_compact(2**32 - 1) == b"\x03\xff\xff\xff\xff"


def test_compact_truncated() -> None:
    with pytest.raises(DecodedValueError):
        decode_compact(b"\x03\xff")
    with pytest.raises(DecodedValueError):
        IntegerLike(b"\x03\xff", 32, compact=True)


def test_tagged_hex_text_is_numeric() -> None:
    assert canonicalize_integer(IntegerLike("0x40C0A7", 32)) == "4243623"
    assert decode_integer(IntegerLike("4243623", 32)) == 0x40C0A7


def test_malformed_magnitude_rejected_at_construction() -> None:
    with pytest.raises(DecodedValueError):
        IntegerLike("12.5")
    with pytest.raises(DecodedValueError):
        IntegerLike("0xzz")
    with pytest.raises(DecodedValueError):
        IntegerLike(True)
    with pytest.raises(DecodedValueError):
        IntegerLike(1, bit_width=-8)


def test_integers_beyond_decimal_conversion_limit() -> None:
    assert sanitize_numbers([10**5000]) == ["1" + "0" * 5000]
    assert canonicalize_integer(-(10**5000) - 7) == "-1" + "0" * 4999 + "7"

    rendered = canonicalize_integer(IntegerLike("0x" + "f" * 4000, 16000))
    assert len(rendered) == 4817
    assert rendered.endswith("5")
    assert decode_integer(IntegerLike(rendered, 16000)) == 16**4000 - 1


def test_long_decimal_magnitudes() -> None:
    digits = "9" * 4500
    assert decode_integer(IntegerLike(digits, 16000)) == 10**4500 - 1
    assert decimal_to_int("-" + "0" * 999 + "12") == -12
    assert int_to_decimal(decimal_to_int("1" + "2" * 3001)) == "1" + "2" * 3001
    assert int_to_decimal(10**1000) == "1" + "0" * 1000

    with pytest.raises(DecodedValueError):
        decimal_to_int("12a4")


class Pallet(IntEnum):
    SYSTEM = 0
    VESTING = 25


def test_int_subclasses_render_as_numbers() -> None:
    assert canonicalize_integer(Pallet.VESTING) == "25"
    assert canonicalize_integer(IntegerLike(Pallet.VESTING, 8)) == "25"
    assert sanitize_numbers({"pallet": Pallet.SYSTEM}) == {"pallet": "0"}


def test_signed_magnitude_wider_than_width_is_kept() -> None:
    assert canonicalize_integer(IntegerLike(0xFF, 8, signed=True)) == "-1"
    assert canonicalize_integer(IntegerLike(0x1FF, 8, signed=True)) == "511"
    assert canonicalize_integer(IntegerLike("0x1FFFFFFFF", 32, signed=True)) == "8589934591"
