import pytest
from chain_sanitize import DecodedValueError, FixedSequence, IntegerLike, OptionValue, RawBytes, Record, Text


def test_fixed_sequence_length_must_match() -> None:
    with pytest.raises(DecodedValueError):
        FixedSequence((IntegerLike(1, 8), IntegerLike(2, 8)), 3)
    with pytest.raises(DecodedValueError):
        FixedSequence((), 1)

    assert FixedSequence([Text("a")], 1).items == (Text("a"),)


def test_raw_bytes_length_must_be_non_negative() -> None:
    with pytest.raises(DecodedValueError):
        RawBytes(b"\x01", length=-1)

    assert RawBytes([1, 2], length=0).data == b"\x01\x02"


def test_record_field_names_must_be_text() -> None:
    with pytest.raises(DecodedValueError):
        Record(((1, Text("x")),))
    with pytest.raises(DecodedValueError):
        Record((("ok", Text("a")), (None, Text("b"))))

    assert Record.of(a=Text("x")).get("a") == Text("x")
    assert Record.of(a=Text("x")).get("b") is None


def test_empty_option_cannot_unwrap() -> None:
    with pytest.raises(DecodedValueError):
        OptionValue().unwrap()
