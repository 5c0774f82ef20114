from __future__ import annotations

from eth_utils import to_hex

from .types import RawBytes


def encode_bytes(node: RawBytes | bytes | bytearray | memoryview) -> str:
    """Lowercase 0x-prefixed hex of a byte sequence.

    Fixed-length sequences are rendered at exactly their declared length,
    zero-padded on the right or cut to size.
    """
    if isinstance(node, RawBytes):
        data = node.data
        if node.length is not None:
            data = data[: node.length].ljust(node.length, b"\x00")
    else:
        data = bytes(node)
    return to_hex(data)
