from __future__ import annotations

from typing import Protocol

from chain_sanitize import DecodedValue, OptionValue, Record


class ChainApi(Protocol):
    """Decoded chain access. Transport and decoding live behind this seam."""

    def get_finalized_head(self) -> str: ...

    def get_header(self, block_hash: str) -> Record: ...

    def query_vesting(self, block_hash: str, address: str) -> OptionValue: ...

    def get_metadata(self, block_hash: str) -> DecodedValue: ...
