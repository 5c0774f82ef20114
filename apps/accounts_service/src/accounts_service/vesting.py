from __future__ import annotations

import logging

from chain_sanitize import Kind, Record, canonicalize_integer, classify, sanitize_numbers

from .chain_api import ChainApi
from .models import AccountVestingInfo, AtBlock, RuntimeMetadata

logger = logging.getLogger(__name__)


class AccountsVestingInfoService:
    def __init__(self, api: ChainApi, *, max_depth: int | None = None) -> None:
        self.api = api
        self.max_depth = max_depth

    def fetch_account_vesting_info(self, block_hash: str, address: str) -> AccountVestingInfo:
        """Fetch vesting information for an account at a given block.

        An account without a vesting schedule reports an empty object.
        """
        header = self.api.get_header(block_hash)
        vesting = self.api.query_vesting(block_hash, address)
        logger.debug("vesting for %s at %s: present=%s", address, block_hash, not vesting.is_none)

        return AccountVestingInfo(
            at=self._at(block_hash, header),
            vesting={} if vesting.is_none else sanitize_numbers(vesting.unwrap(), max_depth=self.max_depth),
        )

    def fetch_metadata(self, block_hash: str) -> RuntimeMetadata:
        header = self.api.get_header(block_hash)
        metadata = self.api.get_metadata(block_hash)
        return RuntimeMetadata(
            at=self._at(block_hash, header),
            metadata=sanitize_numbers(metadata, max_depth=self.max_depth),
        )

    @staticmethod
    def _at(block_hash: str, header: Record) -> AtBlock:
        number = header.get("number")
        if number is None or classify(number) is not Kind.INTEGER_LIKE:
            raise ValueError(f"header for {block_hash} has no block number")
        return AtBlock(hash=block_hash, height=canonicalize_integer(number))
