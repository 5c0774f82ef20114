from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from eth_utils import is_0x_prefixed, is_hexstr

from .models import AccountVestingInfo, RuntimeMetadata
from .server_state import ServerState, get_state

router = APIRouter()

BLOCK_HASH_LENGTH = 2 + 64


def resolve_block_hash(at: str | None, state: ServerState) -> str:
    if at is None:
        return state.api.get_finalized_head()
    if not (is_0x_prefixed(at) and is_hexstr(at) and len(at) == BLOCK_HASH_LENGTH):
        raise HTTPException(status_code=400, detail=f"at must be a 0x-prefixed 32 byte block hash, got {at!r}")
    return at.lower()


@router.get("/accounts/{address}/vesting-info", response_model=AccountVestingInfo)
def get_account_vesting_info(
    address: str,
    at: str | None = Query(default=None),
    state: ServerState = Depends(get_state),
) -> AccountVestingInfo:
    block_hash = resolve_block_hash(at, state)
    return state.vesting.fetch_account_vesting_info(block_hash, address)


@router.get("/runtime/metadata", response_model=RuntimeMetadata)
def get_runtime_metadata(
    at: str | None = Query(default=None),
    state: ServerState = Depends(get_state),
) -> RuntimeMetadata:
    block_hash = resolve_block_hash(at, state)
    return state.vesting.fetch_metadata(block_hash)
