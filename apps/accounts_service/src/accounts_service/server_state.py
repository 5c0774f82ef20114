from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from .chain_api import ChainApi
from .vesting import AccountsVestingInfoService


@dataclass(slots=True)
class ServerState:
    api: ChainApi
    vesting: AccountsVestingInfoService


def get_state(request: Request) -> ServerState:
    state = getattr(request.app.state, "server_state", None)
    if state is None:
        raise RuntimeError("server state not initialized")
    return state
