from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class AtBlock(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hash: str
    height: str


class AccountVestingInfo(BaseModel):
    model_config = ConfigDict(extra="forbid")

    at: AtBlock
    vesting: Any


class RuntimeMetadata(BaseModel):
    model_config = ConfigDict(extra="forbid")

    at: AtBlock
    metadata: Any
