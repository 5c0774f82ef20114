from .chain_api import ChainApi
from .models import AccountVestingInfo, AtBlock, RuntimeMetadata
from .server import create_app
from .vesting import AccountsVestingInfoService

__all__ = [
    "AccountVestingInfo",
    "AccountsVestingInfoService",
    "AtBlock",
    "ChainApi",
    "RuntimeMetadata",
    "create_app",
]
