from __future__ import annotations

import logging
from typing import Any

from chain_sanitize import SanitizeConfig, get_config, setup_logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .chain_api import ChainApi
from .routes import router
from .server_state import ServerState
from .vesting import AccountsVestingInfoService

logger = logging.getLogger(__name__)


def create_app(api: ChainApi, config: SanitizeConfig | None = None) -> FastAPI:
    config = config or get_config()
    setup_logging(config.log_level)

    app = FastAPI(title="Accounts Service", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.server_state = ServerState(
        api=api,
        vesting=AccountsVestingInfoService(api, max_depth=config.max_depth),
    )
    app.include_router(router)

    @app.get("/health")
    def health() -> dict[str, Any]:
        try:
            head = app.state.server_state.api.get_finalized_head()
        except Exception as exc:
            logger.warning("finalized head unavailable: %s", exc)
            return {"status": "degraded", "finalizedHead": None, "error": str(exc)}
        return {"status": "ok", "finalizedHead": head}

    logger.info("accounts service ready, max depth %d", config.max_depth)
    return app
