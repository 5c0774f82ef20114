from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_MAX_DEPTH = 256
# Stack frames one nesting level may hold while normalizing, and frames kept
# free for callers and logging.
FRAMES_PER_LEVEL = 3
RECURSION_HEADROOM = 200
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class SanitizeConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> SanitizeConfig:
        env_file = os.environ.get("SIDECAR_ENV_FILE")
        if env_file:
            load_dotenv(Path(env_file))

        raw_depth = os.environ.get("SANITIZE_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))
        try:
            max_depth = int(raw_depth)
        except ValueError as exc:
            raise ValueError(f"SANITIZE_MAX_DEPTH must be an integer, got {raw_depth!r}") from exc
        if max_depth < 1:
            raise ValueError("SANITIZE_MAX_DEPTH must be at least 1")
        if max_depth > max_safe_depth():
            raise ValueError(f"SANITIZE_MAX_DEPTH must be at most {max_safe_depth()} at the current recursion limit")

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return cls(max_depth=max_depth, log_level=log_level)


@lru_cache(maxsize=1)
def get_config() -> SanitizeConfig:
    return SanitizeConfig.from_env()


def max_safe_depth() -> int:
    """Deepest nesting the normalizer can walk without exhausting the interpreter stack."""
    return max(1, (sys.getrecursionlimit() - RECURSION_HEADROOM) // FRAMES_PER_LEVEL)
