from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_BASE = "https://rithm-jeopardy.herokuapp.com/api"
NUM_CATEGORIES = 6
POOL_SIZE = 100


@dataclass(frozen=True)
class Settings:
    api_base: str = DEFAULT_API_BASE
    num_categories: int = NUM_CATEGORIES
    pool_size: int = POOL_SIZE
    http_timeout: float = 10.0
    concurrent_fetch: bool = True


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Builds Settings from JEOPARDY_* environment variables."""
    env = os.environ if env is None else env
    return Settings(
        api_base=(env.get("JEOPARDY_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
        num_categories=_number(env, "JEOPARDY_NUM_CATEGORIES", NUM_CATEGORIES, int),
        pool_size=_number(env, "JEOPARDY_POOL_SIZE", POOL_SIZE, int),
        http_timeout=_number(env, "JEOPARDY_HTTP_TIMEOUT", 10.0, float),
        concurrent_fetch=_flag(env.get("JEOPARDY_CONCURRENT_FETCH"), True),
    )
