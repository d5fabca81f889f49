"""Runtime configuration for the bridge."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CACHE_TTL = 3600
DEFAULT_MAX_DEPTH = 64


@dataclass(slots=True)
class BridgeSettings:
    """Settings resolved from explicit values first, then the environment."""

    site_url: str | None = None
    cache_ttl: int | None = None
    max_depth: int | None = None
    database_url: str | None = None
    script_root: Path | None = None

    def __post_init__(self) -> None:
        if self.site_url is None:
            self.site_url = os.getenv("BLOCK_BRIDGE_SITE_URL", "")
        self.site_url = self.site_url.rstrip("/")
        if self.cache_ttl is None:
            self.cache_ttl = _int_env("BLOCK_BRIDGE_CACHE_TTL", DEFAULT_CACHE_TTL)
        if self.max_depth is None:
            self.max_depth = _int_env("BLOCK_BRIDGE_MAX_DEPTH", DEFAULT_MAX_DEPTH)
        if self.database_url is None:
            self.database_url = os.getenv("BLOCK_BRIDGE_DATABASE_URL")
        if self.script_root is None:
            root = os.getenv("BLOCK_BRIDGE_SCRIPT_ROOT")
            self.script_root = Path(root).expanduser() if root else None
        if self.cache_ttl < 0:
            raise ValueError("cache_ttl must be non-negative.")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1.")


def load_settings(env_file: str | Path | None = None, **overrides) -> BridgeSettings:
    """Load ``.env`` values (without overriding the process env) and build settings."""
    if env_file is not None:
        load_dotenv(Path(env_file))
    else:
        load_dotenv()
    return BridgeSettings(**overrides)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


__all__ = ["BridgeSettings", "DEFAULT_CACHE_TTL", "DEFAULT_MAX_DEPTH", "load_settings"]
