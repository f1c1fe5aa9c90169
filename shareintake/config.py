from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True, slots=True)
class IntakeConfig:
    """Runtime configuration for the share-intake CLI.

    include_data turns on eager base64 reads of every shared item. It is off
    by default since payloads can be large.
    """

    log_level: str = "WARNING"
    include_data: bool = False


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    """Read a 0/1 style boolean environment variable."""

    raw = env.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


def _env_log_level(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(name, "").strip().upper()
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return default


def load_config(env: Optional[Mapping[str, str]] = None) -> IntakeConfig:
    """Load IntakeConfig from environment variables.

    - SHAREINTAKE_LOG_LEVEL: DEBUG / INFO / WARNING / ERROR (default WARNING)
    - SHAREINTAKE_INCLUDE_DATA: 0 / 1 (default 0)

    Malformed values fall back to defaults.
    """

    env = os.environ if env is None else env
    defaults = IntakeConfig()
    return IntakeConfig(
        log_level=_env_log_level(env, "SHAREINTAKE_LOG_LEVEL", defaults.log_level),
        include_data=_env_bool(env, "SHAREINTAKE_INCLUDE_DATA", defaults.include_data),
    )
