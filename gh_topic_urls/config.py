"""Configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigError


@dataclass(frozen=True)
class Config:
    """Runtime settings, overridable from the environment."""

    command_timeout: float = 30.0
    completion_timeout: float = 5.0


def load_config() -> Config:
    """Build the config from env vars, falling back to the defaults."""
    return Config(
        command_timeout=_seconds_from_env("GH_TOPIC_URLS_TIMEOUT", Config.command_timeout),
        completion_timeout=_seconds_from_env(
            "GH_TOPIC_URLS_COMPLETION_TIMEOUT", Config.completion_timeout
        ),
    )


def _seconds_from_env(var: str, default: float) -> float:
    raw = os.getenv(var, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{var} must be a number of seconds, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{var} must be greater than zero, got {raw!r}")
    return value


__all__ = ["Config", "load_config"]
