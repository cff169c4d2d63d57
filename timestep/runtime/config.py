"""Centralized timer configuration sourced from environment."""

from __future__ import annotations

import math
import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from timestep.api.steps import DEFAULT_STEP, DEFAULT_TIME_STEP, STEPS


@dataclass(frozen=True, slots=True)
class TimerConfig:
    """Immutable timer defaults."""

    default_step: str = DEFAULT_STEP
    fixed_step_ms: float = DEFAULT_TIME_STEP
    strict: bool = True


_TIMER_CONFIG: ContextVar[TimerConfig | None] = ContextVar("timestep_timer_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        return float(raw.strip())
    except ValueError:
        return float(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_step(raw: str, fallback: str) -> str:
    value = raw.strip()
    if value.lower() in STEPS:
        return value.lower()
    try:
        numeric = float(value)
    except ValueError:
        return fallback
    return fallback if math.isnan(numeric) else value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with timestep-prefixed override."""
    value = _raw("TIMESTEP_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_timer_config(*, env: Mapping[str, str] | None = None) -> TimerConfig:
    fixed_step_ms = _float("TIMESTEP_FIXED_STEP_MS", DEFAULT_TIME_STEP, env=env)
    if not math.isfinite(fixed_step_ms) or fixed_step_ms <= 0.0:
        fixed_step_ms = DEFAULT_TIME_STEP
    return TimerConfig(
        default_step=_normalize_step(
            _text("TIMESTEP_DEFAULT_STEP", DEFAULT_STEP, env=env), DEFAULT_STEP
        ),
        fixed_step_ms=fixed_step_ms,
        strict=_flag("TIMESTEP_STRICT", True, env=env),
    )


def initialize_timer_config(*, env: Mapping[str, str] | None = None) -> TimerConfig:
    config = load_timer_config(env=env)
    _TIMER_CONFIG.set(config)
    return config


def set_timer_config(config: TimerConfig) -> TimerConfig:
    _TIMER_CONFIG.set(config)
    return config


def get_timer_config() -> TimerConfig:
    config = _TIMER_CONFIG.get()
    if config is not None:
        return config
    return initialize_timer_config()


def reset_timer_config() -> None:
    """Drop the cached config so the next read reloads the environment."""
    _TIMER_CONFIG.set(None)


__all__ = [
    "TimerConfig",
    "get_timer_config",
    "initialize_timer_config",
    "load_timer_config",
    "reset_timer_config",
    "resolve_log_level_name",
    "set_timer_config",
]
