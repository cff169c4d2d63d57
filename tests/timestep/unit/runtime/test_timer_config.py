from __future__ import annotations

import pytest

from timestep.api.steps import DEFAULT_TIME_STEP
from timestep.runtime.config import (
    TimerConfig,
    get_timer_config,
    load_timer_config,
    resolve_log_level_name,
    set_timer_config,
)


def test_load_timer_config_defaults_without_env() -> None:
    cfg = load_timer_config(env={})
    assert cfg == TimerConfig(default_step="add", fixed_step_ms=DEFAULT_TIME_STEP, strict=True)


def test_load_timer_config_parses_env_mapping() -> None:
    cfg = load_timer_config(
        env={
            "TIMESTEP_DEFAULT_STEP": " DIFF ",
            "TIMESTEP_FIXED_STEP_MS": "20",
            "TIMESTEP_STRICT": "off",
        }
    )
    assert cfg.default_step == "diff"
    assert cfg.fixed_step_ms == 20.0
    assert cfg.strict is False


@pytest.mark.parametrize("raw", ["rewind", "nan", ""])
def test_invalid_default_step_falls_back_to_add(raw: str) -> None:
    assert load_timer_config(env={"TIMESTEP_DEFAULT_STEP": raw}).default_step == "add"


def test_numeric_default_step_is_kept() -> None:
    assert load_timer_config(env={"TIMESTEP_DEFAULT_STEP": "-2"}).default_step == "-2"


@pytest.mark.parametrize("raw", ["0", "-4", "abc", "inf"])
def test_invalid_fixed_step_falls_back_to_one_frame(raw: str) -> None:
    cfg = load_timer_config(env={"TIMESTEP_FIXED_STEP_MS": raw})
    assert cfg.fixed_step_ms == DEFAULT_TIME_STEP


def test_unrecognized_strict_flag_keeps_default() -> None:
    assert load_timer_config(env={"TIMESTEP_STRICT": "maybe"}).strict is True


def test_get_timer_config_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("TIMESTEP_FIXED_STEP_MS", "8")
    assert get_timer_config().fixed_step_ms == 8.0


def test_set_timer_config_overrides_env(monkeypatch) -> None:
    monkeypatch.setenv("TIMESTEP_STRICT", "0")
    override = set_timer_config(TimerConfig(strict=True))
    assert get_timer_config() is override


def test_resolve_log_level_prefers_timestep_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("TIMESTEP_LOG_LEVEL", "error")
    assert resolve_log_level_name() == "ERROR"


def test_resolve_log_level_falls_back_to_generic_and_default() -> None:
    assert resolve_log_level_name(env={"LOG_LEVEL": "debug"}) == "DEBUG"
    assert resolve_log_level_name(default="warning", env={}) == "WARNING"
