"""Time-step calculator: pause, add or diff a caller-owned time record."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, MutableMapping
from numbers import Real

from timestep.api.steps import (
    START_TIME,
    STEPS,
    AddStep,
    Advance,
    DiffTo,
    Paused,
    SampleLike,
    StepLike,
    StepMode,
    StepResult,
    as_sample,
    default_clock,
)
from timestep.runtime.config import TimerConfig, get_timer_config
from timestep.runtime.errors import (
    RECOVERABLE_TIMESTEP_ERRORS,
    InvalidSampleError,
    InvalidStateError,
    InvalidStepModeError,
    log_recoverable,
)
from timestep.runtime.logging import get_timestep_logger

_LOG = get_timestep_logger("timer")
# Marks an omitted ``out``; ``None`` is a real argument asking for a bare value.
_SAME = object()


def _read(record: object, name: str, default: object) -> object:
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    return default if value is None else value


def _write(record: object, name: str, value: object) -> None:
    if isinstance(record, MutableMapping):
        record[name] = value
    else:
        setattr(record, name, value)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def resolve_mode(step: StepLike) -> StepMode:
    """Map an alias, numeric string or raw number onto a step mode.

    Numbers map by sign: negative diffs, zero pauses, positive adds.
    """
    if isinstance(step, StepMode):
        return step
    if isinstance(step, str):
        alias = STEPS.get(step)
        if alias is not None:
            return alias
        try:
            numeric = float(step.strip())
        except ValueError:
            raise InvalidStepModeError(step) from None
    elif _is_number(step):
        numeric = float(step)
    else:
        raise InvalidStepModeError(step)
    if math.isnan(numeric):
        raise InvalidStepModeError(step)
    if numeric < 0.0:
        return StepMode.DIFF
    if numeric > 0.0:
        return StepMode.ADD
    return StepMode.PAUSE


def resolve_advance(
    mode: StepMode,
    sample: SampleLike | None = None,
    *,
    config: TimerConfig | None = None,
) -> Advance:
    """Resolve the sample for ``mode``; pausing never reads it."""
    if mode is StepMode.PAUSE:
        return Paused()
    if sample is None:
        if mode is StepMode.ADD:
            sample = (config or get_timer_config()).fixed_step_ms
        else:
            sample = default_clock
        _LOG.debug("timestep.default_sample mode=%s", mode.name.lower())
    value = as_sample(sample).read()
    if not _is_number(value):
        raise InvalidSampleError(sample)
    if mode is StepMode.ADD:
        return AddStep(size=value)
    return DiffTo(now=value)


def _step(t0: float, advance: Advance, mode: StepMode) -> StepResult:
    if isinstance(advance, AddStep):
        return StepResult(time=t0 + advance.size, dt=advance.size, mode=mode)
    if isinstance(advance, DiffTo):
        return StepResult(time=advance.now, dt=advance.now - t0, mode=mode)
    return StepResult(time=t0, dt=0, mode=mode)


def compute_step(
    state: object,
    sample: SampleLike | None = None,
    *,
    config: TimerConfig | None = None,
) -> StepResult:
    """Compute the next ``time`` and ``dt`` for ``state`` without mutating it.

    Args:
        state: Mapping or object with optional ``time`` and ``step``.
        sample: Step size (add mode) or absolute reading (diff mode), either
            as a number or a zero-argument callable. Defaults to the fixed
            tick for add mode and the monotonic clock for diff mode.
        config: Overrides the context-scoped timer config.

    Raises:
        TimestepError: On unresolvable input, unless the config is permissive,
            in which case the result carries NaN instead.
    """
    cfg = config or get_timer_config()
    mode: StepMode | None = None
    try:
        t0 = _read(state, "time", START_TIME)
        if not _is_number(t0):
            raise InvalidStateError("time", t0)
        mode = resolve_mode(_read(state, "step", cfg.default_step))
        advance = resolve_advance(mode, sample, config=cfg)
    except RECOVERABLE_TIMESTEP_ERRORS:
        if cfg.strict:
            raise
        log_recoverable(_LOG, "timestep.invalid_input propagating nan", level=logging.WARNING)
        return StepResult(time=math.nan, dt=math.nan, mode=mode)
    return _step(t0, advance, mode)


def apply_step(
    state: object,
    sample: SampleLike | None = None,
    target: object | None = None,
    *,
    config: TimerConfig | None = None,
) -> object:
    """Step ``state`` and write ``time``/``dt`` into ``target`` (default: ``state``).

    A distinct target also receives the state's ``step`` so it can seed the
    next call, so a fresh diff target ends up as ``{time, dt, step}`` rather
    than the bare ``{time, dt}`` pair.
    """
    result = compute_step(state, sample, config=config)
    record = state if target is None else target
    _write(record, "time", result.time)
    _write(record, "dt", result.dt)
    if record is not state:
        step = _read(state, "step", None)
        if step is not None:
            _write(record, "step", step)
    return record


def timer(
    state: object,
    sample: SampleLike | None = None,
    out: object = _SAME,
    *,
    config: TimerConfig | None = None,
) -> object | float:
    """Step ``state``, updating ``out`` in place or returning a bare number.

    ``out`` defaults to ``state``. A falsy ``out`` (``None``, ``False``, ``0``,
    ``""``) returns the relevant unknown instead: the new time when adding or
    paused, the delta when diffing. An empty mapping is still a record.
    """
    if not out and not isinstance(out, MutableMapping):
        return compute_step(state, sample, config=config).value
    return apply_step(state, sample, None if out is _SAME else out, config=config)


__all__ = ["apply_step", "compute_step", "resolve_advance", "resolve_mode", "timer"]
