"""Timestep error taxonomy and recoverable-error policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias


class TimestepError(Exception):
    """Base class for rejected timestep input."""


class InvalidStepModeError(TimestepError, ValueError):
    """Step selector is neither a known alias nor a number."""

    def __init__(self, step: object) -> None:
        super().__init__(f"invalid step mode: {step!r}")
        self.step = step


class InvalidSampleError(TimestepError, TypeError):
    """Sample did not resolve to a number."""

    def __init__(self, sample: object) -> None:
        super().__init__(f"invalid sample: {sample!r}")
        self.sample = sample


class InvalidStateError(TimestepError, TypeError):
    """State record holds a non-numeric time."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"invalid state {field}: {value!r}")
        self.field = field
        self.value = value


# Input errors tolerated when the timer runs in permissive mode.
RecoverableTimestepErrors: TypeAlias = tuple[type[TimestepError], ...]
RECOVERABLE_TIMESTEP_ERRORS: RecoverableTimestepErrors = (
    InvalidStepModeError,
    InvalidSampleError,
    InvalidStateError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)


__all__ = [
    "InvalidSampleError",
    "InvalidStateError",
    "InvalidStepModeError",
    "RECOVERABLE_TIMESTEP_ERRORS",
    "TimestepError",
    "log_recoverable",
]
