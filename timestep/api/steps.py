"""Public step-mode contracts and defaults."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import IntEnum
from time import monotonic
from types import MappingProxyType
from typing import TypeAlias


class StepMode(IntEnum):
    """Canonical stepping discipline codes."""

    DIFF = -1
    PAUSE = 0
    ADD = 1


STEPS: Mapping[str, StepMode] = MappingProxyType(
    {
        "diff": StepMode.DIFF,
        "pause": StepMode.PAUSE,
        "add": StepMode.ADD,
        "📏": StepMode.DIFF,
        "⏸": StepMode.PAUSE,
        "⏭": StepMode.ADD,
        "-1": StepMode.DIFF,
        "0": StepMode.PAUSE,
        "1": StepMode.ADD,
        "-": StepMode.DIFF,
        "+": StepMode.ADD,
    }
)

START_TIME = 0
DEFAULT_STEP = "add"
# One 60 Hz frame, in milliseconds.
DEFAULT_TIME_STEP = 1000 / 60


def default_clock() -> float:
    """Return a monotonic clock reading in milliseconds."""
    return monotonic() * 1000.0


@dataclass(frozen=True, slots=True)
class LiteralSample:
    """Already-resolved time value."""

    value: float

    def read(self) -> float:
        return self.value


@dataclass(frozen=True, slots=True)
class Sampler:
    """Zero-argument source invoked once per read."""

    source: Callable[[], float]

    def read(self) -> float:
        return self.source()


Sample: TypeAlias = LiteralSample | Sampler
SampleLike: TypeAlias = float | Callable[[], float] | Sample
StepLike: TypeAlias = StepMode | str | float


def as_sample(value: SampleLike) -> Sample:
    """Wrap a number or callable into a sample, passing samples through."""
    if isinstance(value, (LiteralSample, Sampler)):
        return value
    if callable(value):
        return Sampler(value)
    return LiteralSample(value)


@dataclass(frozen=True, slots=True)
class Paused:
    """No advance; time holds."""


@dataclass(frozen=True, slots=True)
class AddStep:
    """Advance time by a fixed increment."""

    size: float


@dataclass(frozen=True, slots=True)
class DiffTo:
    """Move time to an absolute reading and report the difference."""

    now: float


Advance: TypeAlias = Paused | AddStep | DiffTo


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of one time step.

    ``mode`` is ``None`` only when the step selector could not be resolved and
    the result was NaN-propagated instead of raised.
    """

    time: float
    dt: float
    mode: StepMode | None

    @property
    def value(self) -> float:
        """Single relevant unknown: new time for add/pause, delta for diff."""
        if self.mode is None or self.mode is StepMode.DIFF:
            return self.dt
        return self.time


__all__ = [
    "AddStep",
    "Advance",
    "DEFAULT_STEP",
    "DEFAULT_TIME_STEP",
    "DiffTo",
    "LiteralSample",
    "Paused",
    "START_TIME",
    "STEPS",
    "Sample",
    "SampleLike",
    "Sampler",
    "StepLike",
    "StepMode",
    "StepResult",
    "as_sample",
    "default_clock",
]
