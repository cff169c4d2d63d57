from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from timestep.runtime.config import reset_timer_config


@dataclass(slots=True)
class FakeTimeState:
    time: float | None = None
    step: str | float | None = None
    dt: float | None = None


class CountingSampler:
    """Zero-argument sampler replaying fixed readings."""

    def __init__(self, *values: float) -> None:
        self._values = iter(values)
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return next(self._values)


@pytest.fixture(autouse=True)
def _fresh_timer_config() -> Iterator[None]:
    reset_timer_config()
    yield
    reset_timer_config()
