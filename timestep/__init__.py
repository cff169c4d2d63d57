"""Frame, real-time and constant-step time stepping over caller-owned records."""

from timestep.api.steps import (
    DEFAULT_STEP,
    DEFAULT_TIME_STEP,
    START_TIME,
    STEPS,
    AddStep,
    DiffTo,
    LiteralSample,
    Paused,
    Sampler,
    StepMode,
    StepResult,
    as_sample,
    default_clock,
)
from timestep.runtime.config import TimerConfig, get_timer_config, load_timer_config, set_timer_config
from timestep.runtime.errors import (
    InvalidSampleError,
    InvalidStateError,
    InvalidStepModeError,
    TimestepError,
)
from timestep.runtime.logging import setup_timestep_logging
from timestep.runtime.timer import apply_step, compute_step, resolve_mode, timer

__all__ = [
    "AddStep",
    "DEFAULT_STEP",
    "DEFAULT_TIME_STEP",
    "DiffTo",
    "InvalidSampleError",
    "InvalidStateError",
    "InvalidStepModeError",
    "LiteralSample",
    "Paused",
    "START_TIME",
    "STEPS",
    "Sampler",
    "StepMode",
    "StepResult",
    "TimerConfig",
    "TimestepError",
    "apply_step",
    "as_sample",
    "compute_step",
    "default_clock",
    "get_timer_config",
    "load_timer_config",
    "resolve_mode",
    "set_timer_config",
    "setup_timestep_logging",
    "timer",
]
