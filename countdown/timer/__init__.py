"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    TimerMode,
    TimerEvent,
    INITIAL_DURATION_SECONDS,
    TICK_INTERVAL_MS,
    apply_event,
    apply_tick,
)

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerMode",
    "TimerEvent",
    "INITIAL_DURATION_SECONDS",
    "TICK_INTERVAL_MS",
    "apply_event",
    "apply_tick",
]
