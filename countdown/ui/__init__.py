"""UI package."""

from .timer_widget import TimerWidget, CONTROL_STATES, format_time

__all__ = ["TimerWidget", "CONTROL_STATES", "format_time"]
