"""Countdown — a start / pause / reset countdown timer."""

__version__ = "0.1.0"
