"""Shared pytest fixtures for Countdown tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from countdown.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with the default 60 s duration."""
    e = TimerEngine()
    yield e
    e.shutdown()


@pytest.fixture
def engine_short(qapp):
    """Fresh TimerEngine with a 3 s duration (auto-reset tests)."""
    e = TimerEngine(initial_duration=3)
    yield e
    e.shutdown()
