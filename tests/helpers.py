"""Shared test helpers for Countdown."""

import time

from PyQt6.QtCore import QCoreApplication

from countdown.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def drain() -> None:
    """Run every event currently queued on the sequencer."""
    QCoreApplication.processEvents()
    QCoreApplication.processEvents()


def tick(engine: TimerEngine, n: int = 1) -> None:
    """Deliver *n* ticks of the current countdown without waiting."""
    for _ in range(n):
        engine._on_tick(engine.countdown_id)


def wait_until(predicate, timeout: float = 3.0) -> bool:
    """Pump the event loop until *predicate()* holds or *timeout* passes."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        QCoreApplication.processEvents()
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()
