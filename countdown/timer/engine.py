"""Countdown timer state machine.

Modes
-----
IDLE      Waiting at the full duration.
RUNNING   Counting down, one tick per second.
PAUSED    Frozen at the held value.

Transitions
-----------
IDLE → RUNNING              (start; remaining kept)
RUNNING → PAUSED            (pause; remaining held)
PAUSED → RUNNING            (start; resumes from the held value)
RUNNING | PAUSED → IDLE     (reset; back to the full duration)
RUNNING → IDLE              (tick reaches 0; auto-reset)

Every other (mode, event) pair is a no-op.

Sequencing
----------
``dispatch()`` never touches state.  It emits an internal signal bound
with a queued connection, so the event is posted to the event loop of
the thread the engine lives in and evaluated there, one at a time, in
arrival order.  Ticks come from a ``QTimer`` on the same loop.

Every RUNNING span gets a fresh countdown id.  Leaving RUNNING stops the
timer and retires the id; a tick carrying a retired id is dropped, so a
decrement from a cancelled countdown can never reach a new one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import (
    QCoreApplication, QObject, Qt, QThread, QTimer, pyqtSignal,
)


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerMode(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class TimerEvent(Enum):
    START = "start"
    PAUSE = "pause"
    RESET = "reset"


# ── constants ─────────────────────────────────────────────────────────────

INITIAL_DURATION_SECONDS = 60
TICK_INTERVAL_MS = 1000


# ── snapshot ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerState:
    """Immutable snapshot of the countdown."""

    remaining_seconds: int
    mode: TimerMode = TimerMode.IDLE

    @classmethod
    def initial(cls, initial_duration: int) -> TimerState:
        return cls(remaining_seconds=initial_duration, mode=TimerMode.IDLE)


# ── pure transitions ──────────────────────────────────────────────────────


def apply_event(
    state: TimerState, event: TimerEvent, initial_duration: int
) -> TimerState:
    """Return the snapshot that follows *state* after *event*.

    Returns *state* itself when the event is a no-op in the current mode.
    """
    mode = state.mode

    if event is TimerEvent.START:
        if mode is TimerMode.RUNNING:
            return state
        return TimerState(state.remaining_seconds, TimerMode.RUNNING)

    if event is TimerEvent.PAUSE:
        if mode is not TimerMode.RUNNING:
            return state
        return TimerState(state.remaining_seconds, TimerMode.PAUSED)

    if event is TimerEvent.RESET:
        if mode is TimerMode.IDLE:
            return state
        return TimerState.initial(initial_duration)

    raise ValueError(f"unknown timer event: {event!r}")


def apply_tick(
    state: TimerState, initial_duration: int
) -> tuple[TimerState, ...]:
    """Snapshots produced by one tick, in publication order.

    Empty when not RUNNING.  When the countdown reaches zero the
    transient ``(0, RUNNING)`` snapshot is followed by the auto-reset
    ``(initial, IDLE)`` one; the last element is always the settled state.
    """
    if state.mode is not TimerMode.RUNNING:
        return ()
    remaining = max(0, state.remaining_seconds - 1)
    decremented = TimerState(remaining, TimerMode.RUNNING)
    if remaining == 0:
        return (decremented, TimerState.initial(initial_duration))
    return (decremented,)


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown engine.

    Signals
    -------
    state_changed(state: TimerState)
        Every published snapshot: each tick while running, and every
        accepted transition.  No-op events publish nothing.  The
        transient ``(0, RUNNING)`` snapshot is emitted but never stored:
        while it is delivered ``current_state`` still reads
        ``(1, RUNNING)``, so callbacks should use the argument.
    mode_changed(mode: TimerMode)
        Emitted when the mode differs from the previous settled one.
    tick(remaining_seconds: int)
        Emitted once per applied tick, before the matching
        ``state_changed``.
    """

    state_changed = pyqtSignal(object)
    mode_changed = pyqtSignal(object)
    tick = pyqtSignal(int)

    _event_posted = pyqtSignal(object)

    def __init__(
        self,
        initial_duration: int = INITIAL_DURATION_SECONDS,
        parent: QObject | None = None,
        *,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        if (
            not isinstance(initial_duration, int)
            or isinstance(initial_duration, bool)
            or initial_duration <= 0
        ):
            raise ValueError(
                f"initial_duration must be a positive int, got {initial_duration!r}"
            )

        # ── configuration ─────────────────────────────────────────────
        self._initial_duration: int = initial_duration
        self._tick_interval_ms: int = max(1, int(tick_interval_ms))

        # ── state ─────────────────────────────────────────────────────
        self._state: TimerState = TimerState.initial(initial_duration)
        self._shut_down: bool = False

        # ── clock ─────────────────────────────────────────────────────
        self._clock: QTimer | None = None
        self._countdown_id: int = 0

        self._event_posted.connect(
            self._on_event, Qt.ConnectionType.QueuedConnection
        )

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def current_state(self) -> TimerState:
        """Latest settled snapshot."""
        return self._state

    @property
    def mode(self) -> TimerMode:
        return self._state.mode

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._state.remaining_seconds

    @property
    def initial_duration(self) -> int:
        return self._initial_duration

    @property
    def tick_interval_ms(self) -> int:
        return self._tick_interval_ms

    @property
    def is_running(self) -> bool:
        return self._state.mode is TimerMode.RUNNING

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    @property
    def countdown_id(self) -> int:
        """Id of the current RUNNING span (retired ids are never reused)."""
        return self._countdown_id

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the countdown."""
        elapsed = self._initial_duration - self._state.remaining_seconds
        return max(0.0, min(1.0, elapsed / self._initial_duration))

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def dispatch(self, event: TimerEvent) -> None:
        """Queue *event* for the sequencer.  Safe from any thread."""
        if self._shut_down:
            return
        self._event_posted.emit(event)

    def start(self) -> None:
        self.dispatch(TimerEvent.START)

    def pause(self) -> None:
        self.dispatch(TimerEvent.PAUSE)

    def reset(self) -> None:
        self.dispatch(TimerEvent.RESET)

    def subscribe(
        self, callback: Callable[[TimerState], object]
    ) -> Callable[[], None]:
        """Call *callback* with every published snapshot.

        Returns a function that removes the subscription.
        """
        self.state_changed.connect(callback)

        def unsubscribe() -> None:
            try:
                self.state_changed.disconnect(callback)
            except TypeError:
                pass  # already disconnected

        return unsubscribe

    def shutdown(self) -> None:
        """Stop the clock, drop queued events and ignore further input."""
        if self._shut_down:
            return
        self._shut_down = True
        QCoreApplication.removePostedEvents(self)
        # Off-thread callers leave the timer to the next tick, which stops it.
        if QThread.currentThread() == self.thread():
            self._disarm_clock()
        logger.info("Timer engine shut down at %s", self._state)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — sequencer
    # ══════════════════════════════════════════════════════════════════

    def _on_event(self, event: TimerEvent) -> None:
        if self._shut_down:
            return
        previous = self._state
        new_state = apply_event(previous, event, self._initial_duration)
        if new_state == previous:
            logger.debug("Ignored %s while %s", event.name, previous.mode.name)
            return

        if new_state.mode is TimerMode.RUNNING:
            self._arm_clock()
        else:
            self._disarm_clock()
        self._publish(new_state)

    def _on_tick(self, countdown_id: int) -> None:
        if self._shut_down:
            self._disarm_clock()
            return
        if countdown_id != self._countdown_id or not self.is_running:
            logger.debug("Dropped stale tick from countdown %d", countdown_id)
            return

        *transient, settled = apply_tick(self._state, self._initial_duration)
        for snapshot in transient:
            self.tick.emit(snapshot.remaining_seconds)
            logger.debug("State: %s", snapshot)
            self.state_changed.emit(snapshot)
        if settled.mode is TimerMode.RUNNING:
            self.tick.emit(settled.remaining_seconds)
        else:
            self._disarm_clock()
        self._publish(settled)

    def _publish(self, new_state: TimerState) -> None:
        previous = self._state
        self._state = new_state
        logger.debug("State: %s", new_state)
        self.state_changed.emit(new_state)
        if new_state.mode is not previous.mode:
            self.mode_changed.emit(new_state.mode)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — clock
    # ══════════════════════════════════════════════════════════════════

    def _arm_clock(self) -> None:
        self._disarm_clock()
        self._countdown_id += 1
        countdown_id = self._countdown_id

        clock = QTimer(self)
        clock.setInterval(self._tick_interval_ms)
        clock.timeout.connect(lambda: self._on_tick(countdown_id))
        clock.start()
        self._clock = clock

    def _disarm_clock(self) -> None:
        if self._clock is None:
            return
        self._clock.stop()
        self._clock.deleteLater()
        self._clock = None
        # Retire the id so ticks already in flight are recognised as stale.
        self._countdown_id += 1
