"""Main timer display widget.

Layout (top → bottom):
    - Mode label
    - MM:SS readout
    - Start / Pause / Reset button row

The widget only reads snapshots and dispatches events; all timing lives
in the engine.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
)

from ..timer.engine import TimerEngine, TimerEvent, TimerMode, TimerState


MODE_LABELS: dict[TimerMode, str] = {
    TimerMode.IDLE:    "READY",
    TimerMode.RUNNING: "COUNTING DOWN",
    TimerMode.PAUSED:  "PAUSED",
}

# (start, pause, reset) enabled flags per mode
CONTROL_STATES: dict[TimerMode, tuple[bool, bool, bool]] = {
    TimerMode.IDLE:    (True, False, False),
    TimerMode.RUNNING: (False, True, True),
    TimerMode.PAUSED:  (True, False, True),
}


def format_time(seconds: int) -> str:
    minutes, seconds = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


class TimerWidget(QWidget):
    """The countdown card: time readout plus controls."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._on_state_changed(engine.current_state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._mode_label = QLabel(card)
        self._mode_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._mode_label)

        self._time_label = QLabel(card)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_label.setStyleSheet("font-size: 56px; font-weight: bold;")
        layout.addWidget(self._time_label)

        layout.addSpacing(12)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_btn = QPushButton("Start", card)
        self._start_btn.setObjectName("primaryButton")
        self._pause_btn = QPushButton("Pause", card)
        self._pause_btn.setObjectName("secondaryButton")
        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("dangerButton")

        btn_row.addWidget(self._start_btn)
        btn_row.addWidget(self._pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(
            lambda: self._engine.dispatch(TimerEvent.START)
        )
        self._pause_btn.clicked.connect(
            lambda: self._engine.dispatch(TimerEvent.PAUSE)
        )
        self._reset_btn.clicked.connect(
            lambda: self._engine.dispatch(TimerEvent.RESET)
        )
        self._engine.state_changed.connect(self._on_state_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_state_changed(self, state: TimerState) -> None:
        self._time_label.setText(format_time(state.remaining_seconds))
        self._mode_label.setText(MODE_LABELS[state.mode])

        start, pause, reset = CONTROL_STATES[state.mode]
        self._start_btn.setEnabled(start)
        self._pause_btn.setEnabled(pause)
        self._reset_btn.setEnabled(reset)
        self._start_btn.setText(
            "Resume" if state.mode is TimerMode.PAUSED else "Start"
        )

    # ── read-only accessors (tests, accessibility) ────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def mode_text(self) -> str:
        return self._mode_label.text()

    @property
    def start_button(self) -> QPushButton:
        return self._start_btn

    @property
    def pause_button(self) -> QPushButton:
        return self._pause_btn

    @property
    def reset_button(self) -> QPushButton:
        return self._reset_btn
