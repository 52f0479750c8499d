"""Main application window for Countdown."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow

from .timer.engine import TimerEngine, TimerState
from .ui.timer_widget import TimerWidget, format_time
from .settings import SETTINGS_PATH, Settings, load_settings, save_settings


logger = logging.getLogger(__name__)


class CountdownApp(QMainWindow):
    """Main application window.  Owns the timer engine for its lifetime."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        settings_path: Path = SETTINGS_PATH,
    ) -> None:
        super().__init__()
        self._settings_path = settings_path
        self._settings: Settings = (
            settings if settings is not None else load_settings(settings_path)
        )

        self.setWindowTitle("Countdown")
        self.setMinimumSize(280, 180)
        self.resize(self._settings.window_width, self._settings.window_height)
        if self._settings.always_on_top:
            self.setWindowFlags(
                self.windowFlags() | Qt.WindowType.WindowStaysOnTopHint
            )

        self._timer_engine = TimerEngine(
            parent=self, tick_interval_ms=self._settings.tick_interval_ms,
        )
        self._timer_widget = TimerWidget(self._timer_engine, self)
        self.setCentralWidget(self._timer_widget)

        self._timer_engine.state_changed.connect(self._update_title)
        self._update_title(self._timer_engine.current_state)

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    def _update_title(self, state: TimerState) -> None:
        self.setWindowTitle(f"Countdown · {format_time(state.remaining_seconds)}")

    def _save_geometry(self) -> None:
        """Persist current window size to settings."""
        size = self.size()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        try:
            save_settings(self._settings, self._settings_path)
        except OSError as exc:
            logger.warning("Could not save settings: %s", exc)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop the engine with the window; nothing outlives the host."""
        self._save_geometry()
        self._timer_engine.shutdown()
        event.accept()
