"""Tests for the timer widget and the main window."""

import json

import pytest

from countdown.app import CountdownApp
from countdown.settings import Settings
from countdown.timer.engine import TimerEngine, TimerMode, TimerState
from countdown.ui.timer_widget import CONTROL_STATES, TimerWidget, format_time

from helpers import drain, tick


@pytest.mark.parametrize(
    "seconds, text",
    [(60, "01:00"), (59, "00:59"), (0, "00:00"), (605, "10:05"), (-3, "00:00")],
)
def test_format_time(seconds, text):
    assert format_time(seconds) == text


def test_control_states_cover_every_mode():
    assert set(CONTROL_STATES) == set(TimerMode)
    assert CONTROL_STATES[TimerMode.IDLE] == (True, False, False)
    assert CONTROL_STATES[TimerMode.RUNNING] == (False, True, True)
    assert CONTROL_STATES[TimerMode.PAUSED] == (True, False, True)


class TestTimerWidget:

    @pytest.fixture
    def widget(self, engine):
        return TimerWidget(engine)

    def test_initial_display(self, widget):
        assert widget.time_text == "01:00"
        assert widget.mode_text == "READY"
        assert widget.start_button.isEnabled()
        assert not widget.pause_button.isEnabled()
        assert not widget.reset_button.isEnabled()

    def test_start_button_dispatches_start(self, widget, engine):
        widget.start_button.click()
        drain()
        assert engine.mode == TimerMode.RUNNING
        assert not widget.start_button.isEnabled()
        assert widget.pause_button.isEnabled()
        assert widget.reset_button.isEnabled()

    def test_display_follows_ticks(self, widget, engine):
        widget.start_button.click()
        drain()
        tick(engine, 5)
        assert widget.time_text == "00:55"

    def test_pause_shows_resume(self, widget, engine):
        widget.start_button.click()
        drain()
        widget.pause_button.click()
        drain()

        assert engine.mode == TimerMode.PAUSED
        assert widget.start_button.text() == "Resume"
        assert widget.mode_text == "PAUSED"

    def test_reset_button_restores_full_duration(self, widget, engine):
        widget.start_button.click()
        drain()
        tick(engine, 3)
        widget.reset_button.click()
        drain()

        assert engine.current_state == TimerState(60, TimerMode.IDLE)
        assert widget.time_text == "01:00"
        assert widget.start_button.text() == "Start"


class TestCountdownApp:

    def test_window_owns_engine(self, qapp, tmp_path):
        window = CountdownApp(Settings(), settings_path=tmp_path / "s.json")
        assert isinstance(window.engine, TimerEngine)
        assert window.engine.parent() is window
        assert window.windowTitle() == "Countdown · 01:00"
        window.engine.shutdown()

    def test_close_shuts_engine_down_and_saves_size(self, qapp, tmp_path):
        path = tmp_path / "s.json"
        window = CountdownApp(Settings(), settings_path=path)
        window.show()
        window.close()

        assert window.engine.is_shut_down
        saved = json.loads(path.read_text())
        assert saved["window_width"] == window.width()

    def test_title_tracks_remaining(self, qapp, tmp_path):
        window = CountdownApp(Settings(), settings_path=tmp_path / "s.json")
        window.engine.start()
        drain()
        tick(window.engine, 2)
        assert window.windowTitle() == "Countdown · 00:58"
        window.engine.shutdown()
