import math
from unittest import mock

import pygame
import pytest

from linalg3d import fader


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_red_at_start_is_mid_level():
    assert fader.frame_color(0.0)[0] == pytest.approx(0.5)


def test_red_peaks_at_quarter_period():
    assert fader.frame_color(math.pi / 2)[0] == pytest.approx(1.0)


@pytest.mark.parametrize("now", [0.0, 0.7, 2.5, 10.0, 123.4])
def test_channels_in_unit_range(now):
    color = fader.frame_color(now)
    assert len(color) == 3
    assert all(0.0 <= channel <= 1.0 for channel in color)


@pytest.mark.parametrize("now", [0.3, 1.9, 42.0])
def test_color_is_periodic(now):
    assert fader.frame_color(now + 2 * math.pi) == pytest.approx(fader.frame_color(now))


def test_channels_are_phase_shifted():
    shift = 2 * math.pi / 3
    red_now = fader.frame_color(1.0)[0]
    assert fader.frame_color(1.0 - shift)[1] == pytest.approx(red_now)


def test_run_stops_on_quit(headless):
    events = [[], [pygame.event.Event(pygame.QUIT)]]
    with mock.patch("pygame.event.get", side_effect=events) as get, mock.patch(
        "pygame.display.flip"
    ) as flip:
        result = fader.run(32, 24, "fade")
    assert result == 0
    assert get.call_count == 2
    assert flip.call_count == 1


def test_main_runs_window(headless):
    with mock.patch(
        "pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]
    ) as get:
        result = fader.main(["--width", "32", "--height", "24", "--title", "t"])
    assert result == 0
    assert get.call_count == 1


def test_main_reports_window_failure(headless):
    with mock.patch("pygame.display.set_mode", side_effect=pygame.error("boom")):
        result = fader.main(["--width", "32", "--height", "24"])
    assert result == 1


def test_main_rejects_non_positive_size():
    with pytest.raises(SystemExit):
        fader.main(["--width", "0"])