"""Unit tests for configuration helpers."""

import importlib

import pytest

from rsvp_reader import config
from rsvp_reader.config import MIN_WPM, WPM_CHOICES, parse_wpm


class TestParseWpm:
    """parse_wpm() accepts GUI labels and CLI numbers, floors low speeds."""

    @pytest.mark.parametrize("value, expected", [
        ("350", 350),
        (" 700 ", 700),
        ("350 wpm", 350),
        ("1000 WPM", 1000),
        (450, 450),
    ])
    def test_parses(self, value, expected):
        assert parse_wpm(value) == expected

    @pytest.mark.parametrize("value", ["10", "0", "-200", 49])
    def test_floors_to_minimum(self, value):
        assert parse_wpm(value) == MIN_WPM

    @pytest.mark.parametrize("value", ["fast", "", "3.5", None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError):
            parse_wpm(value)


def test_wpm_choices_match_reader_widget():
    assert WPM_CHOICES[0] == 200
    assert WPM_CHOICES[-1] == 1000
    assert all(b - a == 50 for a, b in zip(WPM_CHOICES, WPM_CHOICES[1:]))


class TestDefaultWpmFromEnvironment:
    """RSVP_DEFAULT_WPM goes through parse_wpm() when config is imported."""

    @pytest.fixture
    def reload_config(self, monkeypatch):
        yield lambda: importlib.reload(config)
        monkeypatch.undo()
        importlib.reload(config)

    def test_label_form_accepted(self, monkeypatch, reload_config):
        monkeypatch.setenv("RSVP_DEFAULT_WPM", "600 wpm")
        assert reload_config().DEFAULT_WPM == 600

    def test_low_value_floored(self, monkeypatch, reload_config):
        monkeypatch.setenv("RSVP_DEFAULT_WPM", "20")
        assert reload_config().DEFAULT_WPM == MIN_WPM

    def test_bad_value_names_the_problem(self, monkeypatch, reload_config):
        monkeypatch.setenv("RSVP_DEFAULT_WPM", "fast")
        with pytest.raises(ValueError, match="Invalid reading speed 'fast'"):
            reload_config()
