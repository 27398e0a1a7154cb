"""Tests for environment-driven panel settings."""

import pytest

from calcpanel.settings import (
    DEFAULT_STYLE,
    DEFAULT_WIDTH,
    MIN_WIDTH,
    InvalidStyleError,
    PanelSettings,
    is_valid_style,
    load_settings,
)


def test_defaults():
    assert load_settings(env={}) == PanelSettings(DEFAULT_WIDTH, DEFAULT_STYLE)


def test_env_values():
    s = load_settings(env={"CALCPANEL_WIDTH": "40", "CALCPANEL_STYLE": "blue"})
    assert s.width == 40
    assert s.style == "blue"


def test_bad_width_falls_back():
    assert load_settings(env={"CALCPANEL_WIDTH": "wide"}).width == DEFAULT_WIDTH


def test_narrow_width_clamped_from_either_source():
    assert load_settings(env={"CALCPANEL_WIDTH": "3"}).width == MIN_WIDTH
    assert load_settings(env={}, width=3).width == MIN_WIDTH


def test_overrides_beat_env():
    env = {"CALCPANEL_WIDTH": "40", "CALCPANEL_STYLE": "blue"}
    s = load_settings(env=env, width=30, style="red")
    assert s == PanelSettings(30, "red")


def test_override_width_clamped():
    assert load_settings(env={}, width=2).width == MIN_WIDTH


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("CALCPANEL_WIDTH", "33")
    monkeypatch.delenv("CALCPANEL_STYLE", raising=False)
    assert load_settings() == PanelSettings(33, DEFAULT_STYLE)


# --- style ---

@pytest.mark.parametrize("style", ["green", "bold blue", "#ff8800", "red on white"])
def test_valid_styles(style):
    assert is_valid_style(style)


@pytest.mark.parametrize("style", ["notacolour", "bold nosuchcolour", "on"])
def test_invalid_styles(style):
    assert not is_valid_style(style)


def test_bad_env_style_falls_back():
    assert load_settings(env={"CALCPANEL_STYLE": "notacolour"}).style == DEFAULT_STYLE


def test_bad_style_override_rejected():
    with pytest.raises(InvalidStyleError, match="notacolour"):
        load_settings(env={}, style="notacolour")


def test_style_override_beats_bad_env():
    assert load_settings(env={"CALCPANEL_STYLE": "notacolour"}, style="blue").style == "blue"
