"""Tests for configuration and console logging helpers."""

import pytest

from gridwalk.config import Config
from gridwalk.logging_utils import (
    LOG_TAG_ERROR,
    LOG_TAG_SUCCESS,
    Color,
    colored,
    log_error,
    log_info,
    log_success,
)


def test_colored_wraps_text(monkeypatch):
    monkeypatch.delenv("GRIDWALK_NO_COLOR", raising=False)
    text = colored("hello", Color.GREEN)
    assert text.startswith(Color.GREEN.value)
    assert text.endswith(Color.RESET.value)
    assert colored("hi", Color.RED, bold=True).startswith(Color.BOLD.value + Color.RED.value)


def test_no_color_env_disables_ansi(monkeypatch):
    monkeypatch.setenv("GRIDWALK_NO_COLOR", "1")
    assert colored("hello", Color.GREEN) == "hello"


def test_log_helpers_tag_messages(monkeypatch, capsys):
    monkeypatch.setenv("GRIDWALK_NO_COLOR", "1")
    log_success("done")
    log_error("broken")
    log_info("note")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"{LOG_TAG_SUCCESS} done", f"{LOG_TAG_ERROR} broken", "[i] note"]


def test_debug_search_follows_environment(monkeypatch):
    monkeypatch.delenv("DEBUG_SEARCH", raising=False)
    assert Config.debug_search() is False
    monkeypatch.setenv("DEBUG_SEARCH", "1")
    assert Config.debug_search() is True


def test_validate_accepts_defaults(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_CELL_WIDTH", 1)
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    Config.validate()


def test_validate_rejects_bad_values(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_CELL_WIDTH", 0)
    with pytest.raises(ValueError, match="GRIDWALK_CELL_WIDTH"):
        Config.validate()
    monkeypatch.setattr(Config, "DEFAULT_CELL_WIDTH", 1)
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="GRIDWALK_LOG_LEVEL"):
        Config.validate()


def test_display_lists_settings():
    text = Config.display()
    assert text.startswith("Gridwalk Configuration:")
    assert "Default Cell Width" in text
