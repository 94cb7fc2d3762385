import io
import sys

import pytest

from katarun import ui


@pytest.fixture(autouse=True)
def plain_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("careful")
    assert capsys.readouterr().out == "! careful\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("done")
    assert capsys.readouterr().out == "✓ done\n"


def test_bold_forced_colours(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    styled = ui.bold("word")
    assert styled.startswith("\x1b[1m")
    assert styled.endswith("\x1b[0m")
    assert "word" in styled


def test_no_color_wins_over_force(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert ui.blue("sky") == "sky"
    assert ui.bold(7) == "7"


def test_blue_differs_from_bold_when_coloured(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    assert ui.blue("x") != ui.bold("x")
    assert "x" in ui.blue("x")


def test_emoji_disabled_by_env(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.emoji("🎉", "★") == "★"


def test_emoji_falls_back_on_ascii_stdout(monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO(), encoding="ascii"))
    assert ui.emoji("🎉", "★") == "★"


def test_emoji_used_on_utf8_stdout(monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO(), encoding="utf-8"))
    assert ui.emoji("🎉", "★") == "🎉"