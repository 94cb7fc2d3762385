"""Terminal output helpers: coloured status lines and emoji fallbacks."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def _colors_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    force = os.environ.get("CLICOLOR_FORCE")
    if force and force != "0":
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _style(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def _red(text: object) -> str:
    return _style(text, _RED)


def _green(text: object) -> str:
    return _style(text, _GREEN)


def bold(text: object) -> str:
    """Return ``text`` in bold when the terminal shows colours."""
    return _style(text, _BOLD)


def blue(text: object) -> str:
    """Return ``text`` in blue when the terminal shows colours."""
    return _style(text, _BLUE)


def emoji(fancy: str, plain: str) -> str:
    """Pick ``fancy`` unless emoji are disabled or stdout cannot encode it."""
    if "NO_EMOJI" in os.environ:
        return plain
    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    try:
        fancy.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return plain
    return fancy


def warn(message: str) -> None:
    """Print a red warning line."""
    print(f"{_red(emoji('⚠️ ', '!'))} {_red(message)}")


def success(message: str) -> None:
    """Print a green success line."""
    print(f"{_green(emoji('✅', '✓'))} {_green(message)}")