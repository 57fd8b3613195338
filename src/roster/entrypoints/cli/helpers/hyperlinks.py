"""OSC-8 terminal hyperlinks for the ROSTER CLI help text."""

import os
import sys
from typing import TextIO

_OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort guess whether ``stream`` (default stdout) renders OSC-8 links.

    Never true for non-TTY streams. Otherwise checks a small allowlist of
    terminal identifiers (TERM_PROGRAM, Windows Terminal, VTE-based terminals,
    alacritty, konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in _OSC8_TERMINALS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str) -> str:
    """Wrap ``url`` in an OSC-8 link when supported, else return it unchanged."""
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
