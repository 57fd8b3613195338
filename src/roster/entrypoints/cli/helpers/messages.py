"""Terminal message helpers for the ROSTER CLI.

One-line status messages with a leading glyph. Emoji are used when stderr
can encode them, otherwise an ASCII marker. Everything goes to stderr so
stdout stays clean for tables and ``--json`` output.
"""

import click

# name -> (emoji, ascii fallback, color)
_GLYPHS = {
    "warn": ("⚠️", "[!]", "yellow"),  # pragma: no mutate
    "success": ("✅", "[OK]", "green"),  # pragma: no mutate
    "error": ("❌", "[X]", "red"),  # pragma: no mutate
    "info": ("ℹ️", "[i]", "blue"),  # pragma: no mutate
}


def _stderr_can_encode(character: str) -> bool:
    """Return True if *character* can be encoded by the stderr stream."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding")
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(name: str) -> str:
    """Return the marker for a message kind ("warn", "success", "error", "info")."""
    emoji, fallback, _ = _GLYPHS[name]
    return emoji if _stderr_can_encode(emoji) else fallback


def _emit(name: str, msg: str) -> None:
    color = _GLYPHS[name][2]
    click.secho(f"{glyph(name)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Print a yellow warning line to stderr (e.g. ``⚠️  This will modify your database.``)."""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Print a green success line to stderr (e.g. ``✅  Upgrade complete!``)."""
    _emit("success", msg)


def error(msg: str) -> None:
    """Print a red error line to stderr (e.g. ``❌  Employee not found``)."""
    _emit("error", msg)


def info(msg: str) -> None:
    """Print a blue informational line to stderr (e.g. for empty query results)."""
    _emit("info", msg)
