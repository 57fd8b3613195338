"""CLI helpers for ROSTER.

Utilities used by the command-line interface: URL sanitization for safe display,
OSC-8 terminal hyperlinks when supported, message emitters that write to
stderr with emoji→ASCII fallbacks, and the NAME=LEVEL logger option parser.
"""

from .db_url import sanitize_url
from .hyperlinks import hyperlink
from .messages import error, info, success, warn

__all__ = ["sanitize_url", "warn", "success", "error", "info", "hyperlink"]
