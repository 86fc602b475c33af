"""CLI helpers for ROLLCALL.

URL sanitization for safe display, OSC-8 terminal hyperlinks when supported,
logger-level option parsing, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .hyperlinks import hyperlink
from .messages import error, success, warn
from .urls import sanitize_url

__all__ = ["sanitize_url", "warn", "success", "error", "hyperlink"]
