"""OSC-8 hyperlink helpers for the ROLLCALL CLI (formatting only)."""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort guess whether `stream` renders OSC-8 hyperlinks.

    Non-TTY streams (pipes, files) never do. Otherwise a small allowlist of
    terminal identifiers is consulted (VS Code, iTerm2, WezTerm, Kitty,
    Windows Terminal, VTE-based terminals, Alacritty, Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return `label` (default: `url`) linked to `url` when supported, else plain text."""
    text = label or url
    if not supports_osc8():
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"  # BEL-terminated OSC 8
