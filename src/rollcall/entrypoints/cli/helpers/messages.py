"""Terminal message helpers for the ROLLCALL CLI.

Messages go to **stderr** so stdout stays machine-readable (e.g. with
``people list --json``). Emoji glyphs fall back to ASCII on terminals whose
encoding cannot represent them.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on the current stderr stream."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, else "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """Return "✅" when stderr can encode it, else "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, else "[X]"."""
    return _glyph(ERROR)


def warn(msg: str) -> None:
    """Emit a bold yellow warning line to stderr, e.g. ``⚠️  Store is empty.``"""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a bold green success line to stderr, e.g. ``✅  Added Jane (id 2).``"""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a bold red error line to stderr, e.g. ``❌  Cannot reach the store.``"""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
