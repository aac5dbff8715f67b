"""Terminal message helpers for the STUNT CLI.

Messages go to stderr so stdout can carry the command's actual output
(for example ``stunt inspect --json``).
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, else "[!]"."""
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def success_glyph() -> str:
    """Return "✅" when stderr can encode it, else "[OK]"."""
    emoji, fallback = ("✅", "[OK]")  # pragma: no mutate
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Example:
        ``⚠️  Contract 'Marker' has no public members.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Example:
        ``✅  PropertyManager can be doubled.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)
