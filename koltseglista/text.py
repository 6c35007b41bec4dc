"""Text helpers for parsing user input and stored records."""

from __future__ import annotations

from typing import Optional, TextIO

from .errors import InvalidNumberError

_DIGITS = frozenset("0123456789")
_INT_ERROR = "A megadott érték nem konvertálható számmá."
_FLOAT_ERROR = "Nem megfelelő karaktert tartalmaz a szám!"


def _fold(char: str) -> str:
    """Upper-case ASCII letters only, leaving other characters untouched."""
    return char.upper() if char.isascii() else char


def includes(text: str, part: str) -> bool:
    """Tell whether ``part`` occurs in ``text``, ignoring ASCII letter case.

    The scan does not backtrack: after a partial match fails, matching
    starts over from the next character of ``text``. An empty ``part``
    is found in any non-empty ``text``.
    """
    if not part:
        return bool(text)
    matched = 0
    for char in text:
        if _fold(part[matched]) == _fold(char):
            matched += 1
            if matched == len(part):
                return True
        else:
            matched = 0
    return False


def to_int(text: str) -> int:
    """Convert decimal digits, with an optional leading minus, to an int."""
    if not text:
        raise InvalidNumberError(_INT_ERROR)
    sign, digits = (-1, text[1:]) if text.startswith("-") else (1, text)
    if not set(digits) <= _DIGITS:
        raise InvalidNumberError(_INT_ERROR)
    return sign * int(digits) if digits else 0


def to_unsigned_float(text: str) -> float:
    """Convert digits with at most one decimal point to a non-negative float.

    Empty text and a lone point both give 0.0.
    """
    whole, _, fraction = text.partition(".")
    if not set(fraction) <= _DIGITS or not set(whole) <= _DIGITS:
        raise InvalidNumberError(_FLOAT_ERROR)
    return float(f"{whole or '0'}.{fraction or '0'}")


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` at every ``separator``, dropping one trailing empty field.

    Empty text gives a single empty field.
    """
    parts = text.split(separator)
    if text and parts[-1] == "":
        parts.pop()
    return parts


def read_line(stream: TextIO) -> Optional[str]:
    """Read one line without its newline; None once the stream is exhausted."""
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line