"""Writing characters, text and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from solongmaze.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(char)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream``."""
    if not isinstance(text, str):
        raise TypeError("expected text")
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    put_str(text, stream)
    put_char("\n", stream)


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``number`` to ``stream``."""
    put_str(itoa(number), stream)