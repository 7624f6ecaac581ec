"""Errors that end the game with a message and an exit code."""

from __future__ import annotations

import sys
from typing import TextIO


class SoLongError(Exception):
    """An error carrying the message to show and the process exit code."""

    def __init__(self, message: str = "", exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


class MapError(SoLongError):
    """The map file is missing, malformed or cannot be finished."""


def report(error: SoLongError | None, stream: TextIO | None = None) -> int:
    """Write the error's message to ``stream`` and return its exit code.

    Without an error nothing is written and the exit code is 1.
    """
    if error is None:
        return 1
    target = sys.stdout if stream is None else stream
    target.write(error.message)
    target.flush()
    return error.exit_code