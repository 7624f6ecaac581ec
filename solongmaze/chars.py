"""ASCII character classification and integer/text conversion."""

from __future__ import annotations

from itertools import takewhile

_BLANKS = " \t\n\v\f\r"


def _code(char: int | str) -> int:
    """Return the integer code of a character given as text or as a number."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return int(char)


def isalpha(char: int | str) -> bool:
    """Return whether ``char`` is an ASCII letter."""
    code = _code(char)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(char: int | str) -> bool:
    """Return whether ``char`` is an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def isalnum(char: int | str) -> bool:
    """Return whether ``char`` is an ASCII letter or digit."""
    return isalpha(char) or isdigit(char)


def isascii(char: int | str) -> bool:
    """Return whether ``char`` lies in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def isprint(char: int | str) -> bool:
    """Return whether ``char`` is a printable ASCII character, space included."""
    return ord(" ") <= _code(char) <= ord("~")


def _convert(char: int | str, code: int) -> int | str:
    return chr(code) if isinstance(char, str) else code


def toupper(char: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code = ord("A") + (code - ord("a"))
    return _convert(char, code)


def tolower(char: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code = ord("a") + (code - ord("A"))
    return _convert(char, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading blanks are skipped, one optional sign is read, then digits
    until the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_BLANKS)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    return sign * int(digits) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal text of ``number``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("itoa expects an integer")
    return str(number)