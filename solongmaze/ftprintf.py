"""A small printf with the conversions %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(number: int) -> int:
    """Wrap ``number`` into the signed 32-bit range."""
    return ((number + 0x80000000) & _UINT_MASK) - 0x80000000


def format_char(char: str | int) -> str:
    """Return a single character; integers are taken as byte values."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return char
    return chr(int(char) & 0xFF)


def format_str(text: str | None) -> str:
    """Return ``text``, or ``(null)`` when there is none."""
    if text is None:
        return "(null)"
    return str(text)


def format_int(number: int) -> str:
    """Return the decimal text of ``number`` as a signed 32-bit integer."""
    return str(_to_int32(int(number)))


def format_uint(number: int) -> str:
    """Return the decimal text of ``number`` as an unsigned 32-bit integer."""
    return str(int(number) & _UINT_MASK)


def format_hex(number: int, upper: bool = False) -> str:
    """Return the hexadecimal text of ``number`` as an unsigned 64-bit integer."""
    value = int(number) & _ULONG_MASK
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    text = []
    while True:
        value, remainder = divmod(value, 16)
        text.append(digits[remainder])
        if not value:
            break
    return "".join(reversed(text))


def format_pointer(address: Any) -> str:
    """Return ``0x`` and the hexadecimal address, or ``(nil)`` for a null one.

    Objects that are not integers are shown by their identity.
    """
    if address is None:
        return "(nil)"
    if isinstance(address, int):
        if address == 0:
            return "(nil)"
        value = address
    else:
        value = id(address)
    return "0x" + format_hex(value, False)


def _format_spec(spec: str, take: Callable[[], Any]) -> str:
    if spec == "c":
        return format_char(take())
    if spec == "s":
        return format_str(take())
    if spec in ("d", "i"):
        return format_int(take())
    if spec == "u":
        return format_uint(take())
    if spec in ("x", "X"):
        return format_hex(int(take()) & _UINT_MASK, spec == "X")
    if spec == "p":
        return format_pointer(take())
    # Unknown conversions and "%%" print a single percent sign.
    return "%"


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Raises ``ValueError`` when a conversion has no argument left.
    """
    values: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise ValueError("not enough arguments for format string") from None

    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        pieces.append(_format_spec(next(chars, ""), take))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)