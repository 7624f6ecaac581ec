"""String and byte helpers with C string-library semantics.

Positions are returned as indices (or ``None`` when nothing is found).
Where the C semantics depend on the terminating NUL, it is treated as
sitting just past the end of the text.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence

_NUL = "\0"


def _code(item: int | str) -> int:
    """Return the unsigned byte-like value of a character or byte."""
    if isinstance(item, int):
        return item & 0xFF
    return ord(item)


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, so a
    truncation happened when the length is ``>= size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    length = len(dst)
    if size <= length:
        return dst, size + len(src)
    copied, src_length = strlcpy(src, size - length)
    return dst + copied, length + src_length


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    return memchr(text + _NUL, char, len(text) + 1)


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``.

    Searching for the NUL character finds the end of the text.
    """
    if _code(char) == 0:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def memchr(data: Sequence[int] | str, byte: int | str, count: int) -> int | None:
    """Return the index of ``byte`` among the first ``count`` items of ``data``."""
    target = _code(byte)
    for index, item in enumerate(data[:count]):
        if _code(item) == target:
            return index
    return None


def memcmp(first: Sequence[int] | str, second: Sequence[int] | str, count: int) -> int:
    """Compare the first ``count`` items; return the difference at the first mismatch."""
    for left, right in zip(first[:count], second[:count]):
        difference = _code(left) - _code(right)
        if difference:
            return difference
    return 0


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters, the terminator included."""
    limit = min(count, len(first) + 1, len(second) + 1)
    return memcmp(first + _NUL, second + _NUL, limit)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    A negative ``length`` counts back from just past the terminator.
    """
    if length < 0:
        length = max(0, len(haystack) + 1 + length)
    needle_length = len(needle)
    if needle_length == 0:
        return 0
    for index in range(len(haystack)):
        if length - index < needle_length:
            break
        if strncmp(haystack[index:], needle, needle_length) == 0:
            return index
    return None


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end or a zero length gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text) or length == 0:
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return the two texts joined together."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new text from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]) -> None:
    """Call ``func(index, chars)`` for each position, letting it edit ``chars`` in place."""
    for index, _ in enumerate(chars):
        func(index, chars)