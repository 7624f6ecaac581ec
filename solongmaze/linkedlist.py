"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any

Deleter = Callable[[Any], None]


class LinkedList:
    """An ordered list supporting front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the head of the list."""
        self._items.appendleft(content)

    def push_back(self, content: Any) -> None:
        """Append ``content`` at the tail of the list."""
        self._items.append(content)

    def last(self) -> Any:
        """Return the content of the last element, or ``None`` if empty."""
        return self._items[-1] if self._items else None

    def pop_front(self, delete: Deleter | None = None) -> Any:
        """Remove the head element, passing its content to ``delete``.

        Returns the removed content. Raises ``IndexError`` when empty.
        """
        if not self._items:
            raise IndexError("pop from an empty list")
        content = self._items.popleft()
        if delete is not None:
            delete(content)
        return content

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every content, head first."""
        for content in self._items:
            func(content)

    def clear(self, delete: Deleter | None = None) -> None:
        """Empty the list, passing each content to ``delete`` from the tail back."""
        items = self._items
        self._items = deque()
        if delete is not None:
            for content in reversed(items):
                delete(content)

    def mapped(self, func: Callable[[Any], Any], delete: Deleter | None = None) -> LinkedList:
        """Return a new list of ``func(content)`` for each content.

        If ``func`` fails, this list is cleared with ``delete`` and the
        error is raised again.
        """
        try:
            return LinkedList(func(content) for content in self._items)
        except Exception:
            self.clear(delete)
            raise

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)