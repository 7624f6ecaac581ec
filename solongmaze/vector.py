"""An ordered container of distinct objects, compared by identity."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

Predicate = Callable[[int, Any], bool]


class Vector:
    """An ordered sequence in which each object appears at most once.

    Membership is decided by identity, not equality. Items stored in a
    vector may provide ``clone()`` (used by :meth:`clone` and
    :meth:`filter`) and ``destruct()`` (called by :meth:`destruct`).
    """

    def __init__(self, first: Any = None) -> None:
        self._items: list[Any] = [] if first is None else [first]

    def _position(self, item: Any) -> int | None:
        return next(
            (index for index, stored in enumerate(self._items) if stored is item),
            None,
        )

    def add(self, item: Any) -> bool:
        """Append ``item``; return ``False`` if it is ``None`` or already present."""
        if item is None or self._position(item) is not None:
            return False
        self._items.append(item)
        return True

    def add_at(self, item: Any, index: int) -> bool:
        """Place ``item`` at ``index``, moving it there if already present.

        Nothing happens, and ``False`` is returned, when ``item`` is
        ``None`` or ``index`` is outside ``0 .. len(self) - 1``.
        """
        if item is None or index < 0 or index >= len(self._items):
            return False
        self.detach(item)
        if index >= len(self._items):
            self._items.append(item)
        else:
            self._items.insert(index, item)
        return True

    def get(self, index: int) -> Any:
        """Return the item at ``index`` (negative counts from the end), or ``None``."""
        if -len(self._items) <= index < len(self._items):
            return self._items[index]
        return None

    def index_of(self, item: Any) -> int | None:
        """Return the position of ``item``, or ``None`` if it is not stored."""
        if item is None:
            return None
        return self._position(item)

    def remove(self, index: int) -> Any:
        """Remove and return the item at ``index``, or ``None`` if out of range."""
        if -len(self._items) <= index < len(self._items):
            return self._items.pop(index)
        return None

    def detach(self, item: Any) -> Any:
        """Take ``item`` out of the vector if present and return it."""
        position = self._position(item) if item is not None else None
        if position is not None:
            del self._items[position]
        return item

    def find(self, predicate: Predicate) -> Any:
        """Return the first item for which ``predicate(index, item)`` holds, or ``None``."""
        return next(
            (item for index, item in enumerate(self._items) if predicate(index, item)),
            None,
        )

    def filter(self, predicate: Predicate) -> Vector:
        """Return a new vector of clones of the items that satisfy ``predicate``."""
        filtered = Vector()
        for index, item in enumerate(self._items):
            if predicate(index, item):
                filtered.add(item.clone())
        return filtered

    def for_each(self, func: Callable[[int, Any], None]) -> None:
        """Call ``func(index, item)`` for every item in order."""
        for index, item in enumerate(self._items):
            func(index, item)

    def clone(self) -> Vector:
        """Return a new vector holding a clone of every item."""
        copy = Vector()
        for item in self._items:
            copy.add(item.clone())
        return copy

    def destruct(self) -> None:
        """Empty the vector front first, calling each item's ``destruct`` if it has one."""
        while self._items:
            item = self._items.pop(0)
            destructor = getattr(item, "destruct", None)
            if callable(destructor):
                destructor()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))