"""An endless, repeating walk over a fixed list of values."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Cycler(Generic[T]):
    """Return the next item of a fixed sequence on every call, wrapping at the end.

    The first call returns the first item. The items are copied into a tuple
    on construction, so callers cannot change the cycle afterwards.

    A Cycler is not thread-safe: only the loop that owns it should advance it.
    Constructing one with no items raises ``ValueError``.
    """

    __slots__ = ("_items", "_index")

    def __init__(self, *items: T) -> None:
        if not items:
            raise ValueError("Cycler needs at least one item")
        self._items: tuple[T, ...] = tuple(items)
        # Start on the last slot so the first advance lands on index 0.
        self._index = len(self._items) - 1

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def next(self) -> T:
        """Advance one step and return the new current item."""
        self._index = (self._index + 1) % len(self._items)
        return self._items[self._index]

    __call__ = next
    __next__ = next

    def __iter__(self) -> Iterator[T]:
        return self

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Cycler{self._items!r}"
