"""A list that grows and shrinks at either end."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

__all__ = ["LinkedList"]


class LinkedList:
    """Payloads held in order, added and removed at the front or back.

    Payloads are kept as given; their storage is the caller's concern.
    Removing or peeking on an empty list raises IndexError.
    """

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from first to last without removing anything."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def empty(self) -> bool:
        """True when the list holds no payloads."""
        return not self._items

    def add_first(self, payload: Any) -> None:
        """Put a payload in front of all the others."""
        self._items.appendleft(payload)

    def add_last(self, payload: Any) -> None:
        """Put a payload behind all the others."""
        self._items.append(payload)

    def remove_first(self) -> Any:
        """Remove and return the first payload."""
        if not self._items:
            raise IndexError("remove_first from an empty list")
        return self._items.popleft()

    def remove_last(self) -> Any:
        """Remove and return the last payload."""
        if not self._items:
            raise IndexError("remove_last from an empty list")
        return self._items.pop()

    def peek_first(self) -> Any:
        """Return the first payload, leaving it in place."""
        if not self._items:
            raise IndexError("peek_first on an empty list")
        return self._items[0]

    def peek_last(self) -> Any:
        """Return the last payload, leaving it in place."""
        if not self._items:
            raise IndexError("peek_last on an empty list")
        return self._items[-1]

    def reset(self) -> int:
        """Remove every payload and return how many there were."""
        removed = len(self._items)
        self._items.clear()
        return removed