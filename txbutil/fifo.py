"""A first-in, first-out queue of payloads."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

__all__ = ["Queue"]


class Queue:
    """Payloads retrieved in the order they were enqueued.

    Dequeuing or peeking on an empty queue raises IndexError.
    """

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from oldest to newest without dequeuing."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def empty(self) -> bool:
        """True when the queue holds no payloads."""
        return not self._items

    def enqueue(self, payload: Any) -> None:
        """Add a payload behind all the others."""
        self._items.append(payload)

    def dequeue(self) -> Any:
        """Remove and return the oldest payload."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the oldest payload, leaving it on the queue."""
        if not self._items:
            raise IndexError("peek on an empty queue")
        return self._items[0]

    def reset(self) -> int:
        """Remove every payload and return how many there were."""
        removed = len(self._items)
        self._items.clear()
        return removed