"""A growable array of payloads that doubles its capacity on demand."""

from __future__ import annotations

from typing import Any, Iterator

__all__ = ["DynamicArray", "DEFAULT_CAPACITY"]

DEFAULT_CAPACITY = 512


def _check_index(n: Any) -> int:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"array index must be an int, got {type(n).__name__}")
    if n < 0:
        raise IndexError(f"array index {n} is negative")
    return n


class DynamicArray:
    """An array whose slots start out as None and may be filled with gaps.

    Writing past the current capacity doubles it until the index fits.
    The length is one more than the highest index ever written. Reading
    any slot within the capacity is allowed and gives None where nothing
    has been written; reading beyond the capacity raises IndexError.
    """

    def __init__(self, size: int = 0) -> None:
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError(f"size must be an int, got {type(size).__name__}")
        if size < 0:
            raise ValueError(f"size {size} is negative")
        self._slots: list[Any] = [None] * (size or DEFAULT_CAPACITY)
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the slots from index 0 up to the highest written."""
        return iter(self._slots[: self._length])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity()})"

    def __getitem__(self, n: int) -> Any:
        n = _check_index(n)
        if n >= len(self._slots):
            raise IndexError(f"array index {n} beyond capacity {len(self._slots)}")
        return self._slots[n]

    def __setitem__(self, n: int, payload: Any) -> None:
        n = _check_index(n)
        capacity = len(self._slots)
        while n >= capacity:
            capacity *= 2
        if capacity > len(self._slots):
            self._slots.extend([None] * (capacity - len(self._slots)))
        self._slots[n] = payload
        if n >= self._length:
            self._length = n + 1

    def capacity(self) -> int:
        """How many slots are currently allocated."""
        return len(self._slots)