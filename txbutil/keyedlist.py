"""An ordered list of unique keys with values and a movable read position."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Iterator

__all__ = ["KeyedListError", "KeyedList"]

Comparator = Callable[[Any, Any], int]

ERR_DUPLICATE_KEY = "duplicate key"
ERR_KEY_NOT_FOUND = "key not found"
ERR_LIST_EMPTY = "list empty"
ERR_NEXT_AT_TAIL = "get next reached tail of list"
ERR_PREVIOUS_AT_HEAD = "get previous reached head of list"
ERR_NOT_POSITIONED = "list not positioned"
ERR_BAD_UPDATE_KEY = "update not positioned or bad key"
ERR_BAD_DELETE_KEY = "delete not positioned or bad key"


class KeyedListError(LookupError):
    """Raised when a keyed list operation cannot be carried out."""


@dataclass
class _Entry:
    key: Any
    value: Any


class KeyedList:
    """Key/value pairs kept in key order by a caller-supplied comparator.

    The comparator takes two keys and returns a negative number, zero or
    a positive number, as memcmp does. Keys are unique. The get methods
    position the list at the item they return; get_next and
    get_previous move from there, and update and delete act only on the
    positioned item. Inserting or deleting clears the position.
    """

    def __init__(self, compare: Comparator) -> None:
        if compare is None or not callable(compare):
            raise TypeError("a key comparison function is required")
        self._compare = compare
        self._sort_key = cmp_to_key(compare)
        self._entries: list[_Entry] = []
        self._position: int | None = None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over (key, value) pairs in key order; the position is untouched."""
        return iter([(e.key, e.value) for e in self._entries])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def empty(self) -> bool:
        """True when the list holds no items."""
        return not self._entries

    def clone(self) -> KeyedList:
        """A shallow copy with the same comparator and items, not positioned."""
        twin = KeyedList(self._compare)
        twin._entries = [_Entry(e.key, e.value) for e in self._entries]
        return twin

    def reset(self) -> int:
        """Remove every item, clear the position and return how many there were."""
        removed = len(self._entries)
        self._entries.clear()
        self._position = None
        return removed

    def _index_of(self, key: Any) -> int:
        wrapped = self._sort_key(key)
        return bisect_left(self._entries, wrapped, key=lambda e: self._sort_key(e.key))

    def _found_at(self, index: int, key: Any) -> bool:
        return index < len(self._entries) and self._compare(key, self._entries[index].key) == 0

    def _positioned(self) -> tuple[Any, Any]:
        entry = self._entries[self._position]  # type: ignore[index]
        return entry.key, entry.value

    def insert(self, key: Any, value: Any) -> None:
        """Add an item in key order; a key already present raises KeyedListError."""
        self._position = None
        index = self._index_of(key)
        if self._found_at(index, key):
            raise KeyedListError(ERR_DUPLICATE_KEY)
        self._entries.insert(index, _Entry(key, value))

    def get(self, key: Any) -> tuple[Any, Any]:
        """Find an item by key, position the list there and return (key, value)."""
        self._position = None
        index = self._index_of(key)
        if not self._found_at(index, key):
            raise KeyedListError(ERR_KEY_NOT_FOUND)
        self._position = index
        return self._positioned()

    def get_first(self) -> tuple[Any, Any]:
        """Position the list at its first item and return (key, value)."""
        self._position = None
        if not self._entries:
            raise KeyedListError(ERR_LIST_EMPTY)
        self._position = 0
        return self._positioned()

    def get_last(self) -> tuple[Any, Any]:
        """Position the list at its last item and return (key, value)."""
        self._position = None
        if not self._entries:
            raise KeyedListError(ERR_LIST_EMPTY)
        self._position = len(self._entries) - 1
        return self._positioned()

    def get_next(self) -> tuple[Any, Any]:
        """Move to the item after the positioned one and return (key, value).

        Running off the tail clears the position.
        """
        if self._position is None:
            raise KeyedListError(ERR_NOT_POSITIONED)
        following = self._position + 1
        if following >= len(self._entries):
            self._position = None
            raise KeyedListError(ERR_NEXT_AT_TAIL)
        self._position = following
        return self._positioned()

    def get_previous(self) -> tuple[Any, Any]:
        """Move to the item before the positioned one and return (key, value).

        Running off the head clears the position.
        """
        if self._position is None:
            raise KeyedListError(ERR_NOT_POSITIONED)
        preceding = self._position - 1
        if preceding < 0:
            self._position = None
            raise KeyedListError(ERR_PREVIOUS_AT_HEAD)
        self._position = preceding
        return self._positioned()

    def update(self, key: Any, value: Any) -> None:
        """Replace the value of the positioned item, whose key must match."""
        if self._position is None or self._compare(key, self._entries[self._position].key) != 0:
            self._position = None
            raise KeyedListError(ERR_BAD_UPDATE_KEY)
        self._entries[self._position].value = value

    def delete(self, key: Any) -> None:
        """Remove the positioned item, whose key must match; clears the position."""
        if self._position is None or self._compare(key, self._entries[self._position].key) != 0:
            self._position = None
            raise KeyedListError(ERR_BAD_DELETE_KEY)
        del self._entries[self._position]
        self._position = None