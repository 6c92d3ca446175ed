"""Step-wise generation of permutations in lexicographic order."""

from __future__ import annotations

from typing import Iterator, MutableSequence, Sequence, TypeVar

__all__ = ["permute_next", "permutations"]

T = TypeVar("T")


def permute_next(ints: MutableSequence) -> bool:
    """Rearrange ints in place into the next permutation.

    Returns True if a new permutation was produced, False when the
    sequence is already in descending order and none remains. Starting
    from ascending order visits every permutation of unique values.
    """
    n = len(ints)
    for i in range(n - 1, 0, -1):
        if ints[i] > ints[i - 1]:
            j = n - 1
            while ints[i - 1] > ints[j]:
                j -= 1
            ints[i - 1], ints[j] = ints[j], ints[i - 1]
            ints[i:] = ints[i:][::-1]
            return True
    return False


def permutations(items: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Yield the given arrangement and each following permutation.

    Pass the items in ascending order to obtain all of them.
    """
    current = list(items)
    yield tuple(current)
    while permute_next(current):
        yield tuple(current)