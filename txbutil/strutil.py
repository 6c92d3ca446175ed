"""Small string helpers: splitting on separator runs, character search
and None-tolerant comparisons."""

from __future__ import annotations

from itertools import groupby

__all__ = [
    "split_string",
    "count_char",
    "pos_char",
    "equal_string",
    "less_than_string",
    "greater_than_string",
]


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def split_string(text: str | None, sep: str | None) -> list[str]:
    """Split text at runs of any of the characters in sep.

    Adjacent separators never produce empty pieces. A missing text gives
    no pieces; an empty text, or missing or empty separators, give the
    text back as the only piece.
    """
    if text is None:
        return []
    if not text or not sep:
        return [text]
    separators = frozenset(sep)
    return [
        "".join(run)
        for is_sep, run in groupby(text, key=separators.__contains__)
        if not is_sep
    ]


def count_char(text: str, c: str) -> int:
    """How many times the character c occurs in text."""
    _check_char(c)
    return text.count(c)


def pos_char(text: str, pos: int, c: str) -> int:
    """Index of the first c in text at or after pos, or -1.

    A negative pos, or one beyond the end of text, finds nothing.
    """
    _check_char(c)
    if pos < 0 or pos > len(text):
        return -1
    return text.find(c, pos)


def equal_string(a: str | None, b: str | None) -> bool:
    """True when both strings are present and equal."""
    return a is not None and b is not None and a == b


def less_than_string(a: str | None, b: str | None) -> bool:
    """True when both strings are present and a sorts before b."""
    return a is not None and b is not None and a < b


def greater_than_string(a: str | None, b: str | None) -> bool:
    """True when both strings are present and a sorts after b."""
    return a is not None and b is not None and a > b