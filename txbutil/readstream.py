"""A read stream over an in-memory string, with getc/ungetc style access."""

from __future__ import annotations

from typing import IO

__all__ = ["StringReadStream"]


class StringReadStream:
    """Character-at-a-time reading over a private copy of a string.

    The text ends at its first NUL character, if any. Reads past the end
    return None; the end flag is only set after such a read.
    """

    def __init__(self, text: str) -> None:
        if text is None:
            raise ValueError("no string provided")
        self._text = text.split("\0", 1)[0]
        self._pos = 0
        self._eos = False

    @classmethod
    def from_file(cls, file: IO) -> StringReadStream:
        """Build a stream from the whole content of an open file.

        The file is left positioned at its beginning.
        """
        file.seek(0)
        data = file.read()
        file.seek(0)
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        return cls(data)

    def clone(self) -> StringReadStream:
        """An independent copy sharing the current position and end flag."""
        twin = StringReadStream(self._text)
        twin._pos = self._pos
        twin._eos = self._eos
        return twin

    def at_end(self) -> bool:
        """True once a read has gone past the end of the text."""
        return self._eos

    def position(self) -> int:
        """The current position in the text."""
        return self._pos

    def length(self) -> int:
        """The length of the text."""
        return len(self._text)

    def remaining(self) -> int:
        """How many characters follow the one at the current position."""
        return len(self._text) - 1 - self._pos

    def rewind(self) -> None:
        """Go back to the beginning and clear the end flag."""
        self._pos = 0
        self._eos = False

    def seek(self, n: int) -> None:
        """Move to index n, which must lie within the text."""
        if n < 0 or n > len(self._text) - 1:
            raise ValueError(f"seek position {n} outside the text")
        self._pos = n
        self._eos = False

    def skip(self, n: int) -> None:
        """Move the position by n characters, forwards or backwards.

        Raises ValueError, leaving the position unchanged, if the move
        would leave the text.
        """
        target = self._pos + n
        if target < 0 or target > len(self._text):
            raise ValueError(f"skip of {n} moves outside the text")
        if n == 0:
            return
        self._pos = target
        self._eos = False

    def _char_at_pos(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def getc(self) -> str | None:
        """Return the next character and advance, or None at the end."""
        if self._eos:
            return None
        ch = self._char_at_pos()
        self._eos = ch is None
        self._pos += 1
        return ch

    def ungetc(self) -> str | None:
        """Step back one character and return the character now current."""
        if self._pos > 0:
            self._pos -= 1
            self._eos = False
        return self._char_at_pos()

    def peekc(self) -> str | None:
        """Return the next character without advancing, or None at the end."""
        if self._eos:
            return None
        return self._char_at_pos()

    def gets(self, size: int) -> str:
        """Read a line of at most size - 1 characters, like fgets.

        Reading stops after a newline, which is kept, or at the end of
        the text. Returns an empty string when nothing is left.
        """
        if size < 2:
            raise ValueError(f"line size {size} leaves no room for a character")
        if self._eos:
            return ""
        c = self.getc()
        if c is None:
            return ""
        room = size
        line: list[str] = []
        while c is not None and c != "\n" and room > 1:
            line.append(c)
            room -= 1
            c = self.getc()
        if c == "\n" and room > 1:
            line.append(c)
        else:
            self.ungetc()
        return "".join(line)