"""MD5 message digest computed in pure Python."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterator

__all__ = ["MD5", "md5_bytes", "md5_string", "md5_file"]

_MASK = 0xFFFFFFFF
_BLOCK = 64
_READ_SIZE = 1024

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_S = (
    7, 12, 17, 22, 7, 12, 17, 22,
    7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20,
    5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23,
    4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21,
    6, 10, 15, 21, 6, 10, 15, 21,
)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)


def _rotate_left(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    """Run the MD5 rounds over one 64-byte block."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i, (shift, k) in enumerate(zip(_S, _K)):
        round_no = i // 16
        if round_no == 0:
            e = (b & c) | (~b & d)
            j = i
        elif round_no == 1:
            e = (b & d) | (c & ~d)
            j = (i * 5 + 1) % 16
        elif round_no == 2:
            e = b ^ c ^ d
            j = (i * 3 + 5) % 16
        else:
            e = c ^ (b | ~d)
            j = (i * 7) % 16
        e &= _MASK
        a, d, c, b = d, c, b, (b + _rotate_left((a + e + k + words[j]) & _MASK, shift)) & _MASK
    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d)))  # type: ignore[return-value]


def _blocks(data: bytes) -> Iterator[bytes]:
    view = memoryview(data)
    for offset in range(0, len(data), _BLOCK):
        yield bytes(view[offset:offset + _BLOCK])


class MD5:
    """Incremental MD5 calculation: update with data, then finalize."""

    def __init__(self, data: bytes = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return the context to its initial, empty state."""
        self._state = _INITIAL_STATE
        self._size = 0
        self._pending = bytearray()
        self._digest: bytes | None = None

    def update(self, data: bytes) -> MD5:
        """Feed more input; full 64-byte blocks are processed at once."""
        if self._digest is not None:
            raise ValueError("md5 context already finalized; call reset() first")
        chunk = bytes(data)
        self._size += len(chunk)
        self._pending += chunk
        full = len(self._pending) - len(self._pending) % _BLOCK
        for block in _blocks(bytes(self._pending[:full])):
            self._state = _compress(self._state, block)
        del self._pending[:full]
        return self

    def finalize(self) -> bytes:
        """Pad the input, append its bit length and return the digest."""
        if self._digest is None:
            used = len(self._pending)
            pad_length = 56 - used if used < 56 else 120 - used
            bit_length = (self._size * 8) & 0xFFFFFFFFFFFFFFFF
            tail = (
                bytes(self._pending)
                + b"\x80"
                + bytes(pad_length - 1)
                + struct.pack("<Q", bit_length)
            )
            for block in _blocks(tail):
                self._state = _compress(self._state, block)
            self._pending.clear()
            self._digest = struct.pack("<4I", *self._state)
        return self._digest

    def digest(self) -> bytes:
        """The 16-byte digest; available once finalize() has run."""
        if self._digest is None:
            raise ValueError("md5 context not finalized")
        return self._digest

    def hexdigest(self) -> str:
        """The digest as 32 lower-case hexadecimal characters."""
        return self.digest().hex()


def md5_bytes(data: bytes) -> bytes:
    """Digest of a block of bytes."""
    ctx = MD5(data)
    return ctx.finalize()


def md5_string(text: str) -> bytes:
    """Digest of a string's UTF-8 encoding, up to any NUL character."""
    return md5_bytes(text.split("\0", 1)[0].encode("utf-8"))


def md5_file(file: BinaryIO) -> bytes:
    """Digest of a binary stream read from its current position to the end."""
    ctx = MD5()
    for chunk in iter(lambda: file.read(_READ_SIZE), b""):
        ctx.update(chunk)
    return ctx.finalize()