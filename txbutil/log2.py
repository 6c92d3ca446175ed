"""Integer base-2 logarithm of 32-bit unsigned values."""

__all__ = ["uint32_log2"]

_UINT32_MAX = 0xFFFFFFFF

# The lookup-table formulation stores -1 for zero in an unsigned byte,
# so the logarithm of zero comes back as this value.
_LOG2_OF_ZERO = 0xFF


def uint32_log2(v: int) -> int:
    """Return floor(log2(v)) for a 32-bit unsigned integer.

    Zero has no logarithm; it yields 255, the unsigned byte form of -1.
    Values outside the 32-bit unsigned range raise ValueError.
    """
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"expected an int, got {type(v).__name__}")
    if v < 0 or v > _UINT32_MAX:
        raise ValueError(f"{v} is not a 32-bit unsigned integer")
    if v == 0:
        return _LOG2_OF_ZERO
    return v.bit_length() - 1