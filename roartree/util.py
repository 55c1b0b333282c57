"""Helpers for splitting 64-bit values and normalising ranges."""

from __future__ import annotations

U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


class NonSortedIntegers(ValueError):
    """Raised when values appended to a set are not strictly increasing."""

    def __init__(self, valid_until):
        super().__init__(
            f"integers are not sorted or are not above the current maximum "
            f"(valid until index {valid_until})"
        )
        self.valid_until = valid_until


def _check_u64(value, name="value"):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} {value} is outside the unsigned 64-bit range")
    return value


def _check_u32(value, name="value"):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{name} {value} is outside the unsigned 32-bit range")
    return value


def split(value):
    """Split a 64-bit value into its high and low 32-bit halves."""
    _check_u64(value)
    return value >> 32, value & U32_MAX


def join(high, low):
    """Join high and low 32-bit halves into a 64-bit value."""
    _check_u32(high, "high")
    _check_u32(low, "low")
    return (high << 32) | low


def convert_range_to_inclusive(start=None, end=None, end_inclusive=False):
    """Turn a range into an inclusive ``(start, end)`` pair, or None if it is empty.

    ``start`` is inclusive and defaults to 0; ``end`` is exclusive unless
    ``end_inclusive`` is set, and defaults to the largest 64-bit value.
    """
    first = 0 if start is None else _check_u64(start, "start")
    if end is None:
        last = U64_MAX
    else:
        _check_u64(end, "end")
        if end_inclusive:
            last = end
        elif end == 0:
            return None
        else:
            last = end - 1
    if last < first:
        return None
    return first, last