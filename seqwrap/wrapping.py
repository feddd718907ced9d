"""32-bit wrapping sequence numbers and their 64-bit absolute counterparts."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WrappingInt32", "wrap", "unwrap"]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_SPAN32 = 1 << 32


def _check_uint64(value: int, name: str) -> None:
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")


@dataclass(frozen=True, order=False)
class WrappingInt32:
    """A 32-bit integer expressed relative to an arbitrary initial sequence number."""

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int):
            raise TypeError(f"raw_value must be an int, got {type(self.raw_value).__name__}")
        if not 0 <= self.raw_value <= _MASK32:
            raise ValueError(f"raw_value must fit in 32 unsigned bits, got {self.raw_value}")

    def __add__(self, other: int) -> WrappingInt32:
        """The point ``other`` steps past this one, modulo 2**32."""
        if not isinstance(other, int) or isinstance(other, WrappingInt32):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) & _MASK32)

    def __radd__(self, other: int) -> WrappingInt32:
        return self.__add__(other)

    def __sub__(self, other: int | WrappingInt32) -> int | WrappingInt32:
        """Offset to another WrappingInt32 (signed 32-bit), or the point ``other`` steps before."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _SPAN32 if diff >= 1 << 31 else diff
        if isinstance(other, int):
            return WrappingInt32((self.raw_value - other) & _MASK32)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a relative 32-bit one."""
    _check_uint64(n, "n")
    return isn + (n & _MASK32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` and lies closest to ``checkpoint``."""
    _check_uint64(checkpoint, "checkpoint")
    lower = (n.raw_value - isn.raw_value) & _MASK32
    if checkpoint <= lower:
        return lower
    upper = ((checkpoint - lower) & _MASK64) >> 32
    low = ((upper << 32) | lower) & _MASK64
    high = (((upper + 1) << 32) | lower) & _MASK64
    if (checkpoint - low) & _MASK64 >= (high - checkpoint) & _MASK64:
        return high
    return low