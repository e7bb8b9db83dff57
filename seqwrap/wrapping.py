"""32-bit wrapping sequence numbers and their 64-bit absolute counterparts."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MAX64 = (1 << 64) - 1

__all__ = ["WrappingInt32", "wrap", "unwrap"]


def _to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a signed 32-bit integer."""
    value &= _MASK32
    return value - _MOD32 if value >= (1 << 31) else value


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer relative to an arbitrary initial sequence number."""

    raw_value: int

    def __post_init__(self) -> None:
        if isinstance(self.raw_value, bool) or not isinstance(self.raw_value, int):
            raise TypeError("raw_value must be an int")
        if not 0 <= self.raw_value <= _MASK32:
            raise ValueError(f"raw_value {self.raw_value} does not fit in 32 bits")

    def __add__(self, other: object) -> WrappingInt32:
        """Step ``other`` positions past this point, wrapping at 2**32."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) & _MASK32)

    def __sub__(self, other: object):
        """Signed offset to another ``WrappingInt32``, or step back by an int.

        The offset is the number of increments needed to get from ``other``
        to ``self``, negative when decrementing takes no more steps.
        """
        if isinstance(other, WrappingInt32):
            return _to_int32(self.raw_value - other.raw_value)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value - other) & _MASK32)

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute zero-indexed sequence number into a ``WrappingInt32``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an int")
    if not 0 <= n <= _MAX64:
        raise ValueError(f"absolute sequence number {n} does not fit in 64 bits")
    return isn + (n & _MASK32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` closest to ``checkpoint``.

    When two candidates are equally close, the larger one is returned.
    """
    if isinstance(checkpoint, bool) or not isinstance(checkpoint, int):
        raise TypeError("checkpoint must be an int")
    if not 0 <= checkpoint <= _MAX64:
        raise ValueError(f"checkpoint {checkpoint} does not fit in 64 bits")

    offset = (n.raw_value - isn.raw_value) & _MASK32
    if offset >= checkpoint:
        return offset

    above = offset | ((checkpoint >> 32) << 32)
    while above <= checkpoint:
        above += _MOD32
    below = above - _MOD32

    if above > _MAX64 or checkpoint - below < above - checkpoint:
        return below
    return above