"""Block positions and their packed 64-bit wire form."""

from __future__ import annotations

from dataclasses import dataclass

from wither.math.vector import Vector2, Vector3

_MASK_26 = 0x3FFFFFF
_MASK_12 = 0xFFF
_MASK_64 = (1 << 64) - 1


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


@dataclass(frozen=True)
class WorldPosition:
    """Integer position of a block in the world."""

    x: int
    y: int
    z: int

    def chunk_and_chunk_relative_position(self) -> tuple[Vector2, Vector3]:
        """Split into chunk coordinates and the block position inside that chunk."""
        x_chunk, x_rem = divmod(self.x, 16)
        z_chunk, z_rem = divmod(self.z, 16)
        return Vector2(x_chunk, z_chunk), Vector3(x_rem, self.y, z_rem)

    def to_long(self) -> int:
        """Pack into a signed 64-bit integer: 26 bits x, 26 bits z, 12 bits y."""
        packed = (
            ((self.x & _MASK_26) << 38)
            | ((self.z & _MASK_26) << 12)
            | (self.y & _MASK_12)
        )
        return _to_signed(packed, 64)

    @classmethod
    def from_long(cls, value: int) -> WorldPosition:
        """Unpack a position produced by :meth:`to_long`."""
        value = _to_signed(value & _MASK_64, 64)
        x = value >> 38
        y = _to_signed(value, 12)
        z = _to_signed(value >> 12, 26)
        return cls(x, y, z)

    def __str__(self) -> str:
        return f"{self.x}, {self.y}, {self.z}"