"""Block faces and their offsets."""

from __future__ import annotations

from enum import IntEnum

from wither.math.vector import Vector3


class InvalidBlockFace(ValueError):
    """Raised for a number that does not name a block face."""


class BlockFace(IntEnum):
    BOTTOM = 0
    TOP = 1
    NORTH = 2
    SOUTH = 3
    WEST = 4
    EAST = 5

    @classmethod
    def from_int(cls, value: int) -> BlockFace:
        try:
            return cls(value)
        except ValueError:
            raise InvalidBlockFace(f"invalid block face: {value!r}") from None

    def to_offset(self) -> Vector3:
        """The unit step towards the neighbouring block on this face."""
        return Vector3(*_OFFSETS[self])


_OFFSETS = {
    BlockFace.BOTTOM: (0, -1, 0),
    BlockFace.TOP: (0, 1, 0),
    BlockFace.NORTH: (0, 0, -1),
    BlockFace.SOUTH: (0, 0, 1),
    BlockFace.WEST: (-1, 0, 0),
    BlockFace.EAST: (1, 0, 0),
}