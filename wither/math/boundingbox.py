"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass

from wither.math.functions import squared_magnitude
from wither.math.position import WorldPosition
from wither.math.vector import Vector3


@dataclass(frozen=True)
class BoundingBoxSize:
    width: float
    height: float


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float

    @classmethod
    def from_size(cls, size: BoundingBoxSize) -> BoundingBox:
        """A box of the given size standing at the origin."""
        return cls.from_pos(0.0, 0.0, 0.0, size)

    @classmethod
    def from_pos(cls, x: float, y: float, z: float, size: BoundingBoxSize) -> BoundingBox:
        """A box centred on ``x``/``z`` with its bottom at ``y``."""
        half = size.width / 2.0
        return cls(x - half, y, z - half, x + half, y + size.height, z + half)

    @classmethod
    def from_vectors(cls, minimum: Vector3, maximum: Vector3) -> BoundingBox:
        return cls(minimum.x, minimum.y, minimum.z, maximum.x, maximum.y, maximum.z)

    @classmethod
    def from_block(cls, position: WorldPosition) -> BoundingBox:
        """The unit cube occupied by a block."""
        x, y, z = float(position.x), float(position.y), float(position.z)
        return cls(x, y, z, x + 1.0, y + 1.0, z + 1.0)

    def intersects(self, other: BoundingBox) -> bool:
        return (
            self.min_x < other.max_x
            and self.max_x > other.min_x
            and self.min_y < other.max_y
            and self.max_y > other.min_y
            and self.min_z < other.max_z
            and self.max_z > other.min_z
        )

    def squared_magnitude(self, pos: Vector3) -> float:
        """Squared distance from ``pos`` to the nearest point of the box."""
        dx = max(self.min_x - pos.x, pos.x - self.max_x, 0.0)
        dy = max(self.min_y - pos.y, pos.y - self.max_y, 0.0)
        dz = max(self.min_z - pos.z, pos.z - self.max_z, 0.0)
        return squared_magnitude(dx, dy, dz)