"""World height limits and block coordinates in world and chunk space."""

from __future__ import annotations

from dataclasses import dataclass

from wither.math.vector import Vector2, Vector3

WORLD_HEIGHT = 384
WORLD_LOWEST_Y = -64
WORLD_MAX_Y = WORLD_HEIGHT - abs(WORLD_LOWEST_Y)
DIRECT_PALETTE_BITS = 15

CHUNK_WIDTH = 16


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True, order=True)
class Height:
    """A block height between ``WORLD_LOWEST_Y`` and ``WORLD_MAX_Y`` inclusive."""

    value: int

    def __post_init__(self) -> None:
        _require_int("height", self.value)
        if not WORLD_LOWEST_Y <= self.value <= WORLD_MAX_Y:
            raise ValueError(
                f"height {self.value} outside {WORLD_LOWEST_Y}..={WORLD_MAX_Y}"
            )

    @classmethod
    def from_absolute(cls, height: int) -> Height:
        """The height for an absolute value counted from the bottom of the world."""
        return cls(_require_int("absolute height", height) - abs(WORLD_LOWEST_Y))

    def absolute(self) -> int:
        """The height counted from the bottom of the world, in ``0..WORLD_HEIGHT``."""
        return self.value + abs(WORLD_LOWEST_Y)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class ChunkRelativeOffset:
    """A horizontal block offset inside a chunk, in ``0..16``."""

    value: int

    def __post_init__(self) -> None:
        _require_int("offset", self.value)
        if not 0 <= self.value < CHUNK_WIDTH:
            raise ValueError(f"chunk offset {self.value} outside 0..{CHUNK_WIDTH}")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BlockCoordinates:
    x: int
    y: Height
    z: int


@dataclass(frozen=True)
class XZBlockCoordinates:
    """Block coordinates that do not specify a height."""

    x: int
    z: int

    def with_y(self, height: Height) -> BlockCoordinates:
        return BlockCoordinates(self.x, height, self.z)


@dataclass(frozen=True)
class ChunkRelativeBlockCoordinates:
    """Coordinates of a block relative to its chunk."""

    x: ChunkRelativeOffset
    y: Height
    z: ChunkRelativeOffset

    def with_chunk_coordinates(self, chunk_coordinates: Vector2) -> BlockCoordinates:
        """World coordinates of this block inside the given chunk."""
        return BlockCoordinates(
            self.x.value + chunk_coordinates.x * CHUNK_WIDTH,
            self.y,
            self.z.value + chunk_coordinates.z * CHUNK_WIDTH,
        )

    @classmethod
    def from_vector(cls, vector: Vector3) -> ChunkRelativeBlockCoordinates:
        """Build from a vector whose ``x`` and ``z`` lie inside a chunk."""
        x = _require_int("x", vector.x) & 0xFF
        z = _require_int("z", vector.z) & 0xFF
        return cls(ChunkRelativeOffset(x), Height(vector.y), ChunkRelativeOffset(z))


@dataclass(frozen=True)
class ChunkRelativeXZBlockCoordinates:
    x: ChunkRelativeOffset
    z: ChunkRelativeOffset

    def with_chunk_coordinates(self, chunk_coordinates: Vector2) -> XZBlockCoordinates:
        return XZBlockCoordinates(
            self.x.value + chunk_coordinates.x * CHUNK_WIDTH,
            self.z.value + chunk_coordinates.z * CHUNK_WIDTH,
        )

    def with_y(self, height: Height) -> ChunkRelativeBlockCoordinates:
        return ChunkRelativeBlockCoordinates(self.x, height, self.z)