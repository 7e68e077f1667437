"""Two- and three-component vectors used for positions, offsets and motion."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Iterable, Union

Number = Union[int, float]

_PACK_FORMATS = {
    "f32": ">3f",
    "f64": ">3d",
    "i16": ">3h",
}


@dataclass(frozen=True)
class Vector2:
    """A horizontal vector with ``x`` and ``z`` components."""

    x: Number = 0
    z: Number = 0

    def length_squared(self) -> Number:
        return self.x * self.x + self.z * self.z

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.z + other.z)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.z - other.z)

    def multiply(self, x: Number, z: Number) -> Vector2:
        return Vector2(self.x * x, self.z * z)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector2:
        length = self.length()
        return Vector2(self.x / length, self.z / length)

    @classmethod
    def from_vector3(cls, vector: Vector3) -> Vector2:
        """Drop the ``y`` component of a three-component vector."""
        return cls(vector.x, vector.z)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: Number) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.z * scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.z)


@dataclass(frozen=True)
class Vector3:
    """A vector with ``x``, ``y`` and ``z`` components."""

    x: Number = 0
    y: Number = 0
    z: Number = 0

    def length_squared(self) -> Number:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, x: Number, y: Number, z: Number) -> Vector3:
        return Vector3(self.x * x, self.y * y, self.z * z)

    def squared_distance_to_vec(self, other: Vector3) -> Number:
        return self.squared_distance_to(other.x, other.y, other.z)

    def squared_distance_to(self, x: Number, y: Number, z: Number) -> Number:
        dx = self.x - x
        dy = self.y - y
        dz = self.z - z
        return dx * dx + dy * dy + dz * dz

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector3:
        length = self.length()
        return Vector3(self.x / length, self.y / length, self.z / length)

    def as_tuple(self) -> tuple[Number, Number, Number]:
        return (self.x, self.y, self.z)

    def pack(self, kind: str) -> bytes:
        """Encode the components big-endian as ``"f32"``, ``"f64"`` or ``"i16"``."""
        try:
            fmt = _PACK_FORMATS[kind]
        except KeyError:
            raise ValueError(f"unknown vector encoding: {kind!r}") from None
        try:
            return struct.pack(fmt, self.x, self.y, self.z)
        except struct.error as exc:
            raise ValueError(f"cannot encode {self} as {kind}: {exc}") from exc

    @classmethod
    def from_sequence(cls, values: Iterable[Number]) -> Vector3:
        """Build a vector from the first three numbers of a sequence."""
        iterator = iter(values)
        components = []
        for _ in range(3):
            try:
                components.append(float(next(iterator)))
            except StopIteration:
                raise ValueError("Failed to read Vector3: need three components") from None
        return cls(*components)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: Number) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)