"""The set of chunks within a player's view distance."""

from __future__ import annotations

from dataclasses import dataclass

from wither.math.vector import Vector2


@dataclass(frozen=True)
class Cylindrical:
    """Chunks within ``view_distance`` of ``center`` (a non-zero byte)."""

    center: Vector2
    view_distance: int

    def __post_init__(self) -> None:
        distance = self.view_distance
        if isinstance(distance, bool) or not isinstance(distance, int) or not 1 <= distance <= 255:
            raise ValueError(f"view distance must be in 1..=255, got {distance!r}")

    def left(self) -> int:
        return self.center.x - self.view_distance - 1

    def bottom(self) -> int:
        return self.center.z - self.view_distance - 1

    def right(self) -> int:
        return self.center.x + self.view_distance + 1

    def top(self) -> int:
        return self.center.z + self.view_distance + 1

    def is_within_distance(self, x: int, z: int) -> bool:
        rel_x = max(abs(x - self.center.x) - 1, 0)
        rel_z = max(abs(z - self.center.z) - 1, 0)
        max_leg = max(max(rel_x, rel_z) - 1, 0)
        min_leg = min(rel_x, rel_z)
        return max_leg * max_leg + min_leg * min_leg < self.view_distance * self.view_distance

    def all_chunks_within(self) -> list[Vector2]:
        """Every chunk inside the cylinder, ordered by ``x`` then ``z``."""
        return [
            Vector2(x, z)
            for x in range(self.left(), self.right() + 1)
            for z in range(self.bottom(), self.top() + 1)
            if self.is_within_distance(x, z)
        ]


def changed_chunks(old: Cylindrical, new: Cylindrical) -> tuple[list[Vector2], list[Vector2]]:
    """Chunks newly included by ``new`` and chunks of ``old`` that it drops."""
    newly_included = [
        chunk for chunk in new.all_chunks_within() if not old.is_within_distance(chunk.x, chunk.z)
    ]
    just_removed = [
        chunk for chunk in old.all_chunks_within() if not new.is_within_distance(chunk.x, chunk.z)
    ]
    return newly_included, just_removed