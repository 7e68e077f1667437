"""Operator permission levels."""

from __future__ import annotations

from enum import IntEnum


class PermissionLevel(IntEnum):
    """A player's permission level; higher levels grant more commands.

    ZERO: normal player; ONE: moderator, may bypass spawn protection;
    TWO: gamemaster, may use more commands and command blocks;
    THREE: admin, multiplayer management; FOUR: owner, all commands.
    ZERO is the default.
    """

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4

    @classmethod
    def from_value(cls, value: int) -> PermissionLevel:
        """Decode a stored op level; only 0, 2, 3 and 4 are accepted."""
        if value not in _STORED_LEVELS:
            raise ValueError(f"Invalid value for OpLevel: {value}")
        return cls(value)


_STORED_LEVELS = frozenset({0, 2, 3, 4})