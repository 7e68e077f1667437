"""Player game modes."""

from __future__ import annotations

from enum import IntEnum


class ParseGameModeError(ValueError):
    """Raised when a string does not name a game mode."""


class GameMode(IntEnum):
    UNDEFINED = -1
    SURVIVAL = 0
    CREATIVE = 1
    ADVENTURE = 2
    SPECTATOR = 3

    @classmethod
    def from_int(cls, value: int) -> GameMode:
        """The mode with id ``value``; unknown ids give ``UNDEFINED``."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNDEFINED

    @classmethod
    def parse(cls, text: str) -> GameMode:
        """Parse a lower-case mode name such as ``"creative"``."""
        try:
            return _BY_NAME[text]
        except KeyError:
            raise ParseGameModeError(f"unknown game mode: {text!r}") from None


_BY_NAME = {
    "survival": GameMode.SURVIVAL,
    "creative": GameMode.CREATIVE,
    "adventure": GameMode.ADVENTURE,
    "spectator": GameMode.SPECTATOR,
}