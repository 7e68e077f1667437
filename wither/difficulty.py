"""World difficulty and profile actions."""

from __future__ import annotations

from enum import Enum


class Difficulty(Enum):
    PEACEFUL = "Peaceful"
    EASY = "Easy"
    NORMAL = "Normal"
    HARD = "Hard"


class ProfileAction(str, Enum):
    """Actions the account service may require of a player's profile."""

    FORCED_NAME_CHANGE = "FORCED_NAME_CHANGE"
    USING_BANNED_SKIN = "USING_BANNED_SKIN"