"""Building blocks for a block-game server: math, text and world types."""

__version__ = "0.1.0"