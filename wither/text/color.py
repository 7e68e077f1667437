"""Text colours: named palette colours, RGB colours and console rendering."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

_RESET = "\x1b[0m"


def _paint(text: str, codes: str) -> str:
    """Wrap ``text`` in an ANSI SGR sequence, re-applying it after inner resets."""
    style = f"\x1b[{codes}m"
    inner = text.replace(_RESET, _RESET + style)
    return f"{style}{inner}{_RESET}"


def _check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..=255, got {value!r}")


class NamedColor(IntEnum):
    """One of the sixteen named text colours."""

    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_AQUA = 3
    DARK_RED = 4
    DARK_PURPLE = 5
    GOLD = 6
    GRAY = 7
    DARK_GRAY = 8
    BLUE = 9
    GREEN = 10
    AQUA = 11
    RED = 12
    LIGHT_PURPLE = 13
    YELLOW = 14
    WHITE = 15

    @property
    def json_name(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, text: str) -> NamedColor:
        """Parse a snake_case colour name such as ``"dark_blue"``."""
        try:
            return _NAMED_BY_JSON[text]
        except (KeyError, TypeError):
            raise ValueError("Invalid named color") from None


_NAMED_BY_JSON = {color.json_name: color for color in NamedColor}

_NAMED_ANSI = {
    NamedColor.BLACK: "30",
    NamedColor.DARK_BLUE: "34",
    NamedColor.DARK_GREEN: "32",
    NamedColor.DARK_AQUA: "36",
    NamedColor.DARK_RED: "31",
    NamedColor.DARK_PURPLE: "35",
    NamedColor.GOLD: "33",
    NamedColor.GRAY: "90",
    NamedColor.DARK_GRAY: "90",
    NamedColor.BLUE: "94",
    NamedColor.GREEN: "92",
    NamedColor.AQUA: "36",
    NamedColor.RED: "31",
    NamedColor.LIGHT_PURPLE: "95",
    NamedColor.YELLOW: "93",
    NamedColor.WHITE: "37",
}


@dataclass(frozen=True)
class RGBColor:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)

    def to_json(self) -> str:
        """The colour as ``#RRGGBB`` with upper-case hex digits."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


@dataclass(frozen=True)
class ARGBColor:
    alpha: int
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte("alpha", self.alpha)
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)

    def to_bytes(self) -> bytes:
        return bytes((self.alpha, self.red, self.green, self.blue))


def _hex_component(part: str, label: str) -> int:
    if len(part) != 2 or any(char not in string.hexdigits for char in part):
        raise ValueError(f"Invalid {label} component in hex color")
    return int(part, 16)


@dataclass(frozen=True)
class Color:
    """A text colour: reset (``value`` is None), an RGB colour or a named colour."""

    value: Union[RGBColor, NamedColor, None] = None

    def __post_init__(self) -> None:
        if self.value is not None and not isinstance(self.value, (RGBColor, NamedColor)):
            raise ValueError(f"not a colour: {self.value!r}")

    @classmethod
    def reset(cls) -> Color:
        """The context-dependent default colour."""
        return cls(None)

    @classmethod
    def named(cls, color: NamedColor) -> Color:
        return cls(NamedColor(color))

    @classmethod
    def rgb(cls, color: RGBColor) -> Color:
        return cls(color)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``"reset"``, ``"#RRGGBB"`` or a colour name."""
        if not isinstance(text, str):
            raise ValueError("colour must be a string")
        if text == "reset":
            return cls.reset()
        if text.startswith("#"):
            if len(text) != 7:
                raise ValueError("Hex color must be in the format '#RRGGBB'")
            hex_digits = text[1:]
            red = _hex_component(hex_digits[0:2], "red")
            green = _hex_component(hex_digits[2:4], "green")
            blue = _hex_component(hex_digits[4:6], "blue")
            return cls.rgb(RGBColor(red, green, blue))
        return cls.named(NamedColor.parse(text))

    def to_json(self) -> str:
        if self.value is None:
            return "reset"
        if isinstance(self.value, RGBColor):
            return self.value.to_json()
        return self.value.json_name

    def console_color(self, text: str) -> str:
        """``text`` coloured with ANSI escape sequences for a terminal."""
        if self.value is None:
            return text
        if isinstance(self.value, RGBColor):
            color = self.value
            return _paint(text, f"38;2;{color.red};{color.green};{color.blue}")
        return _paint(text, _NAMED_ANSI[self.value])