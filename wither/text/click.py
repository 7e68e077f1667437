"""Actions triggered when a player clicks on a piece of text."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


class ClickAction(str, Enum):
    """The kind of action a click triggers."""

    OPEN_URL = "open_url"
    OPEN_FILE = "open_file"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


@dataclass(frozen=True)
class ClickEvent:
    """A click action with its value.

    ``CHANGE_PAGE`` takes a page number (indexing starts at 1); every other
    action takes a string: a URL, a file, a command or clipboard text.
    """

    action: ClickAction
    value: Union[str, int]

    def __post_init__(self) -> None:
        action = ClickAction(self.action)
        object.__setattr__(self, "action", action)
        if action is ClickAction.CHANGE_PAGE:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError("change_page needs an integer page number")
            if not _I32_MIN <= self.value <= _I32_MAX:
                raise ValueError(f"page number out of range: {self.value}")
        elif not isinstance(self.value, str):
            raise ValueError(f"{action.value} needs a string value")

    def to_dict(self) -> dict[str, Any]:
        return {"action": self.action.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClickEvent:
        if not isinstance(data, Mapping):
            raise ValueError("click event must be a mapping")
        if "action" not in data:
            raise ValueError("click event is missing 'action'")
        if "value" not in data:
            raise ValueError("click event is missing 'value'")
        return cls(data["action"], data["value"])