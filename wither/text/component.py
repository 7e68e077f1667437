"""Rich text components: content, style, hover events and console rendering."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from wither.text.click import ClickAction, ClickEvent
from wither.text.color import ARGBColor, Color, NamedColor, RGBColor, _paint


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping")
    return data


def _require_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _optional_bool(data: Mapping[str, Any], key: str) -> Optional[bool]:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


# Hover events


@dataclass(frozen=True)
class ShowText:
    """Displays a tooltip with the given text."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"action": "show_text", "contents": self.text}


@dataclass(frozen=True)
class ShowItem:
    """Shows an item: its identifier, stack size and sNBT tag."""

    id: str
    tag: str
    count: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": "show_item",
            "contents": {"id": self.id, "count": self.count, "tag": self.tag},
        }


@dataclass(frozen=True)
class ShowEntity:
    """Shows an entity: its UUID, optional type identifier and optional name."""

    id: uuid.UUID
    kind: Optional[str] = None
    name: Optional[TextComponent] = None

    def to_dict(self) -> dict[str, Any]:
        contents: dict[str, Any] = {"id": str(self.id)}
        if self.kind is not None:
            contents["type"] = self.kind
        if self.name is not None:
            contents["name"] = self.name.to_dict()
        return {"action": "show_entity", "contents": contents}


HoverEvent = Union[ShowText, ShowItem, ShowEntity]


def hover_event_from_dict(data: Mapping[str, Any]) -> HoverEvent:
    """Decode a hover event from its ``action``/``contents`` form."""
    data = _require_mapping(data, "hover event")
    action = _require_str(data, "action")
    if "contents" not in data:
        raise ValueError("hover event is missing 'contents'")
    contents = data["contents"]
    if action == "show_text":
        if not isinstance(contents, str):
            raise ValueError("show_text contents must be a string")
        return ShowText(contents)
    if action == "show_item":
        contents = _require_mapping(contents, "show_item contents")
        count = contents.get("count")
        if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
            raise ValueError("item count must be an integer")
        return ShowItem(
            id=_require_str(contents, "id"), tag=_require_str(contents, "tag"), count=count
        )
    if action == "show_entity":
        contents = _require_mapping(contents, "show_entity contents")
        entity_id = uuid.UUID(_require_str(contents, "id"))
        name = contents.get("name")
        return ShowEntity(
            id=entity_id,
            kind=_optional_str(contents, "type"),
            name=None if name is None else TextComponent.from_dict(name),
        )
    raise ValueError(f"unknown hover action: {action!r}")


# Style


def _shadow_from_data(value: Any) -> ARGBColor:
    if isinstance(value, Mapping):
        try:
            return ARGBColor(value["alpha"], value["red"], value["green"], value["blue"])
        except KeyError as exc:
            raise ValueError(f"shadow colour is missing {exc.args[0]!r}") from None
    if isinstance(value, (list, tuple, bytes)) and len(value) == 4:
        return ARGBColor(*value)
    raise ValueError("shadow colour must be four bytes")


@dataclass(frozen=True)
class Style:
    """How text is rendered and how it reacts to clicks and hovering."""

    color: Optional[Color] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underlined: Optional[bool] = None
    strikethrough: Optional[bool] = None
    obfuscated: Optional[bool] = None
    insertion: Optional[str] = None
    click_event: Optional[ClickEvent] = None
    hover_event: Optional[HoverEvent] = None
    font: Optional[str] = None
    shadow_color: Optional[ARGBColor] = None

    def with_color(self, color: Color) -> Style:
        return replace(self, color=color)

    def with_named_color(self, color: NamedColor) -> Style:
        return replace(self, color=Color.named(color))

    def with_bold(self) -> Style:
        return replace(self, bold=True)

    def with_italic(self) -> Style:
        return replace(self, italic=True)

    def with_underlined(self) -> Style:
        return replace(self, underlined=True)

    def with_strikethrough(self) -> Style:
        return replace(self, strikethrough=True)

    def with_obfuscated(self) -> Style:
        return replace(self, obfuscated=True)

    def with_insertion(self, text: str) -> Style:
        """Text inserted into the chat input when shift-clicked."""
        return replace(self, insertion=text)

    def with_click_event(self, event: ClickEvent) -> Style:
        return replace(self, click_event=event)

    def with_hover_event(self, event: HoverEvent) -> Style:
        return replace(self, hover_event=event)

    def with_font(self, identifier: str) -> Style:
        return replace(self, font=identifier)

    def with_shadow_color(self, color: ARGBColor) -> Style:
        return replace(self, shadow_color=color)

    def to_dict(self) -> dict[str, Any]:
        """The fields that are set, keyed by their wire names."""
        result: dict[str, Any] = {}
        if self.color is not None:
            result["color"] = self.color.to_json()
        for key, value in (
            ("bold", self.bold),
            ("italic", self.italic),
            ("underlined", self.underlined),
            ("strikethrough", self.strikethrough),
            ("obfuscated", self.obfuscated),
            ("insertion", self.insertion),
        ):
            if value is not None:
                result[key] = value
        if self.click_event is not None:
            result["clickEvent"] = self.click_event.to_dict()
        if self.hover_event is not None:
            result["hoverEvent"] = self.hover_event.to_dict()
        if self.font is not None:
            result["font"] = self.font
        if self.shadow_color is not None:
            result["shadow_color"] = list(self.shadow_color.to_bytes())
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Style:
        """Read the style fields of a mapping, ignoring any other keys."""
        data = _require_mapping(data, "style")
        color = data.get("color")
        click = data.get("clickEvent")
        hover = data.get("hoverEvent")
        shadow = data.get("shadow_color")
        return cls(
            color=None if color is None else Color.parse(color),
            bold=_optional_bool(data, "bold"),
            italic=_optional_bool(data, "italic"),
            underlined=_optional_bool(data, "underlined"),
            strikethrough=_optional_bool(data, "strikethrough"),
            obfuscated=_optional_bool(data, "obfuscated"),
            insertion=_optional_str(data, "insertion"),
            click_event=None if click is None else ClickEvent.from_dict(click),
            hover_event=None if hover is None else hover_event_from_dict(hover),
            font=_optional_str(data, "font"),
            shadow_color=None if shadow is None else _shadow_from_data(shadow),
        )


# Content


@dataclass(frozen=True)
class Text:
    """Raw text."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class Translate:
    """A translation key with its arguments."""

    translate: str
    with_: tuple[TextComponent, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"translate": self.translate}
        if self.with_:
            result["with"] = [argument.to_dict() for argument in self.with_]
        return result


@dataclass(frozen=True)
class EntityNames:
    """The names of the entities found by a selector."""

    selector: str
    separator: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"selector": self.selector}
        if self.separator is not None:
            result["separator"] = self.separator
        return result


@dataclass(frozen=True)
class Keybind:
    """A keybind identifier, shown as the key the player bound it to."""

    keybind: str

    def to_dict(self) -> dict[str, Any]:
        return {"keybind": self.keybind}


Content = Union[Text, Translate, EntityNames, Keybind]


def content_from_dict(data: Mapping[str, Any]) -> Content:
    """Pick the content kind from the keys present, in a fixed order."""
    data = _require_mapping(data, "text content")
    if isinstance(data.get("text"), str):
        return Text(data["text"])
    if isinstance(data.get("translate"), str):
        arguments = data.get("with") or []
        if not isinstance(arguments, list):
            raise ValueError("'with' must be a list")
        return Translate(
            data["translate"], tuple(TextComponent.from_dict(arg) for arg in arguments)
        )
    if isinstance(data.get("selector"), str):
        return EntityNames(data["selector"], _optional_str(data, "separator"))
    if isinstance(data.get("keybind"), str):
        return Keybind(data["keybind"])
    raise ValueError("no text, translate, selector or keybind content found")


def _plain_text(content: Content) -> str:
    match content:
        case Text(text=text):
            return text
        case Translate(translate=key):
            return key
        case EntityNames(selector=selector):
            return selector
        case Keybind(keybind=keybind):
            return keybind
    raise TypeError(f"unknown content: {content!r}")


@dataclass(frozen=True)
class TextComponent:
    """A piece of content with a style and child components."""

    content: Content
    style: Style = field(default_factory=Style)
    extra: tuple[TextComponent, ...] = ()

    @classmethod
    def text(cls, plain: str) -> TextComponent:
        return cls(Text(plain))

    def add_child(self, child: TextComponent) -> TextComponent:
        return replace(self, extra=self.extra + (child,))

    def to_pretty_console(self) -> str:
        """Render for a terminal with ANSI colours, styles and hyperlinks."""
        style = self.style
        text = _plain_text(self.content)
        if style.color is not None:
            text = style.color.console_color(text)
        if style.bold is not None:
            text = _paint(text, "1")
        if style.italic is not None:
            text = _paint(text, "3")
        if style.underlined is not None:
            text = _paint(text, "4")
        if style.strikethrough is not None:
            text = _paint(text, "9")
        click = style.click_event
        if click is not None and click.action is ClickAction.OPEN_URL:
            text = f"\x1b]8;;{click.value}\x1b\\{text}\x1b]8;;\x1b\\"
        return text + "".join(child.to_pretty_console() for child in self.extra)

    def _with_style(self, style: Style) -> TextComponent:
        return replace(self, style=style)

    def with_color(self, color: Color) -> TextComponent:
        return self._with_style(self.style.with_color(color))

    def with_named_color(self, color: NamedColor) -> TextComponent:
        return self._with_style(self.style.with_named_color(color))

    def with_rgb_color(self, color: RGBColor) -> TextComponent:
        return self._with_style(self.style.with_color(Color.rgb(color)))

    def with_bold(self) -> TextComponent:
        return self._with_style(self.style.with_bold())

    def with_italic(self) -> TextComponent:
        return self._with_style(self.style.with_italic())

    def with_underlined(self) -> TextComponent:
        return self._with_style(self.style.with_underlined())

    def with_strikethrough(self) -> TextComponent:
        return self._with_style(self.style.with_strikethrough())

    def with_obfuscated(self) -> TextComponent:
        return self._with_style(self.style.with_obfuscated())

    def with_insertion(self, text: str) -> TextComponent:
        return self._with_style(self.style.with_insertion(text))

    def with_click_event(self, event: ClickEvent) -> TextComponent:
        return self._with_style(self.style.with_click_event(event))

    def with_hover_event(self, event: HoverEvent) -> TextComponent:
        return self._with_style(self.style.with_hover_event(event))

    def with_font(self, identifier: str) -> TextComponent:
        return self._with_style(self.style.with_font(identifier))

    def with_shadow_color(self, color: ARGBColor) -> TextComponent:
        return self._with_style(self.style.with_shadow_color(color))

    def to_dict(self) -> dict[str, Any]:
        """Content and style flattened into one mapping, children under ``extra``."""
        result = self.content.to_dict()
        result.update(self.style.to_dict())
        if self.extra:
            result["extra"] = [child.to_dict() for child in self.extra]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TextComponent:
        data = _require_mapping(data, "text component")
        extra = data.get("extra") or []
        if not isinstance(extra, list):
            raise ValueError("'extra' must be a list")
        return cls(
            content=content_from_dict(data),
            style=Style.from_dict(data),
            extra=tuple(cls.from_dict(child) for child in extra),
        )