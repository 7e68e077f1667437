import uuid

import pytest

from wither.text.click import ClickAction, ClickEvent
from wither.text.color import ARGBColor, Color, NamedColor, RGBColor
from wither.text.component import (
    EntityNames,
    Keybind,
    ShowEntity,
    ShowItem,
    ShowText,
    Style,
    Text,
    TextComponent,
    Translate,
    content_from_dict,
    hover_event_from_dict,
)

ENTITY_ID = uuid.UUID("12345678-1234-5678-1234-567812345678")


def test_plain_text_dict():
    assert TextComponent.text("hi").to_dict() == {"text": "hi"}


def test_bold_dict():
    assert TextComponent.text("hi").with_bold().to_dict() == {"text": "hi", "bold": True}


def test_style_keys_use_wire_names():
    component = (
        TextComponent.text("hi")
        .with_click_event(ClickEvent(ClickAction.RUN_COMMAND, "/help"))
        .with_hover_event(ShowText("tip"))
        .with_shadow_color(ARGBColor(1, 2, 3, 4))
    )
    data = component.to_dict()
    assert data["clickEvent"] == {"action": "run_command", "value": "/help"}
    assert data["hoverEvent"] == {"action": "show_text", "contents": "tip"}
    assert data["shadow_color"] == [1, 2, 3, 4]


def test_full_round_trip():
    name = TextComponent.text("Bob").with_named_color(NamedColor.GOLD)
    component = (
        TextComponent.text("hello")
        .with_rgb_color(RGBColor(10, 20, 30))
        .with_bold()
        .with_italic()
        .with_underlined()
        .with_strikethrough()
        .with_obfuscated()
        .with_insertion("inserted")
        .with_font("minecraft:uniform")
        .with_click_event(ClickEvent(ClickAction.CHANGE_PAGE, 2))
        .with_hover_event(ShowEntity(ENTITY_ID, "minecraft:pig", name))
        .with_shadow_color(ARGBColor(255, 0, 0, 0))
        .add_child(TextComponent(Keybind("key.jump")))
        .add_child(TextComponent(EntityNames("@a", ", ")))
    )
    assert TextComponent.from_dict(component.to_dict()) == component


def test_translate_round_trip():
    component = TextComponent(
        Translate("chat.type.text", (TextComponent.text("a"), TextComponent.text("b")))
    )
    data = component.to_dict()
    assert data["translate"] == "chat.type.text"
    assert TextComponent.from_dict(data) == component


def test_translate_without_arguments_omits_with():
    assert Translate("key").to_dict() == {"translate": "key"}


def test_entity_names_omits_missing_separator():
    assert EntityNames("@p").to_dict() == {"selector": "@p"}


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"text": "t"}, Text("t")),
        ({"translate": "k"}, Translate("k")),
        ({"selector": "@e"}, EntityNames("@e")),
        ({"keybind": "key.use"}, Keybind("key.use")),
    ],
)
def test_content_from_dict(data, expected):
    assert content_from_dict(data) == expected


def test_content_from_dict_unknown():
    with pytest.raises(ValueError):
        content_from_dict({"bold": True})


def test_style_from_dict_ignores_content_keys():
    style = Style.from_dict({"text": "x", "italic": False, "color": "red"})
    assert style == Style(color=Color.named(NamedColor.RED), italic=False)


def test_style_from_dict_bad_bool():
    with pytest.raises(ValueError):
        Style.from_dict({"bold": "yes"})


def test_style_builders_do_not_mutate():
    base = Style()
    bold = base.with_bold()
    assert base.bold is None
    assert bold.bold is True
    assert bold.with_named_color(NamedColor.BLUE).color == Color.named(NamedColor.BLUE)


def test_show_item_dict():
    event = ShowItem("minecraft:stone", "{}")
    assert event.to_dict() == {
        "action": "show_item",
        "contents": {"id": "minecraft:stone", "count": None, "tag": "{}"},
    }
    assert hover_event_from_dict(event.to_dict()) == event


def test_show_entity_skips_missing_fields():
    data = ShowEntity(ENTITY_ID).to_dict()
    assert data["contents"] == {"id": str(ENTITY_ID)}
    assert hover_event_from_dict(data) == ShowEntity(ENTITY_ID)


def test_hover_unknown_action():
    with pytest.raises(ValueError):
        hover_event_from_dict({"action": "show_achievement", "contents": "x"})


def test_hover_bad_uuid():
    with pytest.raises(ValueError):
        hover_event_from_dict({"action": "show_entity", "contents": {"id": "nope"}})


def test_pretty_console_plain_with_children():
    component = TextComponent.text("hi").add_child(TextComponent.text("there"))
    assert component.to_pretty_console() == "hithere"


def test_pretty_console_reset_color_is_plain():
    component = TextComponent.text("hi").with_color(Color.reset())
    assert component.to_pretty_console() == "hi"


def test_pretty_console_bold_adds_escapes():
    plain = TextComponent.text("hi").to_pretty_console()
    bold = TextComponent.text("hi").with_bold().to_pretty_console()
    assert bold != plain
    assert "hi" in bold
    assert bold.startswith("\x1b[")


def test_pretty_console_hyperlink():
    url = "https://example.com"
    component = TextComponent.text("hi").with_click_event(ClickEvent(ClickAction.OPEN_URL, url))
    assert component.to_pretty_console() == f"\x1b]8;;{url}\x1b\\hi\x1b]8;;\x1b\\"


def test_pretty_console_other_click_has_no_link():
    component = TextComponent.text("hi").with_click_event(
        ClickEvent(ClickAction.RUN_COMMAND, "/help")
    )
    assert component.to_pretty_console() == "hi"


def test_pretty_console_uses_translate_key():
    assert TextComponent(Translate("chat.key")).to_pretty_console() == "chat.key"


def test_from_dict_bad_extra():
    with pytest.raises(ValueError):
        TextComponent.from_dict({"text": "a", "extra": "b"})