"""Tests for SerializationContext: discriminator-driven parsing of elements and actions."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from adaptivecards import (
    ActionSet,
    CardElement,
    CardObjectRegistry,
    Container,
    GlobalRegistry,
    Image,
    OpenUrlAction,
    RichTextBlock,
    SerializationContext,
    TextBlock,
    ValidationEvent,
    Versions,
)


def _events(context: SerializationContext) -> list[ValidationEvent]:
    return [event.event for event in context.events]


@dataclass
class Rating(CardElement):
    __json_type_name__ = "Rating"

    value: float = 0.0
    max: int = 5


# ===================================================================
# parse_element
# ===================================================================

class TestParseElement:
    def test_parses_known_type(self, context):
        element = context.parse_element({"type": "TextBlock", "text": "Hello", "wrap": True, "isSubtle": True})
        assert isinstance(element, TextBlock)
        assert element.text == "Hello"
        assert element.wrap is True
        assert element.is_subtle is True
        assert context.events == []

    def test_unknown_type_returns_none_with_event(self, context):
        assert context.parse_element({"type": "Carousel"}) is None
        assert _events(context) == [ValidationEvent.UNKNOWN_ELEMENT_TYPE]
        assert context.events[0].path == "$"

    def test_missing_type(self, context):
        assert context.parse_element({"text": "no type"}) is None
        assert context.parse_element({"type": 3}) is None
        assert _events(context) == [ValidationEvent.MISSING_TYPE, ValidationEvent.MISSING_TYPE]

    def test_non_object_node(self, context):
        assert context.parse_element(["TextBlock"]) is None
        assert _events(context) == [ValidationEvent.INVALID_PROPERTY_VALUE]

    def test_type_newer_than_target_is_unsupported(self, element_registry, action_registry):
        context = SerializationContext(Versions.v1_1, element_registry, action_registry)
        assert context.parse_element({"type": "RichTextBlock", "inlines": ["hi"]}) is None
        assert _events(context) == [ValidationEvent.UNSUPPORTED_VERSION]

    def test_fallback_drop_is_silent(self, context):
        assert context.parse_element({"type": "Carousel", "fallback": "drop"}) is None
        assert context.events == []

    def test_fallback_object_is_parsed_instead(self, element_registry, action_registry):
        context = SerializationContext(Versions.v1_0, element_registry, action_registry)
        element = context.parse_element({
            "type": "ActionSet",
            "fallback": {"type": "TextBlock", "text": "Update your app"},
        })
        assert isinstance(element, TextBlock)
        assert element.text == "Update your app"
        assert _events(context) == [ValidationEvent.UNSUPPORTED_VERSION]

    def test_nested_fallback_chain(self, context):
        element = context.parse_element({
            "type": "Carousel",
            "fallback": {"type": "Gallery", "fallback": {"type": "Image", "url": "https://x/y.png"}},
        })
        assert isinstance(element, Image)
        assert [event.path for event in context.events] == ["$", "$.fallback"]

    def test_invalid_property_value_keeps_default(self, context):
        element = context.parse_element({"type": "TextBlock", "text": 42, "maxLines": True, "wrap": "yes"})
        assert element.text == ""
        assert element.max_lines is None
        assert element.wrap is False
        assert _events(context) == [ValidationEvent.INVALID_PROPERTY_VALUE] * 3
        assert {event.path for event in context.events} == {"$.text", "$.maxLines", "$.wrap"}

    def test_unknown_properties_are_kept(self, context):
        element = context.parse_element({"type": "TextBlock", "text": "x", "futureProp": {"a": 1}})
        assert element.additional_properties == {"futureProp": {"a": 1}}
        assert element.to_json()["futureProp"] == {"a": 1}

    def test_rejected_values_survive_to_json(self, context):
        element = context.parse_element({"type": "TextBlock", "text": "ok", "maxLines": "two", "wrap": 1})
        assert element.max_lines is None
        assert element.wrap is False
        assert element.additional_properties == {"maxLines": "two", "wrap": 1}
        assert element.to_json() == {"type": "TextBlock", "text": "ok", "maxLines": "two", "wrap": 1}


# ===================================================================
# nested content
# ===================================================================

class TestNestedContent:
    def test_container_items_and_select_action(self, context):
        container = context.parse_element({
            "type": "Container",
            "style": "emphasis",
            "items": [
                {"type": "TextBlock", "text": "a"},
                {"type": "Unknown"},
                {"type": "Image", "url": "https://x/y.png", "altText": "y"},
            ],
            "selectAction": {"type": "Action.OpenUrl", "url": "https://adaptivecards.io"},
        })
        assert isinstance(container, Container)
        assert [type(item) for item in container.items] == [TextBlock, Image]
        assert isinstance(container.select_action, OpenUrlAction)
        assert container.select_action.url == "https://adaptivecards.io"
        assert [event.path for event in context.events] == ["$.items[1]"]

    def test_items_must_be_a_list(self, context):
        container = context.parse_element({"type": "Container", "items": {"type": "TextBlock"}})
        assert container.items == []
        assert _events(context) == [ValidationEvent.INVALID_PROPERTY_VALUE]

    def test_action_set_uses_action_registry(self, context):
        action_set = context.parse_element({
            "type": "ActionSet",
            "actions": [
                {"type": "Action.Submit", "title": "Send", "data": {"id": 1}},
                {"type": "TextBlock", "text": "not an action"},
            ],
        })
        assert isinstance(action_set, ActionSet)
        assert len(action_set.actions) == 1
        assert action_set.actions[0].title == "Send"
        assert action_set.actions[0].data == {"id": 1}
        assert _events(context) == [ValidationEvent.UNKNOWN_ACTION_TYPE]

    def test_rich_text_block_inlines(self, context):
        block = context.parse_element({
            "type": "RichTextBlock",
            "inlines": [
                "plain",
                {"type": "TextRun", "text": "fancy", "underline": True, "strikethrough": True},
                7,
            ],
        })
        assert isinstance(block, RichTextBlock)
        assert [inline.text for inline in block.inlines] == ["plain", "fancy"]
        assert block.inlines[1].underline is True
        assert block.inlines[1].strikethrough is True
        assert [event.path for event in context.events] == ["$.inlines[2]"]


# ===================================================================
# registries
# ===================================================================

class TestRegistries:
    def test_custom_element_type(self, context):
        context.element_registry.register("Rating", Rating, Versions.v1_3)
        rating = context.parse_element({"type": "Rating", "value": 4, "max": 10})
        assert isinstance(rating, Rating)
        assert rating.value == 4
        assert rating.max == 10

    def test_overridden_factory_is_used(self, context):
        @dataclass
        class FancyTextBlock(TextBlock):
            pass

        context.element_registry.register("TextBlock", FancyTextBlock)
        assert isinstance(context.parse_element({"type": "TextBlock"}), FancyTextBlock)

    def test_defaults_to_global_registry(self):
        context = SerializationContext()
        assert context.element_registry is GlobalRegistry.elements()
        assert context.action_registry is GlobalRegistry.actions()
        assert isinstance(context.parse_element({"type": "TextBlock"}), TextBlock)

    def test_injected_registries_are_isolated(self, action_registry):
        empty = CardObjectRegistry()
        context = SerializationContext(element_registry=empty, action_registry=action_registry)
        assert context.parse_element({"type": "TextBlock"}) is None
        assert GlobalRegistry.elements().find_by_name("TextBlock") is not None

    def test_derived_contexts_share_events(self, context):
        child = context.subpath("body").subidx(0)
        assert child.document_path == "$.body[0]"
        child.parse_element({"type": "Nope"})
        assert len(context.events) == 1
        assert context.events[0].path == "$.body[0]"


@pytest.mark.parametrize("type_name", ["TextBlock", "Image", "Container", "RichTextBlock", "ActionSet"])
def test_default_element_types_registered(element_registry, type_name):
    assert element_registry.find_by_name(type_name) is not None
