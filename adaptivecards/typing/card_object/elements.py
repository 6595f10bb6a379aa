from dataclasses import dataclass, field
from typing import Any

from .card_object import JSON_KEY, NESTED, Action, CardElement, CardObject
from ..serialization.parse_event import ValidationEvent
from ..serialization.version import Versions

from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ..serialization.serialization_context import SerializationContext


def _parse_select_action(source: dict[str, Any], context: 'SerializationContext') -> Action | None:
	if "selectAction" not in source:
		return None
	return context.subpath("selectAction").parse_action(source["selectAction"])


@dataclass
class TextBlock(CardElement):
	__json_type_name__ = "TextBlock"

	text: str = ""
	color: str | None = None
	size: str | None = None
	weight: str | None = None
	wrap: bool = False
	is_subtle: bool | None = field(default=None, metadata={JSON_KEY: "isSubtle"})
	max_lines: int | None = field(default=None, metadata={JSON_KEY: "maxLines"})
	horizontal_alignment: str | None = field(default=None, metadata={JSON_KEY: "horizontalAlignment"})


@dataclass
class Image(CardElement):
	__json_type_name__ = "Image"

	url: str = ""
	alt_text: str | None = field(default=None, metadata={JSON_KEY: "altText"})
	size: str | None = None
	style: str | None = None
	background_color: str | None = field(default=None, metadata={JSON_KEY: "backgroundColor"})
	select_action: Action | None = field(default=None, metadata={JSON_KEY: "selectAction", NESTED: True})

	def parse(self, source: dict[str, Any], context: 'SerializationContext') -> None:
		super().parse(source, context)
		self.select_action = _parse_select_action(source, context)


@dataclass
class Container(CardElement):
	__json_type_name__ = "Container"

	items: list[CardElement] = field(default_factory=list, metadata={NESTED: True})
	style: str | None = None
	vertical_content_alignment: str | None = field(default=None, metadata={JSON_KEY: "verticalContentAlignment"})
	bleed: bool = False
	select_action: Action | None = field(default=None, metadata={JSON_KEY: "selectAction", NESTED: True})

	def parse(self, source: dict[str, Any], context: 'SerializationContext') -> None:
		super().parse(source, context)
		self.items = context.parse_element_list(source, "items")
		self.select_action = _parse_select_action(source, context)


@dataclass
class TextRun(CardObject):
	""" An inline of a RichTextBlock. Not registered: RichTextBlock creates these itself. """
	__json_type_name__ = "TextRun"

	text: str = ""
	color: str | None = None
	size: str | None = None
	weight: str | None = None
	is_subtle: bool | None = field(default=None, metadata={JSON_KEY: "isSubtle"})
	italic: bool = False
	strikethrough: bool = False
	underline: bool = False
	highlight: bool = False


@dataclass
class RichTextBlock(CardElement):
	__json_type_name__ = "RichTextBlock"
	__schema_version__ = Versions.v1_2

	inlines: list[TextRun] = field(default_factory=list, metadata={NESTED: True})
	horizontal_alignment: str | None = field(default=None, metadata={JSON_KEY: "horizontalAlignment"})

	def parse(self, source: dict[str, Any], context: 'SerializationContext') -> None:
		super().parse(source, context)
		self.inlines = []
		inlines = source.get("inlines", [])
		inlines_context = context.subpath("inlines")
		if not isinstance(inlines, list):
			inlines_context.log_parse_event(ValidationEvent.INVALID_PROPERTY_VALUE, f"Expected a list for 'inlines', received {type(inlines).__name__}.")
			return

		for idx, inline in enumerate(inlines):
			# Plain strings are shorthand for a TextRun with default formatting
			if isinstance(inline, str):
				self.inlines.append(TextRun(text=inline))
			elif isinstance(inline, dict) and inline.get("type") == TextRun.__json_type_name__:
				text_run = TextRun()
				text_run.parse(inline, inlines_context.subidx(idx))
				self.inlines.append(text_run)
			else:
				inlines_context.subidx(idx).log_parse_event(ValidationEvent.INVALID_PROPERTY_VALUE, "RichTextBlock inlines must be strings or TextRun objects.")


@dataclass
class ActionSet(CardElement):
	__json_type_name__ = "ActionSet"
	__schema_version__ = Versions.v1_2

	actions: list[Action] = field(default_factory=list, metadata={NESTED: True})

	def parse(self, source: dict[str, Any], context: 'SerializationContext') -> None:
		super().parse(source, context)
		self.actions = context.parse_action_list(source, "actions")


DEFAULT_ELEMENT_TYPES: list[type[CardElement]] = [TextBlock, Image, Container, RichTextBlock, ActionSet]
