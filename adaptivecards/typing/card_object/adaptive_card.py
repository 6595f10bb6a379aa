from dataclasses import dataclass, field
from typing import Any

from .card_object import JSON_KEY, NESTED, NOT_JSON, Action, CardElement, CardObject
from ..serialization.parse_event import ParseEvent, ValidationEvent
from ..serialization.serialization_context import SerializationContext
from ..serialization.vars import get_type_name
from ..serialization.version import Version, Versions
from ...utilities.validation_error import ValidationError


@dataclass
class AdaptiveCard(CardObject):
	""" The root of a card document. Never registered: parse_card() creates it directly. """
	__json_type_name__ = "AdaptiveCard"

	version: str | None = None
	""" Schema version declared by the document, as written. """
	fallback_text: str | None = field(default=None, metadata={JSON_KEY: "fallbackText"})
	speak: str | None = None
	lang: str | None = None
	body: list[CardElement] = field(default_factory=list, metadata={NESTED: True})
	actions: list[Action] = field(default_factory=list, metadata={NESTED: True})
	events: list[ParseEvent] = field(default_factory=list, repr=False, compare=False, metadata={NOT_JSON: True})
	""" Problems recorded while parsing this card. The same list as the parsing context's events. """

	def parse(self, source: dict[str, Any], context: SerializationContext) -> None:
		self.events = context.events
		super().parse(source, context)
		self.body = context.parse_element_list(source, "body")
		self.actions = context.parse_action_list(source, "actions")


def _get_declared_version(source: dict[str, Any]) -> Version | None:
	try:
		return Version.parse(source.get("version"))
	except ValueError:
		return None


def parse_card(source: Any, context: SerializationContext | None = None) -> AdaptiveCard:
	""" Parses a card document into an AdaptiveCard.

	Without a context, the document's declared "version" becomes the target version, so element and action types
	newer than the card are treated as unsupported. A missing, invalid or too recent declared version falls back to Versions.latest.
	Problems with individual nodes are recorded in card.events (the context's events list). Raises ValidationError if source is not an AdaptiveCard at all.
	"""
	if get_type_name(source) != AdaptiveCard.__json_type_name__:
		raise ValidationError(f"Expected a JSON object with \"type\": \"{AdaptiveCard.__json_type_name__}\".")

	declared_version = _get_declared_version(source)
	target_version = declared_version
	if target_version is None or target_version > Versions.latest:
		target_version = Versions.latest

	if context is None:
		context = SerializationContext(target_version=target_version)

	if declared_version is None:
		context.subpath("version").log_parse_event(
			ValidationEvent.UNSUPPORTED_CARD_VERSION,
			f"Card declares a missing or invalid version {source.get('version')!r}. Using {Versions.latest}."
		)
	elif declared_version > Versions.latest:
		context.subpath("version").log_parse_event(
			ValidationEvent.UNSUPPORTED_CARD_VERSION,
			f"Card version {declared_version} is newer than the latest supported version {Versions.latest}."
		)

	card = AdaptiveCard()
	card.parse(source, context)
	return card
