from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, TYPE_CHECKING

from .parse_event import ParseEvent, ValidationEvent
from .vars import FALLBACK_KEY, get_type_name
from .version import Version, Versions
from ...utilities.result import CreateInstanceStatus
from ...utilities.special_values import DROP
from ...utilities.logger import logger

if TYPE_CHECKING:
    from ..card_object.card_object import Action, CardElement, CardObject
    from ..registration.card_object_registry import CardObjectRegistry


@dataclass(frozen=True)
class SerializationContext:
    """ Carries everything a card object needs while it parses itself.

    Contexts derived with subpath()/subidx() share the same registries and the same events list,
    so the events of a whole card can be read from the root context after parsing. """

    target_version: Version = Versions.latest
    """ Types registered with a newer schema version are treated as unsupported. """

    element_registry: CardObjectRegistry[CardElement] | None = None
    action_registry: CardObjectRegistry[Action] | None = None
    """ When omitted, the GlobalRegistry defaults are used. """

    document_path: str = "$"
    """ JSON path of the node being parsed, for messages. """

    events: list[ParseEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        from ..registration.global_registry import GlobalRegistry
        if self.element_registry is None:
            object.__setattr__(self, "element_registry", GlobalRegistry.elements())
        if self.action_registry is None:
            object.__setattr__(self, "action_registry", GlobalRegistry.actions())

    def subpath(self, field_name: str) -> SerializationContext:
        """ Returns a new SerializationContext with a modified document_path. """
        return replace(self, document_path=f"{self.document_path}.{field_name}")

    def subidx(self, idx: int) -> SerializationContext:
        """ Returns a new SerializationContext with a modified document_path. """
        return replace(self, document_path=f"{self.document_path}[{idx}]")

    def log_parse_event(self, event: ValidationEvent, message: str) -> None:
        self.events.append(ParseEvent(event=event, message=message, path=self.document_path))
        logger.warning(f"{message}\n{self}")

    def parse_element(self, source: Any) -> CardElement | None:
        """ Returns None if the node is invalid, unknown or unsupported and has no usable fallback. """
        assert self.element_registry is not None
        return self._parse_card_object(source, self.element_registry, ValidationEvent.UNKNOWN_ELEMENT_TYPE)

    def parse_action(self, source: Any) -> Action | None:
        """ Returns None if the node is invalid, unknown or unsupported and has no usable fallback. """
        assert self.action_registry is not None
        return self._parse_card_object(source, self.action_registry, ValidationEvent.UNKNOWN_ACTION_TYPE)

    def parse_element_list(self, source: Any, field_name: str) -> list[CardElement]:
        """ Parses source[field_name] as a list of elements, skipping the nodes that produced None. """
        assert self.element_registry is not None
        return self._parse_list(source, field_name, self.element_registry, ValidationEvent.UNKNOWN_ELEMENT_TYPE)

    def parse_action_list(self, source: Any, field_name: str) -> list[Action]:
        """ Parses source[field_name] as a list of actions, skipping the nodes that produced None. """
        assert self.action_registry is not None
        return self._parse_list(source, field_name, self.action_registry, ValidationEvent.UNKNOWN_ACTION_TYPE)

    def _parse_list(self, source: dict[str, Any], field_name: str, registry: CardObjectRegistry, unknown_event: ValidationEvent) -> list:
        if field_name not in source:
            return []

        items = source[field_name]
        list_context = self.subpath(field_name)
        if not isinstance(items, list):
            list_context.log_parse_event(ValidationEvent.INVALID_PROPERTY_VALUE, f"Expected a list for '{field_name}', received {type(items).__name__}.")
            return []

        output = []
        for idx, item in enumerate(items):
            card_object = list_context.subidx(idx)._parse_card_object(item, registry, unknown_event)
            if card_object is not None:
                output.append(card_object)
        return output

    def _parse_card_object(self, source: Any, registry: CardObjectRegistry, unknown_event: ValidationEvent) -> Any:
        if not isinstance(source, dict):
            self.log_parse_event(ValidationEvent.INVALID_PROPERTY_VALUE, f"Expected an object, received {type(source).__name__}.")
            return None

        type_name = get_type_name(source)
        if type_name is None:
            self.log_parse_event(ValidationEvent.MISSING_TYPE, "Object does not declare a valid \"type\".")
            return None

        result = registry.create_instance_result(type_name, self.target_version)
        if result.status is CreateInstanceStatus.CREATED:
            card_object: CardObject = result.instance
            card_object.parse(source, self)
            return card_object

        # Unknown or unsupported at the target version, fall back
        event = unknown_event if result.status is CreateInstanceStatus.UNKNOWN_TYPE else ValidationEvent.UNSUPPORTED_VERSION
        fallback = source.get(FALLBACK_KEY)
        if fallback == DROP:
            logger.info(f"Dropping '{type_name}' as requested by its fallback.\n{self}")
            return None

        self.log_parse_event(event, result.message or f"Unable to create '{type_name}'.")
        if isinstance(fallback, dict):
            return self.subpath(FALLBACK_KEY)._parse_card_object(fallback, registry, unknown_event)

        return None

    def __str__(self) -> str:
        """ Printable to logs. """
        return f"Document path: {self.document_path}\nTarget version: {self.target_version}"
