from dataclasses import MISSING, Field, dataclass, field, fields
from functools import cache
from typing import Any, ClassVar, get_type_hints

from ..registration.get_type_expectation import get_type_expectation
from ..registration.type_expectation import TypeExpectation
from ..serialization.parse_event import ValidationEvent
from ..serialization.vars import TYPE_KEY
from ..serialization.version import Version, Versions
from ...utilities.special_values import ABSTRACT

from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from ..serialization.serialization_context import SerializationContext


JSON_KEY = "json_key"
""" Field metadata key: the JSON property name, when it differs from the field name. """

NESTED = "nested"
""" Field metadata key: the field holds card objects and is parsed by the owning class's parse(). """

NOT_JSON = "not_json"
""" Field metadata key: the field is bookkeeping, never read from or written to JSON. """

def json_key(field_: Field) -> str:
	return field_.metadata.get(JSON_KEY, field_.name)

def _field_default(field_: Field) -> Any:
	if field_.default is not MISSING:
		return field_.default
	if field_.default_factory is not MISSING:
		return field_.default_factory()
	return None

def _value_to_json(value: Any) -> Any:
	if isinstance(value, CardObject):
		return value.to_json()
	elif isinstance(value, list):
		return [_value_to_json(element) for element in value]
	return value

@cache
def _get_type_expectations(cls: type['CardObject']) -> dict[str, TypeExpectation]:
	""" Type expectations of the plain (non-nested) JSON fields of cls, by field name. """
	type_hints = get_type_hints(cls)
	return {
		field_.name: get_type_expectation(type_hints[field_.name])
		for field_ in cls._json_fields()
		if not field_.metadata.get(NESTED)
	}


@dataclass
class CardObject:
	""" Base of every object a CardObjectRegistry constructs.

	Subclasses are dataclasses whose fields all have defaults, so the class itself is a valid zero-argument factory.
	Concrete subclasses set __json_type_name__ to their "type" discriminator. """
	__json_type_name__: ClassVar[str] = ABSTRACT
	__schema_version__: ClassVar[Version] = Versions.v1_0

	additional_properties: dict[str, Any] = field(default_factory=dict, repr=False, metadata={NOT_JSON: True})
	""" Properties found in the JSON that this class doesn't declare, or whose values were rejected. Kept so to_json() doesn't lose them. """

	@classmethod
	def _json_fields(cls) -> list[Field]:
		return [field_ for field_ in fields(cls) if not field_.metadata.get(NOT_JSON)]

	def parse(self, source: dict[str, Any], context: 'SerializationContext') -> None:
		""" Populate this object from a JSON node. Nested card objects are parsed by subclasses, after calling super().parse().
		Invalid values are reported to the context and leave the field at its default. The raw value is kept in additional_properties. """
		type_expectations = _get_type_expectations(type(self))
		handled_keys = {TYPE_KEY}

		for field_ in self._json_fields():
			key = json_key(field_)
			handled_keys.add(key)
			if key not in source or field_.metadata.get(NESTED):
				continue

			value = source[key]
			type_expectation = type_expectations[field_.name]
			if not type_expectation.is_valid_value(value):
				context.subpath(key).log_parse_event(
					ValidationEvent.INVALID_PROPERTY_VALUE,
					f"Invalid value {value!r} for property '{key}' of {type(self).__json_type_name__}, expected {type_expectation}."
				)
				self.additional_properties[key] = value
				continue
			setattr(self, field_.name, value)

		# Allow extra fields
		# This helps with forward-compatibility with newer schema versions
		for key, value in source.items():
			if key not in handled_keys:
				self.additional_properties[key] = value

	def to_json(self) -> dict[str, Any]:
		# Raise error for abstract classes
		if type(self).__json_type_name__ == ABSTRACT:
			raise ValueError(f"Error serializing object of type '{type(self).__name__}'. Abstract classes cannot be serialized.")

		output: dict[str, Any] = {TYPE_KEY: type(self).__json_type_name__}
		for field_ in self._json_fields():
			value = getattr(self, field_.name)
			if value == _field_default(field_):
				continue
			output[json_key(field_)] = _value_to_json(value)

		for key, value in self.additional_properties.items():
			output.setdefault(key, value)

		return output


@dataclass
class CardElement(CardObject):
	""" Anything that can appear in a card body or a container. """
	id: str | None = None
	is_visible: bool = field(default=True, metadata={JSON_KEY: "isVisible"})
	separator: bool = False
	spacing: str | None = None
	height: str | None = None


@dataclass
class Action(CardObject):
	id: str | None = None
	title: str | None = None
	icon_url: str | None = field(default=None, metadata={JSON_KEY: "iconUrl"})
	tooltip: str | None = None
