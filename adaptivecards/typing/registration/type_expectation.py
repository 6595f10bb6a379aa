from dataclasses import dataclass
from typing import Any

from .type_info import TypeInfo


@dataclass
class TypeExpectation:
	type_info: TypeInfo
	is_nullable: bool

	def __str__(self) -> str:
		output = self.type_info.type_.__name__
		if self.type_info.sub_type is not None:
			output += f"[{self.type_info.sub_type.__name__}]"
		if self.is_nullable:
			output += " | None"

		return output

	def is_valid_value(self, value: Any) -> bool:
		""" Validate that a JSON value is consistent with this TypeExpectation. """
		if value is None:
			return self.is_nullable

		expected_type = self.type_info.type_

		# JSON booleans are ints in Python, but a bool is never a valid int or float property
		if isinstance(value, bool) and expected_type is not bool:
			return False

		# JSON does not distinguish 1 from 1.0
		if expected_type is float:
			return isinstance(value, (int, float))

		if not isinstance(value, expected_type):
			return False

		if self.type_info.sub_type is not None:
			return all(isinstance(element, self.type_info.sub_type) for element in value)

		return True
