from dataclasses import dataclass, field

from .card_object import JSON_KEY, Action
from ..serialization.version import Versions


@dataclass
class OpenUrlAction(Action):
	__json_type_name__ = "Action.OpenUrl"

	url: str = ""


@dataclass
class SubmitAction(Action):
	__json_type_name__ = "Action.Submit"

	data: dict | None = None
	associated_inputs: str | None = field(default=None, metadata={JSON_KEY: "associatedInputs"})


@dataclass
class ToggleVisibilityAction(Action):
	""" target_elements holds element ids, or {"elementId": ..., "isVisible": ...} objects. """
	__json_type_name__ = "Action.ToggleVisibility"
	__schema_version__ = Versions.v1_2

	target_elements: list | None = field(default=None, metadata={JSON_KEY: "targetElements"})


@dataclass
class ExecuteAction(Action):
	__json_type_name__ = "Action.Execute"
	__schema_version__ = Versions.v1_4

	verb: str | None = None
	data: dict | None = None
	associated_inputs: str | None = field(default=None, metadata={JSON_KEY: "associatedInputs"})


DEFAULT_ACTION_TYPES: list[type[Action]] = [OpenUrlAction, SubmitAction, ToggleVisibilityAction, ExecuteAction]
