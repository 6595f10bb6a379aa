from dataclasses import dataclass
from enum import StrEnum


class ValidationEvent(StrEnum):
    MISSING_TYPE = "missing_type"
    UNKNOWN_ELEMENT_TYPE = "unknown_element_type"
    UNKNOWN_ACTION_TYPE = "unknown_action_type"
    UNSUPPORTED_VERSION = "unsupported_version"
    INVALID_PROPERTY_VALUE = "invalid_property_value"
    UNSUPPORTED_CARD_VERSION = "unsupported_card_version"

@dataclass(frozen=True)
class ParseEvent:
    """ A problem found in a single node. Recorded instead of raised, so one bad node doesn't fail the card. """
    event: ValidationEvent
    message: str
    path: str
