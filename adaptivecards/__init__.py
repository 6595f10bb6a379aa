"""
adaptivecards

Typed object registry and polymorphic deserialization for Adaptive Card documents.
"""

from .typing import (
    Version, Versions,
    TypeRegistration, CardObjectRegistry, TypeNameDict, register_card_object_types,
    GlobalRegistry, populate_with_default_actions, populate_with_default_elements,
    ParseEvent, ValidationEvent, SerializationContext,
    CardObject, CardElement, Action,
    TextBlock, Image, Container, RichTextBlock, TextRun, ActionSet,
    OpenUrlAction, SubmitAction, ToggleVisibilityAction, ExecuteAction,
    AdaptiveCard, parse_card,
)
from .utilities.logger import logger, set_log_level
from .utilities.result import CreateInstanceResult, CreateInstanceStatus
from .utilities.setup_error import SetupError
from .utilities.validation_error import ValidationError
