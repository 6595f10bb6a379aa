"""
Card Object Typing Module

This module provides the versioned type registries used to turn card JSON into typed card objects,
and the card object model itself. Registries are plain objects: GlobalRegistry holds the shared defaults,
but every parsing entry point accepts injected registries.
"""

from .serialization.version import Version, Versions
from .registration.type_registration import TypeRegistration
from .registration.card_object_registry import CardObjectRegistry

# Expose these at the module level
from .registration.register_card_object_types import TypeNameDict, register_card_object_types
from .registration.global_registry import GlobalRegistry, populate_with_default_actions, populate_with_default_elements
from .serialization.parse_event import ParseEvent, ValidationEvent
from .serialization.serialization_context import SerializationContext
from .card_object.card_object import Action, CardElement, CardObject
from .card_object.elements import ActionSet, Container, Image, RichTextBlock, TextBlock, TextRun
from .card_object.actions import ExecuteAction, OpenUrlAction, SubmitAction, ToggleVisibilityAction
from .card_object.adaptive_card import AdaptiveCard, parse_card
