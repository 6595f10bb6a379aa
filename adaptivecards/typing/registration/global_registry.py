from typing import ClassVar

from .card_object_registry import CardObjectRegistry
from .register_card_object_types import register_card_object_types
from ..card_object.actions import DEFAULT_ACTION_TYPES
from ..card_object.card_object import Action, CardElement
from ..card_object.elements import DEFAULT_ELEMENT_TYPES
from ...utilities.logger import logger


def populate_with_default_elements(registry: CardObjectRegistry[CardElement]) -> None:
    register_card_object_types(registry, DEFAULT_ELEMENT_TYPES)

def populate_with_default_actions(registry: CardObjectRegistry[Action]) -> None:
    register_card_object_types(registry, DEFAULT_ACTION_TYPES)


class GlobalRegistry:
    """ Shared element and action registries, populated with the built-in types on first use.

    This is a convenience for applications with a single parser configuration. SerializationContext falls back to it
    when no registries are given; pass your own CardObjectRegistry instances to keep sessions isolated. """
    _elements: ClassVar[CardObjectRegistry[CardElement] | None] = None
    _actions: ClassVar[CardObjectRegistry[Action] | None] = None

    @classmethod
    def elements(cls) -> CardObjectRegistry[CardElement]:
        if cls._elements is None:
            cls._elements = CardObjectRegistry()
            populate_with_default_elements(cls._elements)
            logger.debug("Populated global element registry with default elements.")
        return cls._elements

    @classmethod
    def actions(cls) -> CardObjectRegistry[Action]:
        if cls._actions is None:
            cls._actions = CardObjectRegistry()
            populate_with_default_actions(cls._actions)
            logger.debug("Populated global action registry with default actions.")
        return cls._actions

    @classmethod
    def reset(cls) -> None:
        """ Discards any changes made to the global registries. They are repopulated on next use. """
        cls._elements = None
        cls._actions = None
