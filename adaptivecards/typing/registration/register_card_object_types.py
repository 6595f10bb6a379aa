from typing import Iterable
from bidict import bidict, DuplicationError

from .card_object_registry import CardObjectRegistry
from ..card_object.card_object import CardObject
from ...utilities.setup_error import SetupError
from ...utilities.special_values import ABSTRACT


class TypeNameDict(bidict[str, type[CardObject]]):
    def add(self, type_: type[CardObject]) -> None:
        """Register a single type by its JSON type name. Raises SetupError if the name or the type is already present."""
        try:
            self.put(type_.__json_type_name__, type_)
        except DuplicationError:
            existing = self.get(type_.__json_type_name__)
            raise SetupError(f"{type_.__name__} uses the type name '{type_.__json_type_name__}' already used by {getattr(existing, '__name__', existing)}, or is listed twice.")

    def add_list(self, types: Iterable[type[CardObject]]) -> None:
        """Register multiple types by their JSON type names."""
        for type_ in types:
            self.add(type_)


def register_card_object_types(registry: CardObjectRegistry, types: Iterable[type[CardObject]]) -> TypeNameDict:
    """ Registers each class under its __json_type_name__, at its __schema_version__. 
    Returns the type name <-> class mapping of the registered classes.
    
    Validation happens before the registry is touched, so a SetupError leaves the registry unchanged. """
    types = list(types)
    type_name_dict = TypeNameDict()
    for card_object_type in types:
        type_name = getattr(card_object_type, "__json_type_name__", ABSTRACT)
        if not type_name or type_name == ABSTRACT:
            raise SetupError(f"{card_object_type.__name__} is abstract or does not define a __json_type_name__.")
        type_name_dict.add(card_object_type)

    for card_object_type in types:
        registry.register(card_object_type.__json_type_name__, card_object_type, card_object_type.__schema_version__)

    return type_name_dict
