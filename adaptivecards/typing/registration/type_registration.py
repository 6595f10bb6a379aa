from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from ..serialization.version import Version


T = TypeVar('T')

@dataclass(eq=False)
class TypeRegistration(Generic[T]):
    """ A single entry of a CardObjectRegistry. 
    Only object_type is ever updated after creation, and only by the owning registry when the type name is registered again. """
    type_name: str
    object_type: Callable[[], T]
    """ Zero-argument factory. Usually the card object class itself. """
    schema_version: Version
    """ Minimum schema version at which this type may be instantiated. """
