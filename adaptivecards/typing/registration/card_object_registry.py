from typing import Callable, Generic, Iterator, TypeVar

from .type_registration import TypeRegistration
from ..serialization.version import Version, Versions
from ...utilities.result import CreateInstanceResult, CreateInstanceStatus
from ...utilities.logger import logger


T = TypeVar('T')

class CardObjectRegistry(Generic[T]):
    """ An ordered, string-keyed registry of zero-argument factories, gated by schema version.

    The parser looks up the "type" discriminator of every node here and asks for a fresh instance
    at its target version. Registries are plain objects: create one per parser session, or share
    the defaults from GlobalRegistry. No locking is done; callers sharing a registry across threads
    must synchronize writes themselves.
    """

    def __init__(self) -> None:
        self._items: list[TypeRegistration[T]] = []
        self._index: dict[str, TypeRegistration[T]] = {} # type_name -> registration, kept in sync with _items

    def find_by_name(self, type_name: str) -> TypeRegistration[T] | None:
        """ Returns None if no registration matches type_name exactly. """
        return self._index.get(type_name)

    def clear(self) -> None:
        self._items = []
        self._index = {}

    def register(self, type_name: str, object_type: Callable[[], T], schema_version: Version = Versions.v1_0) -> None:
        """ Registers a factory under type_name.

        If type_name is already registered, only its factory is replaced. The registration keeps its
        position and its original schema_version. To change the version, unregister first. """
        if not type_name:
            logger.warning("Registering a card object type with an empty type name.")

        registration = self.find_by_name(type_name)
        if registration is not None:
            logger.debug(f"Replacing factory for '{type_name}' (schema version {registration.schema_version} unchanged).")
            registration.object_type = object_type
            return

        registration = TypeRegistration(type_name=type_name, object_type=object_type, schema_version=schema_version)
        self._items.append(registration)
        self._index[type_name] = registration
        logger.debug(f"Registered '{type_name}' for schema version {schema_version} and above.")

    def unregister(self, type_name: str) -> None:
        """ Removes type_name if registered. Unknown names are ignored. """
        registration = self._index.pop(type_name, None)
        if registration is None:
            return
        self._items.remove(registration) # TypeRegistration compares by identity

    def create_instance(self, type_name: str, target_version: Version) -> T | None:
        """ Returns a new instance, or None if type_name is unknown or requires a schema version newer than target_version. """
        return self.create_instance_result(type_name, target_version).instance

    def create_instance_result(self, type_name: str, target_version: Version) -> CreateInstanceResult[T]:
        """ Same lookup as create_instance(), reporting why no instance was created. """
        registration = self.find_by_name(type_name)
        if registration is None:
            return CreateInstanceResult(
                status=CreateInstanceStatus.UNKNOWN_TYPE,
                type_name=type_name,
                message=f"Unknown type '{type_name}'."
            )

        if registration.schema_version.compare_to(target_version) > 0:
            return CreateInstanceResult(
                status=CreateInstanceStatus.UNSUPPORTED_VERSION,
                type_name=type_name,
                message=f"Type '{type_name}' requires schema version {registration.schema_version}, target version is {target_version}."
            )

        return CreateInstanceResult(
            status=CreateInstanceStatus.CREATED,
            type_name=type_name,
            instance=registration.object_type()
        )

    def get_item_count(self) -> int:
        return len(self._items)

    def get_item_at(self, index: int) -> TypeRegistration[T]:
        """ Positional access in registration order. Raises IndexError outside [0, get_item_count()), TypeError for non-int indices. """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Registration index must be an int, got {type(index).__name__}.")
        if not 0 <= index < len(self._items):
            raise IndexError(f"Registration index {index} out of range for registry with {len(self._items)} items.")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TypeRegistration[T]]:
        return iter(list(self._items))

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._index
