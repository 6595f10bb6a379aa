from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar


T = TypeVar('T')

class CreateInstanceStatus(StrEnum):
    CREATED = "created"
    UNKNOWN_TYPE = "unknown_type"
    UNSUPPORTED_VERSION = "unsupported_version"

@dataclass
class CreateInstanceResult(Generic[T]):
    """ Returns the result of a version-gated instantiation. 
    Unlike CardObjectRegistry.create_instance(), callers can tell an unknown type from a type that requires a newer schema version. """
    status: CreateInstanceStatus
    type_name: str
    instance: T | None = None
    message: str | None = None

    @property
    def success(self) -> bool:
        return self.status is CreateInstanceStatus.CREATED
