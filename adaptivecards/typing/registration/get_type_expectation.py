from types import UnionType
from typing import Union, get_args, get_origin

from .type_info import TypeInfo
from .type_expectation import TypeExpectation


def get_type_info(type_: type) -> TypeInfo:
    """ Extracts type and subtype (if present) for a **single** (non-Union) type. """
    origin = get_origin(type_)

    if origin in {Union, UnionType}:
        raise ValueError("This function should only be used for single types.")
    elif origin is None:
        return TypeInfo(type_=type_, sub_type=None)
    elif origin is dict:
        # No sub type information is stored for a dict
        return TypeInfo(type_=dict, sub_type=None)
    else:
        # list[str] and other generics with a single type parameter
        args = get_args(type_)
        if len(args) != 1:
            raise ValueError(f"Unable to get type info for annotation {type_} with {len(args)} type arguments.")
        return TypeInfo(type_=origin, sub_type=args[0])


def get_type_expectation(type_annotation: type | UnionType) -> TypeExpectation:
    """ Interpret a field annotation, including nullable types (X | None) and sequences with an element type. """
    if get_origin(type_annotation) in {Union, UnionType}:
        unioned_types = [arg for arg in get_args(type_annotation) if arg is not type(None)]
        if len(unioned_types) != 1:
            raise NotImplementedError(f"We don't handle annotations with more than one non-None type: {type_annotation}.")
        return TypeExpectation(type_info=get_type_info(unioned_types[0]), is_nullable=True)

    return TypeExpectation(type_info=get_type_info(type_annotation), is_nullable=False)
