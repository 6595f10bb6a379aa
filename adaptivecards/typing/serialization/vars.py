from typing import Any


TYPE_KEY = "type"
FALLBACK_KEY = "fallback"

def get_type_name(source: Any) -> str | None:
    """ Get the "type" discriminator of a JSON node, if present and a non-empty string. """
    if not isinstance(source, dict):
        return None
    
    type_name = source.get(TYPE_KEY, None)
    if not type_name or not isinstance(type_name, str):
        return None
    
    return type_name
