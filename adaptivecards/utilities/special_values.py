ABSTRACT = "ABSTRACT"
""" 
This keyword is used for CardObject classes (__json_type_name__) to indicate a base class
that cannot be registered, parsed or serialized by itself.
"""

DROP = "drop"
"""
Value of a node's "fallback" property which asks the parser to silently drop a node
whose type is unknown or unsupported at the target version.
"""
