"""Core functionalities: identity keys, definitions, composition and queries.

Architecture Note:
    core/ holds the composition engine. Apart from the process-wide settings
    read by inherit(), every operation is a synchronous in-memory
    transformation of the mappings it is given.
"""

from protoclass.core.composition import (
    AmbiguousMemberError,
    Parent,
    create,
    extend,
    generate_instance,
    get_instance_behavior,
    inherit,
)
from protoclass.core.definition import (
    CREATE_HOOK,
    INDEX,
    INHERIT_HOOK,
    NAME,
    NEW_HOOK,
    Behavior,
    Class,
    Definition,
    Instance,
)
from protoclass.core.identity import ANCESTRY_KEY, BEHAVIOR_KEY, Ancestry, IdentityKey
from protoclass.core.query import implements, instanceof, is_, type_, typeof

__all__ = [
    # Identity
    "IdentityKey",
    "BEHAVIOR_KEY",
    "ANCESTRY_KEY",
    "Ancestry",
    # Definition
    "Definition",
    "Class",
    "Behavior",
    "Instance",
    "NEW_HOOK",
    "INHERIT_HOOK",
    "CREATE_HOOK",
    "INDEX",
    "NAME",
    # Composition
    "Parent",
    "AmbiguousMemberError",
    "inherit",
    "extend",
    "create",
    "generate_instance",
    "get_instance_behavior",
    # Query
    "is_",
    "implements",
    "instanceof",
    "type_",
    "typeof",
]
