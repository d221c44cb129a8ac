"""Definition functionality: models and pure helpers."""

from protoclass.core.definition.models import (
    CREATE_HOOK,
    INDEX,
    INHERIT_HOOK,
    NAME,
    NEW_HOOK,
    RESERVED_HOOKS,
    Behavior,
    Class,
    Definition,
    Instance,
)
from protoclass.core.definition.operations import (
    build_instance_type,
    copy_into,
    drop_name,
    is_method,
    is_operator,
)

__all__ = [
    # Models
    "Definition",
    "Class",
    "Behavior",
    "Instance",
    "NEW_HOOK",
    "INHERIT_HOOK",
    "CREATE_HOOK",
    "INDEX",
    "NAME",
    "RESERVED_HOOKS",
    # Operations
    "copy_into",
    "is_method",
    "drop_name",
    "is_operator",
    "build_instance_type",
]
