"""protoclass: runtime class composition from plain mappings.

Usage:
    from protoclass import Definition, create, inherit, is_

    Point = Definition(x=0, y=0)

    def init(self, x=0, y=0):
        self.x = x
        self.y = y

    Point["init"] = init
    Point = create(Point, {"__name__": "Point"})

    Labeled = Definition(label="")
    LabeledPoint = create(inherit(Point, Labeled))

    p = LabeledPoint(1, 2)
    assert is_(p, Point) and p.label == ""
"""

__version__ = "0.1.0"

# Base class
from protoclass.base import BaseClass

# Settings
from protoclass.config import CompositionSettings, configure, get_settings

# Core primitives
from protoclass.core import (
    ANCESTRY_KEY,
    BEHAVIOR_KEY,
    CREATE_HOOK,
    INHERIT_HOOK,
    NEW_HOOK,
    AmbiguousMemberError,
    Ancestry,
    Behavior,
    Class,
    Definition,
    IdentityKey,
    Instance,
    create,
    extend,
    generate_instance,
    get_instance_behavior,
    implements,
    inherit,
    instanceof,
    is_,
    type_,
    typeof,
)

__all__ = [
    # Version
    "__version__",
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
    # Composition
    "inherit",
    "extend",
    "create",
    "generate_instance",
    "get_instance_behavior",
    "AmbiguousMemberError",
    # Query
    "is_",
    "implements",
    "instanceof",
    "type_",
    "typeof",
    # Settings
    "CompositionSettings",
    "configure",
    "get_settings",
    # Base
    "BaseClass",
]
