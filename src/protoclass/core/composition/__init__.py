"""Composition functionality: merge engine, finalizer and instancing."""

from protoclass.core.composition.core import (
    AmbiguousMemberError,
    Parent,
    create,
    extend,
    generate_instance,
    get_instance_behavior,
    inherit,
)

__all__ = [
    "AmbiguousMemberError",
    "Parent",
    "inherit",
    "extend",
    "create",
    "generate_instance",
    "get_instance_behavior",
]
