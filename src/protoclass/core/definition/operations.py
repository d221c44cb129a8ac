"""Pure helpers shared by the merge engine and the finalizer."""

from __future__ import annotations

import inspect
from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

from protoclass.core.definition.models import NAME, RESERVED_HOOKS, Behavior, Instance

# Dunders that would break the instance type if taken from a behavior table.
_PROTECTED_DUNDERS = RESERVED_HOOKS | {
    "__init__",
    "__init_subclass__",
    "__class__",
    "__class_getitem__",
    "__dict__",
    "__slots__",
    "__module__",
    "__qualname__",
    "__getattr__",
    "__getattribute__",
    "__setattr__",
    "__delattr__",
    "__behavior__",
}

DEFAULT_INSTANCE_NAME = "Instance"

T = TypeVar("T", bound=MutableMapping[Any, Any])


def copy_into(source: Mapping[Any, Any] | None, target: T) -> T:
    """Shallow-copy every field of source into target.

    Args:
        source: Mapping to copy from. None is treated as empty.
        target: Mapping to copy into, overwriting colliding keys.

    Returns:
        The target mapping.
    """
    if source:
        for key in source:
            target[key] = source[key]
    return target


def is_method(value: Any) -> bool:
    """Whether a field value takes part in diamond-conflict detection."""
    return inspect.isroutine(value)


def drop_name(behavior: Behavior) -> Behavior:
    """Remove the display name so children do not inherit it."""
    behavior.pop(NAME, None)
    return behavior


def is_operator(name: Any) -> bool:
    """Check if a behavior entry should be installed on the instance type.

    Args:
        name: Behavior table key.

    Returns:
        True for dunder names that Python dispatches on the type.
    """
    return (
        isinstance(name, str)
        and len(name) > 4
        and name.startswith("__")
        and name.endswith("__")
        and name not in _PROTECTED_DUNDERS
    )


def build_instance_type(behavior: Behavior) -> type[Instance]:
    """Build the Python type whose objects are instances of a class.

    Operator entries of the behavior table become methods of the type, so
    ``a + b`` or ``str(a)`` dispatch to them natively.

    Args:
        behavior: Finalized behavior table (``__index__`` already set).

    Returns:
        A fresh ``Instance`` subclass bound to the behavior table.
    """
    namespace: dict[str, Any] = {
        name: value for name, value in behavior.items() if is_operator(name) and callable(value)
    }
    name = str(behavior.get(NAME) or DEFAULT_INSTANCE_NAME)
    namespace["__behavior__"] = behavior
    namespace["__module__"] = "protoclass"
    namespace["__qualname__"] = name
    return type(name, (Instance,), namespace)
