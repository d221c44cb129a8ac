"""Class-Commons style adapter.

Class Commons declares parents while creating the class, while protoclass
merges them beforehand. The merged fields are injected into the table as if
they had been inherited first.

Usage:
    from protoclass.compat import common

    Point = common.class_("Point", {"x": 0, "y": 0})
    p = common.instance(Point)
    assert common.instanceof(p, Point)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from protoclass.core import (
    ANCESTRY_KEY,
    BEHAVIOR_KEY,
    Class,
    Definition,
    Parent,
    create,
    inherit,
    is_,
)


def class_(name: str | None, table: Mapping[Any, Any], *parents: Parent) -> Class:
    """Create a named class from a table and its parents.

    Args:
        name: Display name of the class.
        table: Fields and methods of the class. Keys set to a value other
            than None win over inherited ones.
        *parents: Classes to inherit from.

    Returns:
        The finalized class.
    """
    base = inherit(*parents)
    definition = table if isinstance(table, Definition) else Definition(table)

    for key in [*base, ANCESTRY_KEY, BEHAVIOR_KEY]:
        if definition.get(key) is None:
            definition[key] = base[key]

    return create(definition, {"__name__": name})


def instance(cls: Class, *args: Any, **kwargs: Any) -> Any:
    return cls(*args, **kwargs)


def instanceof(obj: Any, cls: Any) -> bool:
    """Not part of Class Commons, provided for convenience."""
    return is_(obj, cls)
