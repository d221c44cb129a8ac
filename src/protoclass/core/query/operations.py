"""Membership queries over instances and classes.

Both queries are total: objects not produced by protoclass yield False or
None instead of raising.

Usage:
    if is_(enemy, ArmedEnemy):
        enemy.disarm()

    assert type_(Vector2(1, 2)) is Vector2
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from protoclass.core.definition import INDEX, Class, Definition
from protoclass.core.identity import ANCESTRY_KEY, BEHAVIOR_KEY, Ancestry


def type_(instance: Any) -> Any | None:
    """Return the class an instance was created from.

    Args:
        instance: Any object. A class resolves to itself.

    Returns:
        The class whose fields the instance delegates to, or None.
    """
    if isinstance(instance, Class):
        behavior = instance.get(BEHAVIOR_KEY)
    else:
        behavior = getattr(type(instance), "__behavior__", None)
    if not isinstance(behavior, Mapping):
        return None
    return behavior.get(INDEX)


typeof = type_


def _ancestry_of(obj: Any) -> Ancestry | None:
    if isinstance(obj, Definition):
        source: Any = obj
    else:
        source = type_(obj)
    if not isinstance(source, Mapping):
        return None
    ancestry = source.get(ANCESTRY_KEY)
    return ancestry if isinstance(ancestry, Ancestry) else None


def is_(instance: Any, cls: Any) -> bool:
    """Check if an instance was created from a class or one of its children.

    Args:
        instance: The instance to check. A class or definition is checked
            against its own ancestor set.
        cls: The class to check for.

    Returns:
        True if cls is in the instance's ancestor set, False otherwise.
    """
    ancestry = _ancestry_of(instance)
    return ancestry is not None and cls in ancestry


implements = is_
instanceof = is_
