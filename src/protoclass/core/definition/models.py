"""Definition models: definitions, classes, behavior tables and instances.

A Definition is an ordinary mapping of field names to defaults and functions.
Hidden attachments (behavior table, ancestor set) are stored under
``IdentityKey`` sentinels and never appear when iterating fields.

Usage:
    Point = Definition(x=0, y=0)
    Point["norm"] = lambda self: (self.x**2 + self.y**2) ** 0.5
    Point = create(Point)
    p = Point()
    p.norm()
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, ClassVar

from protoclass.core.identity import BEHAVIOR_KEY, IdentityKey

NEW_HOOK = "__new__"
"""Total override of instantiation: ``hook(cls, behavior, *args, **kwargs)``."""

INHERIT_HOOK = "__inherit__"
"""Called for every new child definition: ``hook(child, child_behavior)``."""

CREATE_HOOK = "__create__"
"""Called when a definition is finalized: ``hook(cls, behavior)``."""

INDEX = "__index__"
"""Field-lookup delegation target of instances, set at finalization."""

NAME = "__name__"
"""Display name of a class. Never inherited."""

RESERVED_HOOKS = frozenset({NEW_HOOK, INHERIT_HOOK, CREATE_HOOK, INDEX, NAME})


class Behavior(dict[str, Any]):
    """Behavior table: hook and operator name -> function.

    Once finalized, ``instance_type`` holds the Python type whose instances
    are produced for the owning class.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.instance_type: type[Instance] | None = None


class Definition(MutableMapping[Any, Any]):
    """Class-in-progress: fields and methods plus hidden attachments.

    Definitions compare and hash by identity, like classes. Compare fields
    with ``dict(a) == dict(b)``.
    """

    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(self, fields: Mapping[Any, Any] | Iterable[Any] = (), /, **kwargs: Any) -> None:
        self._fields: dict[Any, Any] = {}
        self._attachments: dict[IdentityKey, Any] = {}
        self.update(fields, **kwargs)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, IdentityKey):
            return self._attachments[key]
        return self._fields[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, IdentityKey):
            self._attachments[key] = value
        else:
            self._fields[key] = value

    def __delitem__(self, key: Any) -> None:
        if isinstance(key, IdentityKey):
            del self._attachments[key]
        else:
            del self._fields[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"


class Class(Definition):
    """A finalized, callable Definition.

    Produced by ``create``; never instantiated directly.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        behavior = self._attachments.get(BEHAVIOR_KEY)
        if behavior is not None and behavior.get(NEW_HOOK) is not None:
            return behavior[NEW_HOOK](self, behavior, *args, **kwargs)

        # Late import to avoid circular dependency
        from protoclass.core.composition.core import generate_instance

        return generate_instance(self, *args, **kwargs)

    def __repr__(self) -> str:
        behavior = self._attachments.get(BEHAVIOR_KEY) or {}
        name = behavior.get(NAME)
        return f"<protoclass {name}>" if name else "<protoclass.Class>"


class Instance:
    """Base of every per-class instance type.

    Attribute misses fall through to the owning class's fields. Descriptors
    (functions, properties, static and class methods) are bound to the
    instance, so functions stored in a definition act as methods.
    """

    __behavior__: ClassVar[Behavior]

    def __getattr__(self, name: str) -> Any:
        definition = type(self).__behavior__[INDEX]
        try:
            value = definition[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} instance has no attribute {name!r}"
            ) from None
        bind = getattr(type(value), "__get__", None)
        if bind is None:
            return value
        return bind(value, self, type(self))
