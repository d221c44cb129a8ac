"""Composition engine: merging, finalizing and instancing definitions.

Usage:
    Rectangle = create(Definition(width=0, height=0))
    Clickable = create(Definition(on_click=lambda self: None))

    Button = inherit(Rectangle, Clickable)
    Button["label"] = "OK"
    Button = create(Button, {"__name__": "Button"})

    button = Button()
    assert is_(button, Rectangle)
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from protoclass.config import mark_in_use
from protoclass.core.definition import (
    CREATE_HOOK,
    INDEX,
    INHERIT_HOOK,
    Behavior,
    Class,
    Definition,
    build_instance_type,
    copy_into,
    drop_name,
    is_method,
)
from protoclass.core.identity import ANCESTRY_KEY, BEHAVIOR_KEY, Ancestry

Parent: TypeAlias = Mapping[Any, Any] | Callable[[], Mapping[Any, Any]]
"""A definition or class, or a zero-argument factory returning one."""


class AmbiguousMemberError(Exception):
    """Raised when a member left ambiguous by multiple inheritance is called."""

    def __init__(self, member: Any) -> None:
        self.member = member
        super().__init__(
            f"Member {member!r} is ambiguous: it is implemented differently in multiple "
            f"parent classes and must be overridden in the inheriting class."
        )


def _ambiguous_member(member: Any) -> Callable[..., Any]:
    def ambiguous(*args: Any, **kwargs: Any) -> Any:
        raise AmbiguousMemberError(member)

    return ambiguous


def _resolve(parent: Parent) -> Mapping[Any, Any]:
    if callable(parent) and not isinstance(parent, Mapping):
        return parent()
    return parent


def inherit(*parents: Parent, diamond_disambiguation: bool | None = None) -> Definition:
    """Merge parent definitions into a new child definition.

    Parents are folded right to left, so the first listed parent wins every
    field and behavior collision. The child's ancestor set is the union of
    the parents and their own ancestor sets. Every ``__inherit__`` hook found
    in the parents' behavior tables is called with the finished child.

    Args:
        *parents: Definitions, classes or zero-argument factories of either.
        diamond_disambiguation: Replace members implemented by different
            functions in several parents with a function raising
            AmbiguousMemberError. None reads the process-wide setting.

    Returns:
        A new, not yet finalized Definition.
    """
    if diamond_disambiguation is None:
        diamond_disambiguation = mark_in_use().diamond_disambiguation

    child = Definition()
    ancestry = Ancestry()
    behavior = Behavior()

    seen_methods: dict[Any, Any] = {}
    ambiguous: dict[Any, None] = {}
    inherit_hooks: list[Callable[[Definition, Behavior], Any]] = []

    for parent in reversed(parents):
        ancestry.add(parent)
        resolved = _resolve(parent)

        parent_ancestry = resolved.get(ANCESTRY_KEY)
        if parent_ancestry:
            ancestry.update(parent_ancestry)

        parent_behavior = resolved.get(BEHAVIOR_KEY)
        if parent_behavior:
            copy_into(parent_behavior, behavior)
            if parent_behavior.get(INHERIT_HOOK) is not None:
                inherit_hooks.append(parent_behavior[INHERIT_HOOK])

        for key in resolved:
            value = resolved[key]
            child[key] = value

            if diamond_disambiguation and is_method(value):
                first = seen_methods.setdefault(key, value)
                if first is not value and first != value:
                    ambiguous[key] = None

    drop_name(behavior)
    child[ANCESTRY_KEY] = ancestry
    child[BEHAVIOR_KEY] = behavior

    for key in ambiguous:
        child[key] = _ambiguous_member(key)

    for hook in inherit_hooks:
        hook(child, behavior)

    return child


extend = inherit


def create(definition: Mapping[Any, Any], behavior: Mapping[str, Any] | None = None) -> Class:
    """Finalize a definition into a callable class.

    A Definition is turned into a Class in place; any other mapping is copied
    into a new Class. The ``__create__`` hook runs every time this is called,
    including for descendants that inherited it.

    Args:
        definition: Fields and methods of the class, possibly from inherit().
        behavior: Extra behavior entries, overriding inherited ones.

    Returns:
        The finalized class.
    """
    if isinstance(definition, Class):
        warnings.warn(
            f"create() called on already finalized {definition!r}; "
            f"its __create__ hook runs again.",
            stacklevel=2,
        )
    if not isinstance(definition, Definition):
        definition = Definition(definition)

    table = Behavior()
    copy_into(definition.get(BEHAVIOR_KEY), table)
    copy_into(behavior, table)
    table[INDEX] = definition

    ancestry = definition.get(ANCESTRY_KEY)
    if ancestry is None:
        ancestry = Ancestry()
        definition[ANCESTRY_KEY] = ancestry
    ancestry.add(definition)

    table.instance_type = build_instance_type(table)
    definition[BEHAVIOR_KEY] = table
    definition.__class__ = Class

    if table.get(CREATE_HOOK) is not None:
        table[CREATE_HOOK](definition, table)

    return definition  # type: ignore[return-value]


def get_instance_behavior(cls: Mapping[Any, Any]) -> Behavior | None:
    """Return the behavior table given to instances of a class.

    Args:
        cls: A class returned by create().

    Returns:
        The finalized behavior table, or None if cls was never created.
    """
    table = cls.get(BEHAVIOR_KEY)
    if isinstance(table, Behavior) and table.instance_type is not None:
        return table
    return None


def generate_instance(cls: Class, *args: Any, **kwargs: Any) -> Any:
    """Create an instance with the default protocol, ignoring ``__new__``.

    Mostly useful inside a ``__new__`` hook that wants default instancing.

    Args:
        cls: The class to instance.
        *args: Positional constructor arguments passed to ``init``.
        **kwargs: Keyword constructor arguments passed to ``init``.

    Returns:
        A new instance, after its ``init`` (if any) has run.

    Raises:
        TypeError: If cls was never finalized with create().
    """
    table = get_instance_behavior(cls)
    if table is None:
        raise TypeError(f"{cls!r} is not a created class; call create() first")

    instance = table.instance_type()  # type: ignore[misc]
    init = getattr(instance, "init", None)
    if init is not None:
        init(*args, **kwargs)
    return instance
