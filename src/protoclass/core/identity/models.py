"""Identity keys and ancestor sets.

Usage:
    behavior = definition[BEHAVIOR_KEY]
    if SomeClass in definition[ANCESTRY_KEY]:
        ...
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, eq=False)
class IdentityKey:
    """Process-wide sentinel used to attach hidden data to a definition.

    Compared by identity only, so no field name can ever collide with it.
    """

    label: str

    def __repr__(self) -> str:
        return f"[{self.label}]"


BEHAVIOR_KEY = IdentityKey("Behavior")
ANCESTRY_KEY = IdentityKey("Ancestry")


class Ancestry:
    """Set of definitions compared by identity.

    Parents may be plain dicts, which are unhashable, so membership is keyed
    on ``id()``. Members are held strongly, which keeps their ids stable for
    the lifetime of the set.
    """

    __slots__ = ("_members",)

    def __init__(self, members: Iterable[Any] = ()) -> None:
        self._members: dict[int, Any] = {}
        for member in members:
            self.add(member)

    def add(self, member: Any) -> None:
        self._members[id(member)] = member

    def update(self, other: Iterable[Any]) -> None:
        for member in other:
            self.add(member)

    def __contains__(self, member: object) -> bool:
        return id(member) in self._members

    def __iter__(self) -> Iterator[Any]:
        return iter(self._members.values())

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"Ancestry({len(self._members)} members)"
