"""A ready-made base class.

Inheriting from BaseClass guarantees every class has a constructor and the
membership query methods.

Usage:
    Enemy = inherit(BaseClass)
    Enemy = create(Enemy)
    assert Enemy().is_(BaseClass)
"""

from protoclass.core import Definition, create, implements, is_, type_


def _init(self, *args, **kwargs):
    pass


BaseClass = create(
    Definition(is_=is_, implements=implements, type_=type_, init=_init),
    {"__name__": "BaseClass"},
)
