"""Object pooling through behavior hooks.

Every class inheriting from Poolable gets its own ``pool`` (injected by the
``__inherit__`` hook). Unless a child overrides ``__new__``, instancing pops
a pooled instance when one is available instead of building a new one.

Usage:
    Bullet = create(inherit(Poolable))

    bullet = Bullet()
    bullet.enpool()          # done with it
    assert Bullet() is bullet
"""

from protoclass import Definition, create, generate_instance


def _inherit(child, behavior):
    child["pool"] = []


def _new(cls, behavior, *args, **kwargs):
    pool = cls["pool"]
    if pool:
        return pool.pop()
    return generate_instance(cls, *args, **kwargs)


def enpool(self):
    """Return the instance to its class pool. Call just before discarding it."""
    self.pool.append(self)


Poolable = create(
    Definition(pool=[], enpool=enpool),
    {"__inherit__": _inherit, "__new__": _new},
)
