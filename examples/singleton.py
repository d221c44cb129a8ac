"""Singleton classes through a ``__new__`` hook.

Every class inheriting from Singleton (and not overriding ``__new__``)
yields the same instance each time it is called.

Usage:
    Config = create(inherit(Singleton))
    assert Config() is Config()
"""

import threading

from protoclass import Definition, create, generate_instance

_instances = {}

# Hooks may run from several threads; the engine itself does not lock.
_lock = threading.RLock()


def _new(cls, behavior, *args, **kwargs):
    with _lock:
        if cls not in _instances:
            _instances[cls] = generate_instance(cls, *args, **kwargs)
        return _instances[cls]


Singleton = create(Definition(), {"__name__": "Singleton", "__new__": _new})
