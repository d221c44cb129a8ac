"""Compatibility adapters built on the core API."""

from protoclass.compat import common

__all__ = [
    "common",
]
