"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from protoclass import Definition, create
from protoclass.config import reset


@pytest.fixture
def fresh_settings():
    """Process-wide settings reloaded from the environment around a test."""
    reset()
    yield
    reset()


def _init(self, x=0, y=0):
    self.x = x
    self.y = y


@pytest.fixture
def point_cls():
    """A finalized class with an init and plain defaults."""
    return create(Definition(x=0, y=0, init=_init), {"__name__": "Point"})


@pytest.fixture
def unrelated_cls():
    return create(Definition(z=0))
