"""Tests for composition settings."""

import warnings

import pytest

from protoclass import CompositionSettings, Definition, configure, get_settings, inherit
from protoclass.config import reset


def test_defaults(fresh_settings, monkeypatch):
    monkeypatch.delenv("PROTOCLASS_DIAMOND_DISAMBIGUATION", raising=False)

    assert CompositionSettings().diamond_disambiguation is False


def test_environment_variable(fresh_settings, monkeypatch):
    monkeypatch.setenv("PROTOCLASS_DIAMOND_DISAMBIGUATION", "true")

    assert reset().diamond_disambiguation is True
    assert get_settings().diamond_disambiguation is True


def test_configure_replaces_settings(fresh_settings):
    before = get_settings()

    after = configure(diamond_disambiguation=True)

    assert after is get_settings()
    assert after is not before
    assert after.diamond_disambiguation is True


def test_configure_before_first_use_is_silent(fresh_settings):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        configure(diamond_disambiguation=True)


def test_configure_after_first_use_warns(fresh_settings):
    """Reconfiguring after inherit() is allowed but flagged.

    Why: Definitions merged earlier keep the behavior they were built with.
    """
    inherit(Definition())

    with pytest.warns(UserWarning, match="after the first inherit"):
        configure(diamond_disambiguation=True)


def test_explicit_flag_does_not_mark_settings_in_use(fresh_settings):
    inherit(Definition(), diamond_disambiguation=False)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        configure(diamond_disambiguation=True)
