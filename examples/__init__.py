"""Example consumers of protoclass."""
