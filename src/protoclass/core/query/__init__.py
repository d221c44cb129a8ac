"""Query functionality: ancestor membership and class-of-instance lookups."""

from protoclass.core.query.operations import implements, instanceof, is_, type_, typeof

__all__ = [
    "is_",
    "implements",
    "instanceof",
    "type_",
    "typeof",
]
