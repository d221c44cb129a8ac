"""Identity functionality: sentinel keys and identity-based ancestor sets."""

from protoclass.core.identity.models import ANCESTRY_KEY, BEHAVIOR_KEY, Ancestry, IdentityKey

__all__ = [
    "IdentityKey",
    "BEHAVIOR_KEY",
    "ANCESTRY_KEY",
    "Ancestry",
]
