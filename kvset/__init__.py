"""kvset: In-memory keyed set store."""

from .algebra import difference, intersection, union
from .member_set import MemberSet
from .registry import Registry
from .store import SetStore, registry

__all__ = [
    "MemberSet",
    "Registry",
    "SetStore",
    "difference",
    "intersection",
    "registry",
    "union",
]
