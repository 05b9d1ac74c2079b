"""Registry: string keys mapped to independent MemberSets."""

from __future__ import annotations

import logging
import random
from collections.abc import Hashable
from typing import Any, Callable

from .algebra import difference, intersection, union
from .member_set import MemberSet

logger = logging.getLogger(__name__)

Combine = Callable[..., MemberSet[Any]]


def _check_key(key: object) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Expected str key, got {type(key).__name__}")


class Registry:
    """In-memory keyed set store with the SADD/SREM/SUNION command family.

    Missing keys never raise: reads return ``False``, ``0`` or ``[]``.
    A key that is not a ``str`` raises ``TypeError``.
    A key stays present after its last member is removed; only
    ``sclear`` deletes it.

    Not safe for concurrent use without external locking.

    Args:
        rng: Random source for ``spop`` and ``srandmember``. A fresh
            ``random.Random`` is used when omitted.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._records: dict[str, MemberSet[Any]] = {}
        self._rng = rng if rng is not None else random.Random()

    # -- Key lookup --

    def _exists(self, key: str) -> bool:
        _check_key(key)
        return key in self._records

    def _field_exists(self, key: str, member: Hashable) -> bool:
        if not self._exists(key):
            return False
        return self._records[key].has(member)

    def _ensure(self, key: str) -> MemberSet[Any]:
        if not self._exists(key):
            self._records[key] = MemberSet()
            logger.debug("Created set %r", key)
        return self._records[key]

    # -- Single-key commands --

    def sadd(self, key: str, member: Hashable, *members: Hashable) -> int:
        """Add members to ``key``, creating it if needed.

        Returns the cardinality of ``key`` after the add.
        """
        target = self._ensure(key)
        target.add(member, *members)
        return target.size()

    def spop(self, key: str, count: int = 1) -> list[Any]:
        """Remove and return up to ``count`` random members of ``key``."""
        if not self._exists(key) or count <= 0:
            return []
        source = self._records[key]
        popped = self._rng.sample(source.list(), min(count, source.size()))
        source.remove(*popped)
        return popped

    def sismember(self, key: str, member: Hashable) -> bool:
        return self._field_exists(key, member)

    def smismember(self, key: str, *members: Hashable) -> list[bool]:
        """Membership of each given member, in argument order."""
        return [self._field_exists(key, member) for member in members]

    def srandmember(self, key: str, count: int = 1) -> list[Any]:
        """Sample members of ``key`` without removing them.

        A positive ``count`` returns up to ``count`` distinct members.
        A negative ``count`` returns exactly ``-count`` members drawn with
        replacement, so duplicates may appear. An empty set yields ``[]``
        either way.
        """
        if not self._exists(key) or count == 0:
            return []
        members = self._records[key].list()
        if not members:
            return []
        if count > 0:
            return self._rng.sample(members, min(count, len(members)))
        return self._rng.choices(members, k=-count)

    def srem(self, key: str, member: Hashable) -> bool:
        """Remove ``member`` from ``key``. True if it was there."""
        if not self._field_exists(key, member):
            return False
        self._records[key].remove(member)
        return True

    def smove(self, src: str, dst: str, member: Hashable) -> bool:
        """Move ``member`` from ``src`` to ``dst``.

        Returns False without touching either set when ``member`` is not
        in ``src``.
        """
        if not self._field_exists(src, member):
            return False
        target = self._ensure(dst)
        self._records[src].remove(member)
        target.add(member)
        return True

    def scard(self, key: str) -> int:
        if not self._exists(key):
            return 0
        return self._records[key].size()

    def smembers(self, key: str) -> list[Any]:
        if not self._exists(key):
            return []
        return self._records[key].list()

    # -- Multi-key commands --

    def _combine(self, combine: Combine, keys: tuple[str, ...]) -> list[Any]:
        if not keys:
            return []
        if len(keys) == 1:
            return self.smembers(keys[0])
        operands = [self._records[k] for k in keys if self._exists(k)]
        if not operands:
            return []
        if len(operands) == 1:
            return operands[0].list()
        return combine(*operands).list()

    def _store(self, dest: str, members: list[Any]) -> int:
        for member in members:
            self.sadd(dest, member)
        return len(members)

    def sunion(self, *keys: str) -> list[Any]:
        """Members of any existing key. Missing keys are skipped."""
        return self._combine(union, keys)

    def sunionstore(self, dest: str, *keys: str) -> int:
        """Add ``sunion(*keys)`` into ``dest``.

        Returns the size of the computed union, not the cardinality of
        ``dest`` afterwards.
        """
        return self._store(dest, self.sunion(*keys))

    def sdiff(self, *keys: str) -> list[Any]:
        """Members of the first existing key that are in none of the others.

        Missing keys are skipped, so the first key that exists is the base.
        """
        return self._combine(difference, keys)

    def sdiffstore(self, dest: str, *keys: str) -> int:
        """Add ``sdiff(*keys)`` into ``dest`` and return its size."""
        return self._store(dest, self.sdiff(*keys))

    def sinter(self, *keys: str) -> list[Any]:
        """Members shared by every existing key. Missing keys are skipped."""
        return self._combine(intersection, keys)

    def sinterstore(self, dest: str, *keys: str) -> int:
        """Add ``sinter(*keys)`` into ``dest`` and return its size.

        With exactly one key nothing is stored; the key's cardinality
        is returned as is.
        """
        if not keys:
            return 0
        if len(keys) == 1:
            return self.scard(keys[0])
        return self._store(dest, self.sinter(*keys))

    # -- Key management --

    def key_exists(self, key: str) -> bool:
        """True if ``key`` is present, even when its set is empty."""
        return self._exists(key)

    def sclear(self, key: str) -> None:
        """Delete ``key`` and its set. No-op for a missing key."""
        if self._exists(key):
            del self._records[key]
            logger.debug("Cleared set %r", key)

    def keys(self) -> list[str]:
        return list(self._records)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._records

    def __len__(self) -> int:
        return len(self._records)
