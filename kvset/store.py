"""SetStore protocol and factory function."""

from __future__ import annotations

import random
from collections.abc import Hashable
from typing import Any, Protocol, runtime_checkable

from .registry import Registry


@runtime_checkable
class SetStore(Protocol):
    """Protocol for keyed set stores.

    Any caller exposing the set command family (a command dispatcher,
    an embedding application) should target this surface.
    Implementations: ``Registry``.
    """

    def sadd(self, key: str, member: Hashable, *members: Hashable) -> int: ...
    def spop(self, key: str, count: int = 1) -> list[Any]: ...
    def sismember(self, key: str, member: Hashable) -> bool: ...
    def smismember(self, key: str, *members: Hashable) -> list[bool]: ...
    def srandmember(self, key: str, count: int = 1) -> list[Any]: ...
    def srem(self, key: str, member: Hashable) -> bool: ...
    def smove(self, src: str, dst: str, member: Hashable) -> bool: ...
    def scard(self, key: str) -> int: ...
    def smembers(self, key: str) -> list[Any]: ...
    def sunion(self, *keys: str) -> list[Any]: ...
    def sunionstore(self, dest: str, *keys: str) -> int: ...
    def sdiff(self, *keys: str) -> list[Any]: ...
    def sdiffstore(self, dest: str, *keys: str) -> int: ...
    def sinter(self, *keys: str) -> list[Any]: ...
    def sinterstore(self, dest: str, *keys: str) -> int: ...
    def key_exists(self, key: str) -> bool: ...
    def sclear(self, key: str) -> None: ...
    def keys(self) -> list[str]: ...
    def __contains__(self, key: object) -> bool: ...
    def __len__(self) -> int: ...


def registry(
    *,
    seed: int | str | bytes | None = None,
    rng: random.Random | None = None,
) -> SetStore:
    """Create a SetStore with sensible defaults.

    Args:
        seed: Seed for a private ``random.Random`` so that ``spop`` and
            ``srandmember`` are reproducible.
        rng: A caller-owned random source. Mutually exclusive with
            ``seed``.

    Returns:
        A ``Registry`` instance.
    """
    if seed is not None and rng is not None:
        raise ValueError("Pass either seed or rng, not both")
    if seed is not None:
        rng = random.Random(seed)
    return Registry(rng)
