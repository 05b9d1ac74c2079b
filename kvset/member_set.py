"""MemberSet: an unordered collection of unique members."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any, Callable, Generic, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


class MemberSet(Generic[T]):
    """A duplicate-free, unordered collection of hashable members.

    Iteration order is unspecified and may differ between calls.
    """

    def __init__(self, members: Iterable[T] = ()) -> None:
        self._members: set[T] = set(members)

    # -- Mutation --

    def add(self, *members: T) -> None:
        """Add members. Members already present are left alone."""
        if not members:
            return
        self._members.update(members)

    def remove(self, *members: T) -> None:
        """Remove members if present. Absent members are ignored."""
        if not members:
            return
        for member in members:
            self._members.discard(member)

    def merge(self, other: MemberSet[T]) -> None:
        """Add every member of ``other`` to this set in place."""
        other.each(lambda member: self._members.add(member))

    def separate(self, other: MemberSet[T]) -> None:
        """Remove every member of ``other`` from this set in place.

        Not the opposite of ``merge``: members of ``other`` that were
        already in this set before a merge are removed too.
        """
        self.remove(*other.list())

    # -- Queries --

    def has(self, *members: T) -> bool:
        """True only if every given member is present.

        An empty argument list is False, not vacuously True.
        """
        if not members:
            return False
        return all(member in self._members for member in members)

    def size(self) -> int:
        return len(self._members)

    def each(self, visit: Callable[[T], Any]) -> None:
        """Call ``visit`` per member until it returns ``False``."""
        for member in self._members:
            if visit(member) is False:
                break

    def copy(self) -> MemberSet[T]:
        return MemberSet(self._members)

    def list(self) -> list[T]:
        """A new list of all members, owned by the caller."""
        return [*self._members]

    def __iter__(self) -> Iterator[T]:
        return iter(self._members)

    def __contains__(self, member: object) -> bool:
        return member in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"MemberSet({self._members!r})"
