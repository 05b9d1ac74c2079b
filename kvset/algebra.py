"""Set algebra over two or more MemberSets.

None of these functions mutate their operands; each returns a new set.
"""

from __future__ import annotations

from .member_set import MemberSet, T


def union(a: MemberSet[T], b: MemberSet[T], *rest: MemberSet[T]) -> MemberSet[T]:
    """Members present in any operand."""
    result = a.copy()
    result.merge(b)
    for other in rest:
        result.merge(other)
    return result


def difference(a: MemberSet[T], b: MemberSet[T], *rest: MemberSet[T]) -> MemberSet[T]:
    """Members of ``a`` that are in none of the other operands."""
    result = a.copy()
    result.separate(b)
    for other in rest:
        result.separate(other)
    return result


def intersection(a: MemberSet[T], b: MemberSet[T], *rest: MemberSet[T]) -> MemberSet[T]:
    """Members present in every operand."""
    operands = (a, b, *rest)
    candidates = union(a, b, *rest)
    result = candidates.copy()

    def keep_if_shared(member: T) -> bool:
        if not all(operand.has(member) for operand in operands):
            result.remove(member)
        return True

    candidates.each(keep_if_shared)
    return result
