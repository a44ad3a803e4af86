"""
Precedence grouping: AND binds tighter than OR.

Every run of AND-joined operands is folded into one nested Group so it is
reduced atomically relative to the surrounding OR operators, exactly as
multiplication binds tighter than addition:

    a | b & c & d | e   ->   a | ((b & c) & d) | e

OR and the derived operators (XOR, NAND, NOR) are left where they are.
"""

from __future__ import annotations

from .nodes import Group, Operator, PhraseItem

# Phrases shorter than this have at most one operator and need no folding
MIN_GROUPABLE_LENGTH = 4


def group_phrase(items: tuple[PhraseItem, ...]) -> tuple[PhraseItem, ...]:
    """
    Fold AND triples into nested groups.

    Scans operator positions left to right. On AND the window
    (left, AND, right) becomes a single Group and the scan resumes at the
    operator following that group, so consecutive ANDs chain left-nested.

    Args:
        items: Flat phrase items (word, op, word, ...)

    Returns:
        New tuple of items; the input is returned as-is when shorter than
        MIN_GROUPABLE_LENGTH
    """
    if len(items) < MIN_GROUPABLE_LENGTH:
        return items

    grouped = tuple(items)
    index = 1
    while index < len(grouped):
        if grouped[index] is Operator.AND:
            folded = Group(grouped[index - 1:index + 2])
            grouped = grouped[:index - 1] + (folded,) + grouped[index + 2:]
            continue
        index += 2

    return grouped


__all__ = [
    "MIN_GROUPABLE_LENGTH",
    "group_phrase",
]
