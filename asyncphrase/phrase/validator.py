"""
Phrase Validator: structural checks run once per recursion level.

Rejects phrases that cannot be evaluated before any predicate is invoked:
- absent phrase (None)
- empty sequence
- even-length sequence whose first element is not the NOT marker

Works on caller input (lists, tuples) and on Group nodes alike. Words that
are not sequences (predicates, Leaf, Negated) pass through unchanged.
"""

from __future__ import annotations

from typing import Any

from .nodes import Group, Operator
from .types import InvalidPhrase, Path


def _sequence_items(phrase: Any) -> tuple | list | None:
    if isinstance(phrase, Group):
        return phrase.items
    if isinstance(phrase, (list, tuple)):
        return phrase
    return None


def is_negation_prefixed(items: tuple | list) -> bool:
    """Check if a sequence starts with the NOT marker."""
    return bool(items) and Operator.from_token(items[0]) is Operator.NOT


def validate_phrase(phrase: Any, path: Path = ()) -> Any:
    """
    Validate the shape of one phrase level.

    Args:
        phrase: Caller input or Group node
        path: Recursion path of this phrase from the root

    Returns:
        The phrase, unchanged

    Raises:
        InvalidPhrase: If the phrase is absent, empty, or even-length
            without a leading NOT marker
    """
    if phrase is None:
        raise InvalidPhrase(path, "phrase is absent")

    items = _sequence_items(phrase)
    if items is None:
        return phrase

    if len(items) == 0:
        raise InvalidPhrase(path, "phrase is empty")

    if len(items) % 2 == 0 and not is_negation_prefixed(items):
        raise InvalidPhrase(
            path,
            f"phrase has even length {len(items)} and does not start with NOT",
        )

    return phrase


__all__ = [
    "is_negation_prefixed",
    "validate_phrase",
]
