"""
Phrase Node Types for the async boolean phrase language.

Nodes are frozen dataclasses forming a sum type:

    Word = Leaf | Negated | Group

Usage:
    # [TRUE_A, AND, [NOT, FALSE_A]]
    phrase = Group((
        Leaf(TRUE_A),
        Operator.AND,
        Negated(Leaf(FALSE_A)),
    ))
"""

from .constants import (
    Operator,
    BINARY_OPERATORS,
    DERIVED_OPERATORS,
    REDUCIBLE_OPERATORS,
    TRUE_A,
    FALSE_A,
)
from .words import (
    Predicate,
    Leaf,
    Negated,
    Group,
    format_phrase,
)
from .types import Word, PhraseItem

__all__ = [
    # Constants
    "Operator",
    "BINARY_OPERATORS",
    "DERIVED_OPERATORS",
    "REDUCIBLE_OPERATORS",
    "TRUE_A",
    "FALSE_A",
    # Nodes
    "Predicate",
    "Leaf",
    "Negated",
    "Group",
    "format_phrase",
    # Types
    "Word",
    "PhraseItem",
]
