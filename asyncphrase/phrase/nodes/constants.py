"""
Phrase Constants for the async boolean phrase language.

This module defines all constant values used by the phrase node types:
- Operator tokens (binary comparisons and the unary NOT marker)
- Operator sets (binary, derived, reducible)
- Literal predicates (TRUE_A, FALSE_A)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


# =============================================================================
# Operators
# =============================================================================
# Token strings are the canonical wire form of each operator.

class Operator(str, Enum):
    """
    Logical operator tokens.

    Binary operators appear at odd positions of a phrase. NOT is a unary
    prefix marker and only appears as the first element of a two-element
    word: [NOT, inner].
    """
    AND = "&"
    OR = "|"
    XOR = "XOR"
    NAND = "!&"
    NOR = "!|"
    NOT = "!"

    @classmethod
    def from_token(cls, token: Any) -> "Operator | None":
        """
        Normalize a caller token to an Operator.

        Accepts Operator members, token strings ("&", "|", "XOR", "!&", "!|", "!")
        and member names in any case ("AND", "or", "Nand").

        Returns:
            The matching Operator, or None if the token is not recognized.
        """
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            return None
        try:
            return cls(token)
        except ValueError:
            pass
        return cls.__members__.get(token.strip().upper())

    @property
    def is_binary(self) -> bool:
        return self is not Operator.NOT

    def __str__(self) -> str:
        return self.value


BINARY_OPERATORS = frozenset({
    Operator.AND,
    Operator.OR,
    Operator.XOR,
    Operator.NAND,
    Operator.NOR,
})

# Operators eliminated by rewriting, in the order the rules are applied
DERIVED_OPERATORS = (
    Operator.XOR,
    Operator.NAND,
    Operator.NOR,
)

# The only operators the sequential reducer accepts
REDUCIBLE_OPERATORS = frozenset({
    Operator.AND,
    Operator.OR,
})


# =============================================================================
# Literal Predicates
# =============================================================================
# Constant leaves for demos, tests and YAML phrase documents.

async def true_a() -> bool:
    """Predicate that always resolves to True."""
    return True


async def false_a() -> bool:
    """Predicate that always resolves to False."""
    return False


TRUE_A = true_a
FALSE_A = false_a


__all__ = [
    "Operator",
    "BINARY_OPERATORS",
    "DERIVED_OPERATORS",
    "REDUCIBLE_OPERATORS",
    "TRUE_A",
    "FALSE_A",
]
