"""
Phrase Type Aliases.

This module defines type aliases used across the phrase modules.
Placed in a separate module to avoid circular imports.
"""

from __future__ import annotations

from .constants import Operator
from .words import Leaf, Negated, Group


# =============================================================================
# Type Aliases
# =============================================================================

# Every evaluable unit of a phrase tree
Word = Leaf | Negated | Group

# Anything that may sit at a position of Group.items
PhraseItem = Word | Operator


__all__ = [
    "Word",
    "PhraseItem",
]
