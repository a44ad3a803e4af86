"""
Phrase Word Nodes.

This module defines the word node types of a phrase tree:
- Leaf: a zero-argument predicate producing an eventual boolean
- Negated: logical negation of an inner word ([NOT, inner])
- Group: a nested phrase (word, operator, word, ..., word)

Nodes are frozen dataclasses. Grouping and rewriting build new nodes and
never modify existing ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union

from .constants import Operator

if TYPE_CHECKING:
    from .types import PhraseItem, Word


Predicate = Callable[[], Union[bool, Awaitable[bool]]]


def _predicate_name(predicate: Any) -> str:
    name = getattr(predicate, "__name__", None)
    if name and name != "<lambda>":
        return name
    return repr(predicate)


@dataclass(frozen=True, eq=False)
class Leaf:
    """
    A leaf predicate.

    Compared by identity: two leaves wrapping the same callable are still
    distinct operands, and each invocation is an observable event.

    Attributes:
        predicate: Zero-argument callable returning bool or an awaitable of bool
    """
    predicate: Predicate

    def __post_init__(self):
        if not callable(self.predicate):
            raise TypeError(
                f"Leaf: predicate must be callable, got {type(self.predicate).__name__}"
            )

    def __repr__(self) -> str:
        return _predicate_name(self.predicate)


@dataclass(frozen=True, eq=False)
class Negated:
    """
    NOT word: negates the inner word.

    Examples:
        Negated(Leaf(FALSE_A))                          # [NOT, FALSE_A]
        Negated(Group((Leaf(a), Operator.AND, Leaf(b))))  # [NOT, [a, AND, b]]
    """
    inner: "Word"

    def __repr__(self) -> str:
        return f"!{self.inner!r}"


@dataclass(frozen=True, eq=False)
class Group:
    """
    A nested phrase.

    Attributes:
        items: Tuple alternating words and operators, odd length on valid input
    """
    items: tuple["PhraseItem", ...]

    @property
    def operands(self) -> tuple["PhraseItem", ...]:
        return self.items[0::2]

    @property
    def operators(self) -> tuple["PhraseItem", ...]:
        return self.items[1::2]

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        parts = [str(item) if isinstance(item, Operator) else repr(item) for item in self.items]
        return f"({' '.join(parts)})"


def format_phrase(word: "Word") -> str:
    """Render a word tree without the outermost parentheses."""
    text = repr(word)
    if isinstance(word, Group) and text.startswith("(") and text.endswith(")"):
        return text[1:-1]
    return text


__all__ = [
    "Predicate",
    "Leaf",
    "Negated",
    "Group",
    "format_phrase",
]
