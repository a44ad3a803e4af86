"""
Phrase Rewriter: eliminates XOR, NAND, NOR and NOT at one phrase level.

Rules, applied in this fixed order, each repeated until no occurrence remains:

    L XOR R   ->  (L' & !R') | (R' & !L')      L', R' evaluate at most once
    L NAND R  ->  !(L & R)
    L NOR R   ->  !(L | R)
    !W        ->  leaf returning the complement of W

Only the current level is rewritten; nested groups are rewritten when the
evaluator recurses into them. Every replacement builds a new tuple.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .nodes import Group, Leaf, Negated, Operator, PhraseItem, Word
from .types import Path

if TYPE_CHECKING:
    from .evaluation.protocols import WordEvaluatorProtocol


# =============================================================================
# Lazy Cached Evaluation
# =============================================================================

class ExpansionCache:
    """
    Results of operands evaluated within one rewrite expansion.

    Keyed by identity of the wrapped operand. Private to a single expansion:
    never shared between sibling operands or separate evaluations.
    """

    def __init__(self):
        self._results: dict[int, bool] = {}
        # Keeps keyed operands alive so their ids cannot be reused
        self._operands: dict[int, Word] = {}

    def get(self, operand: Word) -> bool | None:
        return self._results.get(id(operand))

    def store(self, operand: Word, value: bool) -> None:
        self._results[id(operand)] = value
        self._operands[id(operand)] = operand

    def __contains__(self, operand: Word) -> bool:
        return id(operand) in self._results

    def __len__(self) -> int:
        return len(self._results)


class LazyResult:
    """
    Zero-argument predicate that evaluates a word once and replays the result.

    The first call awaits the wrapped word through the evaluator and caches
    the boolean; later calls return the cached value without evaluating.
    """

    def __init__(
        self,
        operand: Word,
        cache: ExpansionCache,
        evaluator: "WordEvaluatorProtocol",
        path: Path,
    ):
        self.operand = operand
        self.path = path
        self._cache = cache
        self._evaluator = evaluator

    @property
    def resolved(self) -> bool:
        return self.operand in self._cache

    async def __call__(self) -> bool:
        if self.operand in self._cache:
            return self._cache.get(self.operand)
        value = await self._evaluator.evaluate_word(self.operand, self.path)
        self._cache.store(self.operand, value)
        return value

    def __repr__(self) -> str:
        return f"{self.operand!r}'"


class ComplementPredicate:
    """Synthetic leaf that evaluates a word and returns its complement."""

    def __init__(self, operand: Word, evaluator: "WordEvaluatorProtocol", path: Path):
        self.operand = operand
        self.path = path
        self._evaluator = evaluator

    async def __call__(self) -> bool:
        return not await self._evaluator.evaluate_word(self.operand, self.path)

    def __repr__(self) -> str:
        return f"!{self.operand!r}"


# =============================================================================
# Helpers
# =============================================================================

def _find_operator(items: tuple[PhraseItem, ...], operator: Operator) -> int:
    """Index of the first operator-position occurrence, or -1."""
    for index in range(1, len(items), 2):
        if items[index] is operator:
            return index
    return -1


def _find_negated(items: tuple[PhraseItem, ...]) -> int:
    """Index of the first operand-position Negated word, or -1."""
    for index in range(0, len(items), 2):
        if isinstance(items[index], Negated):
            return index
    return -1


def _splice(
    items: tuple[PhraseItem, ...],
    start: int,
    count: int,
    replacement: PhraseItem,
) -> tuple[PhraseItem, ...]:
    return items[:start] + (replacement,) + items[start + count:]


def _operand_path(path: Path, index: int) -> Path:
    return path + (index // 2,)


# =============================================================================
# Rewrite Rules
# =============================================================================

def rewrite_xor(
    items: tuple[PhraseItem, ...],
    evaluator: "WordEvaluatorProtocol",
    path: Path = (),
) -> tuple[PhraseItem, ...]:
    """
    Replace every `L XOR R` with `(L' & !R') | (R' & !L')`.

    L' and R' share one ExpansionCache, so each side's predicates run at
    most once even though both appear twice in the expansion.
    """
    index = _find_operator(items, Operator.XOR)
    while index > -1:
        left, right = items[index - 1], items[index + 1]
        cache = ExpansionCache()
        left_lazy = Leaf(LazyResult(left, cache, evaluator, _operand_path(path, index - 1)))
        right_lazy = Leaf(LazyResult(right, cache, evaluator, _operand_path(path, index + 1)))

        replacement = Group((
            Group((left_lazy, Operator.AND, Negated(right_lazy))),
            Operator.OR,
            Group((right_lazy, Operator.AND, Negated(left_lazy))),
        ))
        items = _splice(items, index - 1, 3, replacement)
        index = _find_operator(items, Operator.XOR)
    return items


def rewrite_nand(items: tuple[PhraseItem, ...]) -> tuple[PhraseItem, ...]:
    """Replace every `L NAND R` with `!(L & R)`."""
    index = _find_operator(items, Operator.NAND)
    while index > -1:
        left, right = items[index - 1], items[index + 1]
        replacement = Negated(Group((left, Operator.AND, right)))
        items = _splice(items, index - 1, 3, replacement)
        index = _find_operator(items, Operator.NAND)
    return items


def rewrite_nor(items: tuple[PhraseItem, ...]) -> tuple[PhraseItem, ...]:
    """Replace every `L NOR R` with `!(L | R)`."""
    index = _find_operator(items, Operator.NOR)
    while index > -1:
        left, right = items[index - 1], items[index + 1]
        replacement = Negated(Group((left, Operator.OR, right)))
        items = _splice(items, index - 1, 3, replacement)
        index = _find_operator(items, Operator.NOR)
    return items


def rewrite_not(
    items: tuple[PhraseItem, ...],
    evaluator: "WordEvaluatorProtocol",
    path: Path = (),
) -> tuple[PhraseItem, ...]:
    """Replace every Negated operand with a ComplementPredicate leaf."""
    index = _find_negated(items)
    while index > -1:
        negated = items[index]
        replacement = Leaf(ComplementPredicate(negated.inner, evaluator, _operand_path(path, index)))
        items = _splice(items, index, 1, replacement)
        index = _find_negated(items)
    return items


def rewrite_phrase(
    items: tuple[PhraseItem, ...],
    evaluator: "WordEvaluatorProtocol",
    path: Path = (),
) -> tuple[PhraseItem, ...]:
    """
    Apply all rewrite rules to one phrase level.

    NOT runs last so it also replaces the NOT words produced by NAND and NOR.
    """
    items = rewrite_xor(items, evaluator, path)
    items = rewrite_nand(items)
    items = rewrite_nor(items)
    items = rewrite_not(items, evaluator, path)
    return items


__all__ = [
    "ExpansionCache",
    "LazyResult",
    "ComplementPredicate",
    "rewrite_xor",
    "rewrite_nand",
    "rewrite_nor",
    "rewrite_not",
    "rewrite_phrase",
]
