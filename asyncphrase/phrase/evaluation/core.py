"""
Phrase Evaluator.

Evaluates phrase trees whose leaves are asynchronous predicates, with native
boolean short-circuit semantics.

Pipeline per recursion level:
    validate -> group -> (single word: evaluate it) -> rewrite -> reduce

Key Features:
- AND binds tighter than OR
- XOR/NAND/NOR/NOT rewritten to AND/OR with single-invocation guarantees
- Strictly sequential, left-to-right predicate invocation
- Short-circuited predicates are never called

Usage:
    evaluator = PhraseEvaluator()
    result = await evaluator.evaluate([TRUE_A, Operator.AND, FALSE_A])
"""

from __future__ import annotations

import inspect
from typing import Any

from ..builder import build_phrase
from ..grouping import group_phrase
from ..nodes import Group, Leaf, Negated, Word, format_phrase
from ..rewrite import rewrite_phrase
from ..types import EvaluationTrace, MalformedWord, Path, PhraseError
from ..validator import is_negation_prefixed, validate_phrase
from .sequential import SequentialReducer
from ...config import get_config
from ...utils.log_context import evaluation_scope
from ...utils.logger import get_logger


class PhraseEvaluator:
    """
    Evaluates phrases built from leaf predicates and operator tokens.

    Stateless apart from the optional trace; the memoization caches created
    by rewriting live only inside one evaluation.

    Attributes:
        trace: Optional EvaluationTrace receiving every reduction step

    Example:
        evaluator = PhraseEvaluator()

        # [TRUE_A, OR, FALSE_A, AND, TRUE_A] -> TRUE_A OR (FALSE_A AND TRUE_A)
        result = await evaluator.evaluate(
            [TRUE_A, Operator.OR, FALSE_A, Operator.AND, TRUE_A]
        )
    """

    def __init__(
        self,
        trace: EvaluationTrace | None = None,
        trace_reductions: bool | None = None,
    ):
        """
        Initialize evaluator.

        Args:
            trace: Collects reduction steps when provided.
            trace_reductions: Log every reduction step at DEBUG
                (default: PHRASE_TRACE_REDUCTIONS from config).
        """
        if trace_reductions is None:
            trace_reductions = get_config().evaluation.trace_reductions
        self.trace = trace
        self._log_steps = trace_reductions
        self.logger = get_logger()

    async def evaluate(self, phrase: Any) -> bool:
        """
        Evaluate a phrase supplied by a caller.

        Args:
            phrase: Predicate, nested sequence of predicates and operator
                tokens, or a pre-built word node.

        Returns:
            The phrase's boolean value.

        Raises:
            InvalidPhrase, MalformedWord, UnassignedOperator: on malformed input
            Any exception raised by a leaf predicate, unchanged
        """
        with evaluation_scope() as ctx:
            try:
                word = build_phrase(phrase)
                self.logger.debug(f"Evaluating {format_phrase(word)}")
                result = await self.evaluate_word(word)
            except PhraseError as e:
                self.logger.error(f"Phrase rejected: {e}")
                raise
            except Exception as e:
                self.logger.error(f"Predicate failed: {type(e).__name__}: {e}")
                raise
            self.logger.debug(f"Result {result} ({ctx.evaluation_id})")
            return result

    async def evaluate_word(self, word: Word, path: Path = ()) -> bool:
        """
        Evaluate a single word.

        Leaf invokes its predicate, Negated negates its inner word, Group
        recurses through the full phrase pipeline.

        Raises:
            MalformedWord: If the word is not a Leaf, Negated or non-empty Group
        """
        if isinstance(word, Leaf):
            return await self._invoke(word)
        elif isinstance(word, Negated):
            return not await self.evaluate_word(word.inner, path)
        elif isinstance(word, Group):
            if not word.items:
                raise MalformedWord(path, "nested phrase is empty")
            return await self.evaluate_phrase(word, path)
        raise MalformedWord(
            path,
            f"{type(word).__name__} is not a predicate, NOT pair or phrase",
        )

    async def evaluate_phrase(self, phrase: Group, path: Path = ()) -> bool:
        """
        Evaluate one phrase level: validate, group, rewrite, reduce.

        Args:
            phrase: Group whose items alternate words and operators
            path: Recursion path of this phrase from the root
        """
        validate_phrase(phrase, path)

        if len(phrase.items) == 2 and is_negation_prefixed(phrase.items):
            return not await self.evaluate_word(phrase.items[1], path + (1,))

        grouped = group_phrase(phrase.items)
        if len(grouped) == 1:
            return await self.evaluate_word(grouped[0], path + (0,))

        rewritten = rewrite_phrase(grouped, self, path)
        reducer = SequentialReducer(
            rewritten,
            self,
            path,
            trace=self.trace,
            logger=self.logger,
            log_steps=self._log_steps,
        )
        return await reducer.run()

    async def _invoke(self, leaf: Leaf) -> bool:
        result = leaf.predicate()
        if inspect.isawaitable(result):
            result = await result
        return bool(result)


async def evaluate(phrase: Any, trace: EvaluationTrace | None = None) -> bool:
    """
    Convenience function to evaluate a phrase.

    Args:
        phrase: Phrase to evaluate.
        trace: Optional trace receiving every reduction step.

    Returns:
        The phrase's boolean value.
    """
    evaluator = PhraseEvaluator(trace=trace)
    return await evaluator.evaluate(phrase)


__all__ = [
    "PhraseEvaluator",
    "evaluate",
]
