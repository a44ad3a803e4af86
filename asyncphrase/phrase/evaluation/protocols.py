"""
Shared protocols for phrase evaluation.

Provides Protocol classes to avoid circular imports between the rewriter,
the sequential reducer and the evaluator core.
"""

from __future__ import annotations

from typing import Protocol

from ..nodes import Word
from ..types import Path


class WordEvaluatorProtocol(Protocol):
    """Protocol for the word evaluator to avoid circular imports."""

    async def evaluate_word(self, word: Word, path: Path = ()) -> bool: ...
