"""
Phrase Evaluation Package.

This package provides the evaluator for async boolean phrases:

- core.py: PhraseEvaluator class, evaluate() entry point and word dispatch
- sequential.py: SequentialReducer state machine (left-to-right short-circuit)
- protocols.py: WordEvaluatorProtocol shared with the rewriter

Usage:
    from asyncphrase.phrase.evaluation import PhraseEvaluator, evaluate

    result = await evaluate([TRUE_A, Operator.OR, FALSE_A])
"""

from .core import PhraseEvaluator, evaluate
from .sequential import SequentialReducer

__all__ = [
    "PhraseEvaluator",
    "evaluate",
    "SequentialReducer",
]
