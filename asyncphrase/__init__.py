"""
asyncphrase - Async Boolean Phrase Evaluator

Evaluates boolean phrases whose leaves are asynchronous predicates, with
operator precedence and native short-circuit semantics.
"""

__version__ = "1.0.0"
__author__ = "asyncphrase"

from .config import get_config
from .phrase import (
    Operator,
    TRUE_A,
    FALSE_A,
    PhraseError,
    InvalidPhrase,
    MalformedWord,
    UnassignedOperator,
    EvaluationTrace,
    PhraseEvaluator,
    build_phrase,
    evaluate,
)

__all__ = [
    "__version__",
    "get_config",
    "Operator",
    "TRUE_A",
    "FALSE_A",
    "PhraseError",
    "InvalidPhrase",
    "MalformedWord",
    "UnassignedOperator",
    "EvaluationTrace",
    "PhraseEvaluator",
    "build_phrase",
    "evaluate",
]
