"""
Async boolean phrase module.

Evaluates phrases such as

    [is_admin, Operator.OR, has_token, Operator.AND, [Operator.NOT, is_banned]]

where each leaf is a zero-argument predicate resolving to a boolean.

Design principles:
- Shape is validated once, when caller input is built into nodes
- AND binds tighter than OR
- Derived operators (XOR, NAND, NOR) are rewritten to AND/OR/NOT
- A predicate duplicated by rewriting still runs at most once
- Short-circuited predicates are never invoked
"""

from .types import (
    Path,
    format_path,
    PhraseError,
    InvalidPhrase,
    MalformedWord,
    UnassignedOperator,
    ReductionState,
    ReductionStep,
    EvaluationTrace,
)
from .nodes import (
    Operator,
    BINARY_OPERATORS,
    DERIVED_OPERATORS,
    REDUCIBLE_OPERATORS,
    TRUE_A,
    FALSE_A,
    Predicate,
    Leaf,
    Negated,
    Group,
    Word,
    PhraseItem,
    format_phrase,
)
from .validator import validate_phrase, is_negation_prefixed
from .builder import build_phrase, build_word, build_operator
from .grouping import MIN_GROUPABLE_LENGTH, group_phrase
from .rewrite import (
    ExpansionCache,
    LazyResult,
    ComplementPredicate,
    rewrite_xor,
    rewrite_nand,
    rewrite_nor,
    rewrite_not,
    rewrite_phrase,
)
from .evaluation import PhraseEvaluator, SequentialReducer, evaluate
from .loader import PhraseLoadError, load_phrase, load_phrase_file, phrase_from_data

__all__ = [
    # Types
    "Path",
    "format_path",
    "PhraseError",
    "InvalidPhrase",
    "MalformedWord",
    "UnassignedOperator",
    "ReductionState",
    "ReductionStep",
    "EvaluationTrace",
    # Nodes
    "Operator",
    "BINARY_OPERATORS",
    "DERIVED_OPERATORS",
    "REDUCIBLE_OPERATORS",
    "TRUE_A",
    "FALSE_A",
    "Predicate",
    "Leaf",
    "Negated",
    "Group",
    "Word",
    "PhraseItem",
    "format_phrase",
    # Validation / construction
    "validate_phrase",
    "is_negation_prefixed",
    "build_phrase",
    "build_word",
    "build_operator",
    # Grouping / rewriting
    "MIN_GROUPABLE_LENGTH",
    "group_phrase",
    "ExpansionCache",
    "LazyResult",
    "ComplementPredicate",
    "rewrite_xor",
    "rewrite_nand",
    "rewrite_nor",
    "rewrite_not",
    "rewrite_phrase",
    # Evaluation
    "PhraseEvaluator",
    "SequentialReducer",
    "evaluate",
    # Loading
    "PhraseLoadError",
    "load_phrase",
    "load_phrase_file",
    "phrase_from_data",
]
