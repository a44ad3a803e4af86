"""
Phrase Builder: caller input to node tree conversion.

Converts the structured phrases callers write (nested lists or tuples of
predicates and operator tokens) into Leaf / Negated / Group nodes. Shape is
checked once here so the evaluator never re-inspects raw input.

Input forms:
```python
TRUE_A                                  # bare predicate
[TRUE_A]                                # single-element word
[Operator.NOT, FALSE_A]                 # negation
[TRUE_A, "&", [FALSE_A, "|", TRUE_A]]   # nested phrase
[Operator.NOT, a, "AND", b]             # inline NOT prefix on an operand
```

Usage:
    word = build_phrase([TRUE_A, Operator.AND, FALSE_A])
"""

from __future__ import annotations

from typing import Any

from .nodes import Group, Leaf, Negated, Operator, PhraseItem, Word
from .types import InvalidPhrase, MalformedWord, Path, UnassignedOperator
from .validator import validate_phrase


# =============================================================================
# Word / Operator Conversion
# =============================================================================

def build_operator(token: Any, path: Path) -> Operator:
    """
    Convert an operator-position token.

    Raises:
        UnassignedOperator: If the token is not a binary operator
    """
    op = Operator.from_token(token)
    if op is None:
        raise UnassignedOperator(path, token)
    if op is Operator.NOT:
        raise UnassignedOperator(
            path, token, "NOT is unary and cannot join two words"
        )
    return op


def build_word(raw: Any, path: Path) -> Word:
    """
    Convert an operand-position value into a word node.

    Raises:
        InvalidPhrase: If a nested sequence is structurally invalid
        MalformedWord: If the value is not a predicate, NOT pair or phrase
    """
    if isinstance(raw, (Leaf, Negated, Group)):
        return raw

    if isinstance(raw, (list, tuple)):
        return _build_sequence(raw, path)

    if Operator.from_token(raw) is not None:
        raise MalformedWord(path, f"operator {raw!r} where a word was expected")

    if raw is None or isinstance(raw, (str, bytes)) or not callable(raw):
        raise MalformedWord(
            path,
            f"{type(raw).__name__} value {raw!r} is not a predicate, NOT pair or phrase",
        )

    return Leaf(raw)


def _build_sequence(raw: list | tuple, path: Path) -> Word:
    validate_phrase(raw, path)

    items: list[PhraseItem] = []
    index = 0
    expect_word = True
    while index < len(raw):
        item = raw[index]
        item_path = path + (index,)
        if expect_word:
            if Operator.from_token(item) is Operator.NOT:
                # NOT prefixes the element that follows it
                if index + 1 >= len(raw):
                    raise MalformedWord(item_path, "NOT marker has no operand")
                items.append(Negated(build_word(raw[index + 1], path + (index + 1,))))
                index += 2
            else:
                items.append(build_word(item, item_path))
                index += 1
        else:
            items.append(build_operator(item, item_path))
            index += 1
        expect_word = not expect_word

    if expect_word:
        raise InvalidPhrase(path, "phrase ends with an operator")

    if len(items) == 1:
        return items[0]
    return Group(tuple(items))


# =============================================================================
# Entry Point
# =============================================================================

def build_phrase(phrase: Any) -> Word:
    """
    Build a node tree from caller input.

    Args:
        phrase: Predicate, sequence, or pre-built node

    Returns:
        Root word of the tree

    Raises:
        InvalidPhrase, MalformedWord, UnassignedOperator: with the path of
            the offending element (indices into the caller's sequences)
    """
    validate_phrase(phrase, ())
    return build_word(phrase, ())


__all__ = [
    "build_operator",
    "build_word",
    "build_phrase",
]
