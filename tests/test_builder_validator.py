"""
Tests for phrase validation and node building.

Every malformed phrase is rejected before any predicate runs, with an error
naming the path of the offending element.
"""

import asyncio

import pytest

from asyncphrase import (
    FALSE_A,
    TRUE_A,
    InvalidPhrase,
    MalformedWord,
    Operator,
    PhraseError,
    UnassignedOperator,
    build_phrase,
    evaluate,
)
from asyncphrase.phrase import (
    Group,
    Leaf,
    Negated,
    build_operator,
    format_phrase,
    is_negation_prefixed,
    validate_phrase,
)

AND = Operator.AND
OR = Operator.OR
NOT = Operator.NOT


# =============================================================================
# validate_phrase
# =============================================================================

class TestValidatePhrase:
    """Structural checks on one phrase level."""

    def test_absent_phrase(self):
        with pytest.raises(InvalidPhrase, match="absent"):
            validate_phrase(None)

    def test_empty_phrase(self):
        with pytest.raises(InvalidPhrase, match="empty"):
            validate_phrase([])

    def test_even_length_without_not(self):
        with pytest.raises(InvalidPhrase, match="even length 4"):
            validate_phrase([TRUE_A, AND, FALSE_A, TRUE_A])

    def test_even_length_with_not_accepted(self):
        phrase = [NOT, TRUE_A]
        assert validate_phrase(phrase) is phrase

    def test_group_nodes_validated(self):
        with pytest.raises(InvalidPhrase):
            validate_phrase(Group((Leaf(TRUE_A), AND)), path=(2,))

    def test_non_sequences_pass_through(self):
        assert validate_phrase(TRUE_A) is TRUE_A

    def test_is_negation_prefixed(self):
        assert is_negation_prefixed([NOT, TRUE_A])
        assert is_negation_prefixed(["!", TRUE_A])
        assert not is_negation_prefixed([TRUE_A, AND, FALSE_A])
        assert not is_negation_prefixed([])


# =============================================================================
# build_phrase errors
# =============================================================================

class TestBuildErrors:
    """Boundary errors and their paths."""

    def test_unknown_operator_token(self):
        with pytest.raises(UnassignedOperator) as exc_info:
            build_phrase([TRUE_A, "MAYBE", FALSE_A])
        assert exc_info.value.path == (1,)
        assert exc_info.value.token == "MAYBE"

    def test_non_string_operator(self):
        with pytest.raises(UnassignedOperator):
            build_phrase([TRUE_A, 42, FALSE_A])

    def test_not_in_operator_position(self):
        with pytest.raises(UnassignedOperator, match="unary"):
            build_operator(NOT, (1,))

    def test_operator_in_word_position(self):
        with pytest.raises(MalformedWord) as exc_info:
            build_phrase([AND, OR, TRUE_A])
        assert exc_info.value.path == (0,)

    @pytest.mark.parametrize("value", [None, "true", b"x", 3, 1.5, {"a": 1}])
    def test_non_predicate_words(self, value):
        with pytest.raises(MalformedWord):
            build_phrase([TRUE_A, AND, value])

    def test_nested_error_path(self):
        with pytest.raises(InvalidPhrase) as exc_info:
            build_phrase([TRUE_A, OR, [FALSE_A, AND, [TRUE_A, AND]]])
        assert exc_info.value.path == (2, 2)
        assert "at 2.2" in str(exc_info.value)

    def test_empty_nested_phrase(self):
        with pytest.raises(InvalidPhrase) as exc_info:
            build_phrase([TRUE_A, AND, []])
        assert exc_info.value.path == (2,)

    def test_root_error_path(self):
        with pytest.raises(InvalidPhrase, match="at root"):
            build_phrase(None)

    def test_trailing_not_marker(self):
        # Odd length, leading NOT, nothing left for the last operand
        with pytest.raises(InvalidPhrase):
            build_phrase([NOT, TRUE_A, AND])

    def test_all_errors_share_base(self):
        for phrase in ([], [TRUE_A, "?", TRUE_A], [TRUE_A, AND, "x"]):
            with pytest.raises(PhraseError):
                build_phrase(phrase)


# =============================================================================
# build_phrase structure
# =============================================================================

class TestBuildStructure:
    """Node shapes produced from caller input."""

    def test_bare_predicate_is_leaf(self):
        word = build_phrase(TRUE_A)
        assert isinstance(word, Leaf)
        assert word.predicate is TRUE_A

    def test_single_element_unwrapped(self):
        word = build_phrase([[TRUE_A]])
        assert isinstance(word, Leaf)

    def test_not_pair_is_negated(self):
        word = build_phrase([NOT, FALSE_A])
        assert isinstance(word, Negated)
        assert isinstance(word.inner, Leaf)

    def test_tokens_normalized(self):
        word = build_phrase([TRUE_A, "&", FALSE_A, "or", TRUE_A])
        assert word.operators == (AND, OR)

    def test_inline_not_folds_into_operand(self):
        word = build_phrase([NOT, TRUE_A, AND, FALSE_A])
        assert len(word) == 3
        assert isinstance(word.items[0], Negated)

    def test_format_phrase(self):
        word = build_phrase([TRUE_A, AND, [NOT, FALSE_A], OR, TRUE_A])
        assert format_phrase(word) == "true_a & !false_a | true_a"

    def test_leaf_requires_callable(self):
        with pytest.raises(TypeError):
            Leaf("not callable")


# =============================================================================
# No predicate runs on malformed input
# =============================================================================

class TestRejectedBeforeInvocation:
    """Validation happens before any leaf is called."""

    def test_trailing_malformed_group(self, recorder):
        p = recorder.make("p", True)
        with pytest.raises(InvalidPhrase):
            asyncio.run(evaluate([p, AND, p, AND, [p, OR]]))
        assert recorder.calls == []

    def test_malformed_after_short_circuit(self, recorder):
        p = recorder.make("p", True)
        with pytest.raises(UnassignedOperator):
            asyncio.run(evaluate([p, OR, [p, "??", p]]))
        assert recorder.calls == []
