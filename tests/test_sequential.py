"""
Tests for the SequentialReducer state machine.

CONSUMING -> FINAL -> DONE on a full reduction, CONSUMING -> DONE on a
short-circuit, and UnassignedOperator for anything but AND/OR.
"""

import asyncio

import pytest

from asyncphrase.phrase import (
    EvaluationTrace,
    Leaf,
    Operator,
    PhraseEvaluator,
    ReductionState,
    SequentialReducer,
    UnassignedOperator,
)

AND = Operator.AND
OR = Operator.OR


def reducer_for(items, trace=None):
    return SequentialReducer(tuple(items), PhraseEvaluator(), path=(), trace=trace)


class TestStateTransitions:
    """State after each step."""

    def test_full_reduction(self, recorder):
        a = Leaf(recorder.make("a", True))
        b = Leaf(recorder.make("b", True))
        c = Leaf(recorder.make("c", False))
        reducer = reducer_for([a, AND, b, AND, c])

        assert reducer.state is ReductionState.CONSUMING
        assert reducer.remaining == 3

        async def steps():
            states = []
            while reducer.state is not ReductionState.DONE:
                states.append(await reducer.step())
            return states

        states = asyncio.run(steps())
        assert states == [
            ReductionState.CONSUMING,
            ReductionState.FINAL,
            ReductionState.DONE,
        ]
        assert reducer.result is False
        assert reducer.remaining == 0
        assert recorder.calls == ["a", "b", "c"]

    def test_short_circuit_goes_straight_to_done(self, recorder):
        a = Leaf(recorder.make("a", True))
        b = Leaf(recorder.make("b", False))
        reducer = reducer_for([a, OR, b])

        assert asyncio.run(reducer.step()) is ReductionState.DONE
        assert reducer.result is True
        assert recorder.calls == ["a"]

    def test_single_operand_starts_final(self, recorder):
        a = Leaf(recorder.make("a", True))
        reducer = reducer_for([a])
        assert reducer.state is ReductionState.FINAL
        assert asyncio.run(reducer.run()) is True

    def test_step_after_done_is_noop(self, recorder):
        a = Leaf(recorder.make("a", False))
        reducer = reducer_for([a])
        asyncio.run(reducer.run())
        assert asyncio.run(reducer.step()) is ReductionState.DONE
        assert recorder.count("a") == 1


class TestOperatorChecks:
    """Only AND and OR reach the reducer."""

    def test_unrewritten_operator_raises(self, recorder):
        a = Leaf(recorder.make("a", True))
        b = Leaf(recorder.make("b", True))
        reducer = reducer_for([a, Operator.XOR, b])

        with pytest.raises(UnassignedOperator, match="survived rewriting"):
            asyncio.run(reducer.run())
        assert recorder.calls == []

    def test_foreign_token_raises(self, recorder):
        a = Leaf(recorder.make("a", True))
        b = Leaf(recorder.make("b", True))
        reducer = reducer_for([a, "&&", b])

        with pytest.raises(UnassignedOperator) as exc_info:
            asyncio.run(reducer.run())
        assert exc_info.value.token == "&&"


class TestTrace:
    """Steps recorded in order with operand paths."""

    def test_trace_records_each_operand(self, recorder):
        a = Leaf(recorder.make("a", False))
        b = Leaf(recorder.make("b", False))
        c = Leaf(recorder.make("c", True))
        trace = EvaluationTrace()
        asyncio.run(reducer_for([a, OR, b, OR, c], trace=trace).run())

        assert [s.path for s in trace.steps] == [(0,), (1,), (2,)]
        assert [s.operator for s in trace.steps] == ["OR", "OR", None]
        assert [s.value for s in trace.steps] == [False, False, True]
        assert trace.short_circuits == []

    def test_format_lines(self, recorder):
        a = Leaf(recorder.make("a", True))
        b = Leaf(recorder.make("b", True))
        trace = EvaluationTrace()
        asyncio.run(reducer_for([a, OR, b], trace=trace).run())

        assert trace.format_lines() == ["0: True OR SHORT-CIRCUIT"]
        assert trace.steps[0].to_dict() == {
            "path": "0",
            "operator": "OR",
            "value": True,
            "short_circuit": True,
        }

    def test_reduction_steps_logged(self, recorder, debug_logger, caplog):
        a = Leaf(recorder.make("a", True))
        b = Leaf(recorder.make("b", False))
        reducer = SequentialReducer(
            (a, AND, b), PhraseEvaluator(), path=(3,),
            logger=debug_logger, log_steps=True,
        )
        with caplog.at_level("DEBUG", logger="asyncphrase"):
            asyncio.run(reducer.run())

        assert "[REDUCE] | path=3.0 | value=True | op=AND" in caplog.text
        assert "[REDUCE] | path=3.1 | value=False | op=-" in caplog.text
