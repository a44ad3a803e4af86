"""
Sequential reduction of a grouped, rewritten phrase level.

Consumes operands strictly left to right:

    CONSUMING --(operand & false / operand | true)--> DONE
    CONSUMING --(otherwise, drop operand + operator)--> CONSUMING or FINAL
    FINAL     --(evaluate last operand)--> DONE

Operands after a short-circuit are discarded without being evaluated, so
their predicates are never invoked.
"""

from __future__ import annotations

from ..nodes import Operator, PhraseItem, REDUCIBLE_OPERATORS
from ..types import (
    EvaluationTrace,
    Path,
    ReductionState,
    ReductionStep,
    UnassignedOperator,
    format_path,
)
from .protocols import WordEvaluatorProtocol
from ...utils.logger import PhraseLogger


class SequentialReducer:
    """
    State machine reducing one phrase level to a boolean.

    Expects the items produced by grouping and rewriting: words joined only
    by AND and OR.

    Attributes:
        state: Current ReductionState
        result: Final boolean once state is DONE, else None

    Example:
        reducer = SequentialReducer(items, evaluator, path=(0,))
        value = await reducer.run()
    """

    def __init__(
        self,
        items: tuple[PhraseItem, ...],
        evaluator: WordEvaluatorProtocol,
        path: Path = (),
        trace: EvaluationTrace | None = None,
        logger: PhraseLogger | None = None,
        log_steps: bool = False,
    ):
        self._pending = tuple(items)
        self._evaluator = evaluator
        self._path = path
        self._trace = trace
        self._logger = logger
        self._log_steps = log_steps
        self._consumed = 0
        self.result: bool | None = None
        self.state = ReductionState.CONSUMING if len(self._pending) > 1 else ReductionState.FINAL

    @property
    def remaining(self) -> int:
        """Number of operands not yet consumed."""
        if self.state is ReductionState.DONE:
            return 0
        return (len(self._pending) + 1) // 2

    async def step(self) -> ReductionState:
        """Consume one operand and return the new state."""
        if self.state is ReductionState.DONE:
            return self.state

        operand = self._pending[0]
        operand_path = self._path + (self._consumed,)

        if self.state is ReductionState.FINAL:
            value = await self._evaluator.evaluate_word(operand, operand_path)
            self._record(operand_path, None, value)
            self._finish(value)
            return self.state

        operator = self._pending[1]
        self._check_operator(operator, self._path + (self._consumed,))

        value = await self._evaluator.evaluate_word(operand, operand_path)

        if operator is Operator.AND and not value:
            self._short_circuit(operand_path, operator, False)
        elif operator is Operator.OR and value:
            self._short_circuit(operand_path, operator, True)
        else:
            self._record(operand_path, operator, value)
            self._pending = self._pending[2:]
            self._consumed += 1
            if len(self._pending) == 1:
                self.state = ReductionState.FINAL

        return self.state

    async def run(self) -> bool:
        """Step until DONE and return the result."""
        while self.state is not ReductionState.DONE:
            await self.step()
        return self.result

    def _check_operator(self, operator: PhraseItem, path: Path) -> None:
        if isinstance(operator, Operator) and operator in REDUCIBLE_OPERATORS:
            return
        if isinstance(operator, Operator):
            raise UnassignedOperator(
                path, operator, f"operator {operator.name} survived rewriting"
            )
        raise UnassignedOperator(path, operator)

    def _short_circuit(self, path: Path, operator: Operator, value: bool) -> None:
        skipped = (len(self._pending) - 1) // 2
        self._record(path, operator, value, short_circuit=True)
        if self._logger is not None:
            self._logger.short_circuit(format_path(path), operator.name, value, skipped)
        self._finish(value)

    def _finish(self, value: bool) -> None:
        self.result = value
        self._pending = ()
        self.state = ReductionState.DONE

    def _record(
        self,
        path: Path,
        operator: Operator | None,
        value: bool,
        short_circuit: bool = False,
    ) -> None:
        op_name = operator.name if operator is not None else None
        if self._trace is not None:
            self._trace.record(ReductionStep(path, op_name, value, short_circuit))
        if self._log_steps and self._logger is not None:
            self._logger.reduction(format_path(path), op_name, value)


__all__ = [
    "SequentialReducer",
]
