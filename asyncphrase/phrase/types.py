"""
Phrase evaluation type definitions.

Error taxonomy, reduction states and trace records for phrase evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Any


Path = tuple[int, ...]


def format_path(path: Path) -> str:
    """Render a recursion path as 'root' or '0.2.1'."""
    if not path:
        return "root"
    return ".".join(str(i) for i in path)


# =============================================================================
# Errors
# =============================================================================

class PhraseError(Exception):
    """
    Base error for phrase construction and evaluation.

    Every error carries the recursion path (operand indices from the root
    phrase) where it was detected.
    """

    label = "Phrase error"

    def __init__(self, path: Path, detail: str):
        self.path = tuple(path)
        self.detail = detail
        super().__init__(f"{self.label} at {format_path(self.path)}: {detail}")


class InvalidPhrase(PhraseError):
    """Phrase is absent, empty, or even-length without a leading NOT."""

    label = "Invalid phrase"


class MalformedWord(PhraseError):
    """Operand is not a predicate, a NOT pair, or a non-empty nested phrase."""

    label = "Malformed word"


class UnassignedOperator(PhraseError):
    """Operator position holds an unrecognized or unreduced token."""

    label = "Unassigned operator"

    def __init__(self, path: Path, token: Any, detail: str | None = None):
        self.token = token
        super().__init__(path, detail or f"unrecognized operator token {token!r}")


# =============================================================================
# Reduction State
# =============================================================================

class ReductionState(IntEnum):
    """
    States of the sequential reducer.

    CONSUMING: more than one operand remains
    FINAL: exactly one operand remains
    DONE: result produced (or error raised)
    """

    CONSUMING = auto()
    FINAL = auto()
    DONE = auto()


# =============================================================================
# Trace
# =============================================================================

@dataclass(frozen=True)
class ReductionStep:
    """One consumed operand of a sequential reduction."""

    path: Path  # Path of the consumed operand
    operator: str | None  # Operator following the operand (None for the last one)
    value: bool  # Value the operand evaluated to
    short_circuit: bool = False  # True if this step ended the reduction early

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "path": format_path(self.path),
            "operator": self.operator,
            "value": self.value,
            "short_circuit": self.short_circuit,
        }


@dataclass
class EvaluationTrace:
    """Ordered record of every reduction step taken during one evaluation."""

    steps: list[ReductionStep] = field(default_factory=list)

    def record(self, step: ReductionStep) -> None:
        self.steps.append(step)

    @property
    def short_circuits(self) -> list[ReductionStep]:
        return [s for s in self.steps if s.short_circuit]

    def format_lines(self) -> list[str]:
        """Format trace as human-readable log lines (no prefix, caller adds it)."""
        lines: list[str] = []
        for step in self.steps:
            op = step.operator or "-"
            marker = " SHORT-CIRCUIT" if step.short_circuit else ""
            lines.append(f"{format_path(step.path)}: {step.value} {op}{marker}")
        return lines


__all__ = [
    "Path",
    "format_path",
    "PhraseError",
    "InvalidPhrase",
    "MalformedWord",
    "UnassignedOperator",
    "ReductionState",
    "ReductionStep",
    "EvaluationTrace",
]
