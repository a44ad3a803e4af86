"""
Logging context propagation for phrase evaluations.

Provides contextvars-based context that flows automatically through async
code, so every log line written while one evaluate() call is running carries
that call's evaluation_id, even when several evaluations share an event loop.

Usage:
    from asyncphrase.utils.log_context import evaluation_scope, get_evaluation_id

    with evaluation_scope() as ctx:
        # All logs within this scope include ctx.evaluation_id
        result = await evaluator.evaluate_word(word)
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Generator
from contextvars import ContextVar
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any


# =============================================================================
# Context Variables (async-safe)
# =============================================================================

_evaluation_id: ContextVar[str | None] = ContextVar("evaluation_id", default=None)
_extra_context: ContextVar[dict[str, Any]] = ContextVar("extra_context", default={})


def _generate_id() -> str:
    """Generate a short unique ID (first 12 chars of UUID4)."""
    return uuid.uuid4().hex[:12]


# =============================================================================
# LogContext dataclass
# =============================================================================

@dataclass
class LogContext:
    """Snapshot of the current logging context."""
    evaluation_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_log_fields(self) -> dict[str, Any]:
        """Return only the fields that should be included in log events."""
        fields = {}
        if self.evaluation_id:
            fields["evaluation_id"] = self.evaluation_id
        if self.extra:
            fields.update(self.extra)
        return fields


def get_log_context() -> LogContext:
    """Get the current logging context."""
    return LogContext(
        evaluation_id=_evaluation_id.get(),
        extra=_extra_context.get().copy(),
    )


def get_evaluation_id() -> str | None:
    """Get current evaluation ID."""
    return _evaluation_id.get()


# =============================================================================
# Context Managers
# =============================================================================

@contextmanager
def evaluation_scope(
    evaluation_id: str | None = None,
    **extra: Any,
) -> Generator[LogContext, None, None]:
    """
    Start a new evaluation context.

    Generates an evaluation_id if not provided. Restores the previous
    context on exit.

    Args:
        evaluation_id: Optional evaluation ID (generated if not provided)
        **extra: Additional context fields

    Yields:
        LogContext snapshot of the active context
    """
    id_token = _evaluation_id.set(evaluation_id or f"eval-{_generate_id()}")
    extra_token = None
    if extra:
        extra_token = _extra_context.set({**_extra_context.get(), **extra})

    try:
        yield get_log_context()
    finally:
        if extra_token is not None:
            _extra_context.reset(extra_token)
        _evaluation_id.reset(id_token)


# =============================================================================
# Logging Filter
# =============================================================================

class EvaluationContextFilter(logging.Filter):
    """Stamps each record with the active evaluation_id ('-' outside a scope)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.evaluation_id = _evaluation_id.get() or "-"
        return True


__all__ = [
    "LogContext",
    "get_log_context",
    "get_evaluation_id",
    "evaluation_scope",
    "EvaluationContextFilter",
]
