"""
Utility modules.
"""

from .logger import get_logger, setup_logger, PhraseLogger
from .log_context import (
    LogContext,
    evaluation_scope,
    get_evaluation_id,
    get_log_context,
)

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "PhraseLogger",
    # Log context
    "LogContext",
    "evaluation_scope",
    "get_evaluation_id",
    "get_log_context",
]
