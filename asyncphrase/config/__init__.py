"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    LogConfig,
    EvaluationConfig,
    VALID_LOG_LEVELS,
)

__all__ = [
    "Config",
    "get_config",
    "LogConfig",
    "EvaluationConfig",
    "VALID_LOG_LEVELS",
]
