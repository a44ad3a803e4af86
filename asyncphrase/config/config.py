"""
Configuration management for asyncphrase.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: str = "logs"
    # Console only unless enabled; file logs are daily
    log_to_file: bool = False

    def __post_init__(self):
        self.level = self.level.upper().strip()


@dataclass
class EvaluationConfig:
    """
    Phrase evaluation settings.

    trace_reductions logs every consumed operand (path, operator, value)
    at DEBUG level, in addition to the short-circuit lines always logged.
    """
    trace_reductions: bool = False


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Later files override earlier ones
        for env_name in [".env", env_file]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=True)

        self.log = self._load_log_config()
        self.evaluation = self._load_evaluation_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """
        Load logging configuration from environment.

        Environment variables:
        - PHRASE_LOG_LEVEL: Logger level (default: INFO)
        - PHRASE_LOG_DIR: Directory for file logs (default: logs)
        - PHRASE_LOG_TO_FILE: Also write daily log files (default: false)
        """
        return LogConfig(
            level=os.getenv("PHRASE_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("PHRASE_LOG_DIR", "logs"),
            log_to_file=_env_flag("PHRASE_LOG_TO_FILE"),
        )

    def _load_evaluation_config(self) -> EvaluationConfig:
        """
        Load evaluation configuration from environment.

        Environment variables:
        - PHRASE_TRACE_REDUCTIONS: Log every reduction step (default: false)
        """
        return EvaluationConfig(
            trace_reductions=_env_flag("PHRASE_TRACE_REDUCTIONS"),
        )

    def reload(self, env_file: str = ".env"):
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configuration.

        Returns:
            Tuple of (is_valid, list of error/warning messages)
        """
        errors = []
        warnings = []

        if self.log.level not in VALID_LOG_LEVELS:
            errors.append(
                f"INVALID: PHRASE_LOG_LEVEL={self.log.level!r}. "
                f"Must be one of {', '.join(VALID_LOG_LEVELS)}."
            )

        if self.log.log_to_file and not self.log.log_dir:
            errors.append("INVALID: PHRASE_LOG_TO_FILE=true requires PHRASE_LOG_DIR.")

        if self.evaluation.trace_reductions and self.log.level != "DEBUG":
            warnings.append(
                "PHRASE_TRACE_REDUCTIONS=true has no visible effect unless "
                "PHRASE_LOG_LEVEL=DEBUG."
            )

        messages = errors + [f"WARNING: {w}" for w in warnings]
        return len(errors) == 0, messages

    def summary(self) -> dict:
        """Configuration summary for display."""
        return {
            "log_level": self.log.level,
            "log_dir": self.log.log_dir,
            "log_to_file": self.log.log_to_file,
            "trace_reductions": self.evaluation.trace_reductions,
        }


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)
