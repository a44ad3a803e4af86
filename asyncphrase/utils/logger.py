"""
Logging system for asyncphrase.
Provides structured, human-readable logs with console and optional file output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import get_config
from .log_context import EvaluationContextFilter


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        # Format a copy so file handlers sharing the record stay uncolored
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class PhraseLogger:
    """
    Central logging system for phrase evaluation.

    Features:
    - Console output with colors
    - Optional daily file output
    - Separate error log for rejected phrases and failed predicates
    - Every line stamped with the active evaluation_id
    """

    _instance: Optional['PhraseLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False):
        if PhraseLogger._initialized:
            return

        self.log_dir = Path(log_dir)
        self.log_to_file = log_to_file
        if log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger("asyncphrase", log_level)
        self.error_logger = self._create_logger("asyncphrase.errors", "ERROR", "errors")
        # Already echoed by main_logger
        self.error_logger.propagate = False

        PhraseLogger._initialized = True

    def _create_logger(self, name: str, level: str, file_prefix: str = None) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.handlers.clear()

        context_filter = EvaluationContextFilter()

        console_handler = logging.StreamHandler()
        console_handler.addFilter(context_filter)
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(evaluation_id)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        if self.log_to_file:
            prefix = file_prefix or "phrase"
            log_file = self.log_dir / f"{prefix}_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.addFilter(context_filter)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(evaluation_id)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    def set_level(self, level: str):
        """Change the console/file level of the main logger."""
        self.main_logger.setLevel(getattr(logging, level.upper()))

    def info(self, msg: str, *args, **kwargs):
        """Log info message."""
        self.main_logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message."""
        self.main_logger.error(msg, *args, **kwargs)
        self.error_logger.error(msg, *args, **kwargs)

    def is_debug(self) -> bool:
        return self.main_logger.isEnabledFor(logging.DEBUG)

    def reduction(self, path: str, operator: Optional[str], value: bool, **kwargs):
        """
        Log a consumed operand with structured format.

        Args:
            path: Recursion path of the operand (e.g., "0.2")
            operator: Operator following the operand, None for the last one
            value: Value the operand evaluated to
            **kwargs: Additional fields
        """
        parts = [
            "[REDUCE]",
            f"path={path}",
            f"value={value}",
            f"op={operator or '-'}",
        ]
        for key, val in kwargs.items():
            parts.append(f"{key}={val}")
        self.main_logger.debug(" | ".join(parts))

    def short_circuit(self, path: str, operator: str, value: bool, skipped: int):
        """
        Log a short-circuit decision.

        Args:
            path: Recursion path of the deciding operand
            operator: AND or OR
            value: Result the reduction settled on
            skipped: Number of operands discarded unevaluated
        """
        msg = f"[SHORT-CIRCUIT] path={path} | op={operator} | result={value} | skipped={skipped}"
        self.main_logger.debug(msg)


# Global logger instance
_logger: Optional[PhraseLogger] = None


def get_logger(log_dir: str = None, log_level: str = None) -> PhraseLogger:
    """Get or create the global logger instance (defaults from config)."""
    global _logger
    if _logger is None:
        log_config = get_config().log
        _logger = PhraseLogger(
            log_dir or log_config.log_dir,
            log_level or log_config.level,
            log_config.log_to_file,
        )
    return _logger


def setup_logger(log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False) -> PhraseLogger:
    """Initialize the logger with custom settings."""
    global _logger
    PhraseLogger._initialized = False
    PhraseLogger._instance = None
    _logger = PhraseLogger(log_dir, log_level, log_to_file)
    return _logger
