"""
Pytest configuration for phrase evaluation tests.

Provides predicate factories that record every invocation, so tests can
assert which leaves ran, in what order, and how many times.
"""

import asyncio

import pytest

from asyncphrase.config import Config
from asyncphrase.utils.logger import setup_logger


class PredicateRecorder:
    """Builds named async predicates and records their invocations."""

    def __init__(self):
        self.calls: list[str] = []

    def make(self, name: str, value: bool, delay: float = 0.0):
        """Async predicate named `name` resolving to `value`."""
        async def predicate():
            self.calls.append(name)
            if delay:
                await asyncio.sleep(delay)
            return value

        predicate.__name__ = name
        return predicate

    def make_sync(self, name: str, value):
        """Plain (non-async) predicate returning `value` as-is."""
        def predicate():
            self.calls.append(name)
            return value

        predicate.__name__ = name
        return predicate

    def make_failing(self, name: str, error: Exception):
        """Async predicate that raises `error` when invoked."""
        async def predicate():
            self.calls.append(name)
            raise error

        predicate.__name__ = name
        return predicate

    def count(self, name: str) -> int:
        return self.calls.count(name)


@pytest.fixture
def recorder() -> PredicateRecorder:
    """Fresh invocation recorder per test."""
    return PredicateRecorder()


@pytest.fixture
def debug_logger(tmp_path):
    """Logger at DEBUG for tests that assert on reduction/short-circuit lines."""
    logger = setup_logger(str(tmp_path), "DEBUG")
    yield logger
    setup_logger(str(tmp_path), "INFO")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Config rebuilt from an environment without PHRASE_* overrides."""
    for name in (
        "PHRASE_LOG_LEVEL",
        "PHRASE_LOG_DIR",
        "PHRASE_LOG_TO_FILE",
        "PHRASE_TRACE_REDUCTIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep any .env in the repo root out of the picture
    monkeypatch.chdir(tmp_path)
    Config._instance = None
    yield monkeypatch
    Config._instance = None
