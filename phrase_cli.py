#!/usr/bin/env python3
"""
asyncphrase - Phrase evaluation CLI

This is a PURE SHELL - it only:
- Parses arguments
- Loads or builds a phrase
- Prints phrase, result and trace

NO evaluation logic lives here. All operations go through asyncphrase.phrase.

Usage:
  python phrase_cli.py demo                          # T & T & F | T & T & F
  python phrase_cli.py run phrases/sample.yaml       # YAML phrase document
  python phrase_cli.py run phrases/sample.yaml --trace
"""

import asyncio
import sys

from asyncphrase.cli import (
    console,
    print_error,
    print_phrase,
    print_result,
    print_trace,
    setup_argparse,
    verbosity_level,
)
from asyncphrase.config import get_config
from asyncphrase.phrase import (
    FALSE_A,
    TRUE_A,
    EvaluationTrace,
    Operator,
    PhraseError,
    PhraseEvaluator,
    build_phrase,
    load_phrase_file,
)
from asyncphrase.utils.logger import setup_logger


def demo_phrase() -> list:
    """Sample phrase: T & T & F | T & T & F -> (T & T & F) | (T & T & F)."""
    return [
        TRUE_A, Operator.AND, TRUE_A, Operator.AND, FALSE_A,
        Operator.OR,
        TRUE_A, Operator.AND, TRUE_A, Operator.AND, FALSE_A,
    ]


async def _evaluate(raw, trace: EvaluationTrace | None) -> bool:
    evaluator = PhraseEvaluator(trace=trace)
    return await evaluator.evaluate(raw)


def handle_demo(args) -> int:
    """Evaluate the sample phrase."""
    raw = demo_phrase()
    try:
        print_phrase(build_phrase(raw), title="Demo Phrase")
        result = asyncio.run(_evaluate(raw, None))
    except PhraseError as e:
        print_error(e)
        return 1
    print_result(result)
    return 0


def handle_run(args) -> int:
    """Evaluate a YAML phrase document."""
    trace = EvaluationTrace() if args.trace else None
    try:
        raw = load_phrase_file(args.file)
        print_phrase(build_phrase(raw), title=args.file)
        result = asyncio.run(_evaluate(raw, trace))
    except PhraseError as e:
        print_error(e)
        return 1
    print_result(result)
    if trace is not None:
        print_trace(trace)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    # Parse CLI arguments FIRST (before any config or logging)
    args = setup_argparse(argv)

    config = get_config()
    ok, messages = config.validate()
    for message in messages:
        console.print(f"[yellow]{message}[/]")
    if not ok:
        return 1

    level = verbosity_level(args) or config.log.level
    setup_logger(config.log.log_dir, level, config.log.log_to_file)

    if args.command == "demo":
        return handle_demo(args)
    elif args.command == "run":
        return handle_run(args)

    console.print("[yellow]Usage: phrase_cli.py {demo|run FILE [--trace]} --help[/]")
    return 1


if __name__ == "__main__":
    sys.exit(main())
