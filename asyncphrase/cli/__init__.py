"""
CLI package for the phrase driver.

Contains:
- argparser: Argument parser setup
- utils: Console display helpers (rich)
"""

from .argparser import setup_argparse, verbosity_level
from .utils import console, print_error, print_phrase, print_result, print_trace

__all__ = [
    "setup_argparse",
    "verbosity_level",
    "console",
    "print_error",
    "print_phrase",
    "print_result",
    "print_trace",
]
