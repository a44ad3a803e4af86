"""
Argument parser setup for the phrase CLI.

Defines the subcommands and their arguments:
- demo: Evaluate the built-in sample phrase
- run: Evaluate a YAML phrase document
"""

import argparse


def setup_argparse(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for phrase_cli.

    Supports:
      demo                 Evaluate T & T & F | T & T & F
      run FILE [--trace]   Evaluate a YAML phrase document
    """
    parser = argparse.ArgumentParser(
        description="asyncphrase - short-circuit evaluation of async boolean phrases",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python phrase_cli.py demo                         # Sample phrase
  python phrase_cli.py run phrases/sample.yaml      # Evaluate a document
  python phrase_cli.py -v run phrases/sample.yaml --trace
        """
    )

    # Verbosity: mutually exclusive group (-q / -v / --debug)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Quiet mode: WARNING only, minimal output"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Verbose mode: INFO + evaluation lifecycle"
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug mode: full DEBUG + every reduction step"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("demo", help="Evaluate the sample phrase T & T & F | T & T & F")

    run_parser = subparsers.add_parser("run", help="Evaluate a YAML phrase document")
    run_parser.add_argument("file", help="Path to the YAML phrase document")
    run_parser.add_argument("--trace", action="store_true", default=False, help="Print the reduction trace table")

    return parser.parse_args(argv)


def verbosity_level(args: argparse.Namespace) -> str | None:
    """Map verbosity flags to a log level (None keeps the configured level)."""
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    if args.quiet:
        return "WARNING"
    return None
