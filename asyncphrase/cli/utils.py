"""
CLI display utilities for the phrase driver.

Contains:
- print_phrase: Show the phrase being evaluated
- print_result: Show the boolean result
- print_trace: Reduction trace as a table
- print_error: Phrase errors with their recursion path
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..phrase.nodes import Word, format_phrase
from ..phrase.types import EvaluationTrace, PhraseError, format_path


# Global Console
console = Console()


def print_phrase(word: Word, title: str = "Phrase"):
    """Print the built phrase in operator-token notation."""
    console.print(Panel(
        f"[bold]{format_phrase(word)}[/]",
        title=f"[cyan]{title}[/]",
        border_style="cyan",
        expand=False,
    ))


def print_result(result: bool):
    """Print the evaluation result."""
    style = "bold green" if result else "bold red"
    console.print(f"Result: [{style}]{result}[/]")


def print_trace(trace: EvaluationTrace):
    """Print every reduction step in evaluation order."""
    if not trace.steps:
        console.print("[dim]No reduction steps (single-word phrase).[/]")
        return

    table = Table(title="Reduction Trace", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path")
    table.add_column("Value")
    table.add_column("Operator")
    table.add_column("Short-circuit", justify="center")

    for i, step in enumerate(trace.steps, 1):
        value_style = "green" if step.value else "red"
        table.add_row(
            str(i),
            format_path(step.path),
            f"[{value_style}]{step.value}[/]",
            step.operator or "-",
            "[yellow]yes[/]" if step.short_circuit else "",
        )

    console.print(table)


def print_error(error: PhraseError):
    """Print a phrase error panel."""
    console.print(Panel(
        f"[red]{error.detail}[/]\n[dim]at {format_path(error.path)}[/]",
        title=f"[bold red]{error.label}[/]",
        border_style="red",
        expand=False,
    ))
