"""CLI UI components (Rich).

Keeps message layout out of the command functions so `main` and `doctor`
share the same output helpers.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from core.domain.errors import QuotaInputError

USAGE_EXAMPLES: tuple[str, ...] = ("10GB", "default", "unlimited")


def say(console: Console, message: str) -> None:
    """Print plain text: no markup, no highlighting, no wrapping.

    User ids and quota literals are printed verbatim even when they contain
    square brackets.
    """

    console.print(message, markup=False, highlight=False, soft_wrap=True)


def print_input_error(console: Console, error: QuotaInputError, program: str) -> None:
    """Print a rejected-argument message followed by usage examples."""

    say(console, f"ERROR {error.exit_code}: {error.headline}")
    if error.show_value:
        say(console, f"Provided Value: {error.value}")
    say(console, "")
    say(console, error.hint)
    for index, example in enumerate(USAGE_EXAMPLES):
        prefix = "Examples: " if index == 0 else " " * len("Examples: ")
        say(console, f"{prefix}{program} {example}")


def build_checks_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
