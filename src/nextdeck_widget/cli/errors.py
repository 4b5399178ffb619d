"""
Standardized error handling and exit codes for the nextdeck-widget CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

console = Console()


class ExitCode(IntEnum):
    """Standard exit codes for CLI operations."""

    USER_ERROR = 2
    """User configuration or input error (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Invalid settings",
        ...     reason="store.payload_key must be a plain name",
        ...     solution="Edit .nextdeck.json",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_settings_error(detail: str) -> None:
    """Print error when the merged settings fail validation."""
    print_error(
        "Invalid nextdeck-widget settings",
        reason=detail,
        solution="Fix .nextdeck.json, ~/.config/nextdeck/config.json or NEXTDECK_* variables",
    )


def print_invalid_link_error(action: str) -> None:
    """Print error when a deep link cannot be built for an action."""
    print_error(
        f"Cannot build a link for action '{action}'",
        reason="Actions are used as the URL host and must be letters, digits or '-'",
        solution="nextdeck-widget link card --board 1 --card 2",
    )
