"""Rich UI helpers for terminal output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from .branches import SelectionMode

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

BRANCH_NOTICES = {
    SelectionMode.INTERACTIVE: "Selected branch",
    SelectionMode.DEFAULT: "Using current branch",
    SelectionMode.EXPLICIT: "Target branch",
}


def info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print an error message on stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}", style="red", soft_wrap=True)


def show_branch(mode: SelectionMode, branch: str) -> None:
    info(f"{BRANCH_NOTICES[mode]}: {escape(branch)}")
