"""Rich console output utilities."""

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from usage_rules.compose.status import Status

console = Console()

_STATUS_STYLES = {
    Status.PRESENT: "green",
    Status.STALE: "yellow",
    Status.MISSING: "red",
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}", style="red")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def format_status(status: Status) -> str:
    """Return rich markup for a dependency status."""
    style = _STATUS_STYLES[status]
    return f"[{style}]{status.value}[/{style}]"


def print_status(name: str, status: Status) -> None:
    """Print a dependency's status against the target file."""
    console.print(f"{escape(name)}: {format_status(status)}")


def print_has_rules(name: str) -> None:
    """Print a dependency that ships usage rules."""
    console.print(f"{escape(name)}: [green]has usage rules[/green]")


def print_diff(diff: str) -> None:
    """Print a unified diff with syntax highlighting."""
    console.print(Syntax(diff, "diff", theme="ansi_dark", background_color="default"))
