"""Rich-powered console output for branchreview.

Besides plain status lines, the console speaks the GitHub Actions workflow
command syntax (``::name key=value::message``) for debug messages, warnings
and failures.
"""

from __future__ import annotations

from typing import IO

from rich.console import Console as RichConsole
from rich.markup import escape


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: str = "", **properties: str) -> str:
    """Format a workflow command line."""
    props = ",".join(
        f"{key}={escape_property(str(value))}"
        for key, value in properties.items()
        if value
    )
    head = f"::{command} {props}" if props else f"::{command}"
    return f"{head}::{escape_data(message)}"


class Console:
    """Terminal output for a workflow step, using Rich."""

    def __init__(self, file: IO[str] | None = None) -> None:
        # Workflow commands must stay on a single line.
        self.console = RichConsole(file=file, soft_wrap=True, highlight=False, emoji=False)

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def warning(self, message: str) -> None:
        self.command("warning", message)

    def debug(self, message: str) -> None:
        self.command("debug", message)

    def command(self, command: str, message: str = "", **properties: str) -> None:
        """Emit a raw workflow command."""
        self.console.print(format_command(command, message, **properties), markup=False)

    def set_failed(self, message: str) -> None:
        """Mark the step as failed. The caller is responsible for the exit code."""
        self.command("error", message)
