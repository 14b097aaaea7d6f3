"""Error reporting for animal-diagram commands.

Toolkit errors are reported as Rich panels on stderr with an exit code per
failure category, so scripts can tell a bad configuration from a broken
hierarchy or an unreadable animal file:

- 2: configuration (invalid settings, unknown output format)
- 3: type hierarchy (empty, ambiguous base types, duplicate registrations)
- 4: animal data (unreadable or invalid XML, unknown animal kinds)
- 1: anything else
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import typer
from rich.console import Console
from rich.panel import Panel

from animal_diagram.errors import (
    AnimalSerializationError,
    ConfigurationError,
    EmptyHierarchyError,
    HierarchyError,
    RendererNotFoundError,
    UnknownAnimalError,
)

logger = logging.getLogger(__name__)
console = Console(stderr=True)

EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 2
EXIT_HIERARCHY = 3
EXIT_ANIMAL_DATA = 4


@dataclass(frozen=True)
class ErrorReport:
    """How a failure is presented to the user."""

    exit_code: int
    category: str
    hint: str | None = None


class CLIError(Exception):
    """Error raised by a command with the report it should produce."""

    def __init__(self, message: str, report: ErrorReport) -> None:
        """Initialise with the message and the report to print for it."""
        super().__init__(message)
        self.report = report


def classify_error(error: Exception) -> ErrorReport:
    """Map an exception raised during a command to its report."""
    match error:
        case CLIError():
            return error.report
        case EmptyHierarchyError():
            return ErrorReport(
                EXIT_HIERARCHY,
                "Empty hierarchy",
                f"No types are registered under '{error.hierarchy}'. "
                "The built-in hierarchy is 'animal_diagram.animals'.",
            )
        case HierarchyError():
            return ErrorReport(EXIT_HIERARCHY, "Inconsistent hierarchy")
        case RendererNotFoundError():
            return ErrorReport(
                EXIT_CONFIGURATION, "Unknown output format", "Use --format xml or json."
            )
        case ConfigurationError():
            return ErrorReport(EXIT_CONFIGURATION, "Invalid configuration")
        case AnimalSerializationError() | UnknownAnimalError():
            return ErrorReport(EXIT_ANIMAL_DATA, "Invalid animal data")
        case FileNotFoundError():
            return ErrorReport(EXIT_ANIMAL_DATA, "File not found")
        case _:
            return ErrorReport(EXIT_UNEXPECTED, "Unexpected error")


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Report any failure inside the block as a panel and exit.

    Args:
        command: Command name, shown in the panel subtitle
        title: Panel title describing the failed action

    """
    try:
        yield
    except Exception as e:
        report = classify_error(e)
        logger.error("%s (%s): %s", title, report.category, e)

        body = f"[red]{report.category}: {e}[/red]"
        if report.hint:
            body += f"\n{report.hint}"
        console.print(
            Panel(body, title=title, subtitle=command, border_style="red")
        )
        raise typer.Exit(report.exit_code) from e
