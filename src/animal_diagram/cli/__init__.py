"""Command implementations for the animal-diagram CLI."""

from animal_diagram.cli.errors import CLIError, cli_error_handler
from animal_diagram.cli.generate import generate_diagram_command, list_types_command
from animal_diagram.cli.serialize import deserialize_command, serialize_demo_command

__all__ = [
    "CLIError",
    "cli_error_handler",
    "deserialize_command",
    "generate_diagram_command",
    "list_types_command",
    "serialize_demo_command",
]
