"""Main entry point for animal-diagram.

This module provides the command-line interface, including commands for:
- Generating the class diagram of the animal hierarchy
- Listing the types of a hierarchy
- Serialising demo animals to XML and reading them back
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from animal_diagram.cli import (
    deserialize_command,
    generate_diagram_command,
    list_types_command,
    serialize_demo_command,
)

load_dotenv()

app = typer.Typer(name="animal-diagram", no_args_is_help=True)

LogLevelOption = Annotated[
    str | None,
    typer.Option(
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
]


LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Also write logs to this file",
        dir_okay=False,
    ),
]


@app.command()
def generate(
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Destination file, overwritten on every run. Defaults to ./ClassDiagram.xml",
            file_okay=True,
            dir_okay=False,
            writable=True,
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: xml or json"),
    ] = None,
    hierarchy: Annotated[
        str | None,
        typer.Option("--hierarchy", help="Marker of the type hierarchy to introspect"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="YAML file with generator configuration",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    log_level: LogLevelOption = None,
    log_file: LogFileOption = None,
) -> None:
    """Generate the class diagram of a type hierarchy.

    Example:
        animal-diagram generate --output ClassDiagram.xml
        animal-diagram generate --format json -o diagram.json

    """
    generate_diagram_command(
        config_file, output, output_format, hierarchy, log_level, log_file
    )


@app.command(name="ls-types")
def list_types(
    hierarchy: Annotated[
        str | None,
        typer.Option("--hierarchy", help="Marker of the type hierarchy to list"),
    ] = None,
    log_level: LogLevelOption = None,
    log_file: LogFileOption = None,
) -> None:
    """List the types of a hierarchy."""
    list_types_command(hierarchy, log_level, log_file)


@app.command()
def serialize(
    output_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory for cow.xml, lion.xml and pig.xml",
            file_okay=False,
            dir_okay=True,
        ),
    ] = Path("."),
    log_level: LogLevelOption = None,
    log_file: LogFileOption = None,
) -> None:
    """Serialise the demo animals to XML files."""
    serialize_demo_command(output_dir, log_level, log_file)


@app.command()
def deserialize(
    file_path: Annotated[
        Path,
        typer.Argument(help="Animal XML file to read", dir_okay=False),
    ],
    log_level: LogLevelOption = None,
    log_file: LogFileOption = None,
) -> None:
    """Read an animal from an XML file and print it."""
    deserialize_command(file_path, log_level, log_file)


if __name__ == "__main__":
    app()
