"""CLI command implementations for diagram generation."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from animal_diagram.animals import register_animal_types
from animal_diagram.cli.errors import cli_error_handler
from animal_diagram.cli.formatting import OutputFormatter
from animal_diagram.diagram.generator import DiagramGenerator
from animal_diagram.logging import setup_logging
from animal_diagram.renderers import RendererRegistry, register_renderers
from animal_diagram.settings import GeneratorConfig, load_config_file
from animal_diagram.writer import write_document

logger = logging.getLogger(__name__)


def _resolve_config(
    config_file: Path | None,
    output: Path | None,
    output_format: str | None,
    hierarchy: str | None,
) -> GeneratorConfig:
    config = load_config_file(config_file) if config_file else GeneratorConfig()
    return config.with_overrides(
        output_path=output,
        output_format=output_format,
        hierarchy=hierarchy,
    )


def generate_diagram_command(
    config_file: Path | None,
    output: Path | None,
    output_format: str | None,
    hierarchy: str | None,
    log_level: str | None,
    log_file: Path | None = None,
) -> None:
    """Generate a class diagram and write it to the configured destination.

    Args:
        config_file: Optional YAML configuration file
        output: Destination override
        output_format: Renderer name override ('xml' or 'json')
        hierarchy: Hierarchy marker override
        log_level: Logging level override
        log_file: Optional log file (file logging is off without it)

    """
    setup_logging(level=log_level, log_file=log_file)

    with cli_error_handler("generate", "Diagram generation failed"):
        config = _resolve_config(config_file, output, output_format, hierarchy)

        register_animal_types()
        register_renderers()
        renderer = RendererRegistry.get(config.output_format)

        logger.info("Generating class diagram for '%s'", config.hierarchy)
        document = DiagramGenerator().generate(config.hierarchy, datetime.now(UTC))

        write_document(config.output_path, renderer.render(document))
        logger.info("Saved diagram to %s", config.output_path)

        OutputFormatter().print_generation_summary(
            document, config.output_path, renderer.name
        )


def list_types_command(
    hierarchy: str | None, log_level: str | None, log_file: Path | None = None
) -> None:
    """Print the types registered under a hierarchy.

    Args:
        hierarchy: Hierarchy marker (defaults to the animal hierarchy)
        log_level: Logging level override
        log_file: Optional log file

    """
    setup_logging(level=log_level, log_file=log_file)

    with cli_error_handler("ls-types", "Listing types failed"):
        config = GeneratorConfig().with_overrides(hierarchy=hierarchy)
        register_animal_types()
        document = DiagramGenerator().generate(config.hierarchy, datetime.now(UTC))
        OutputFormatter().print_types_table(document)
