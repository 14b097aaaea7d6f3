"""CLI command implementations for animal XML serialisation."""

from __future__ import annotations

import logging
from pathlib import Path

from animal_diagram.animals import Animal, Cow, Lion, Pig, register_animal_types
from animal_diagram.cli.errors import cli_error_handler
from animal_diagram.cli.formatting import OutputFormatter
from animal_diagram.logging import setup_logging
from animal_diagram.serialization import AnimalXmlSerializer

logger = logging.getLogger(__name__)


def demo_animals() -> list[tuple[Animal, str]]:
    """Return the demo animals with their output file names."""
    return [
        (Cow(country="USA", hide_from_other_animals=False, name="Bessie"), "cow.xml"),
        (Lion(country="Africa", hide_from_other_animals=True, name="Simba"), "lion.xml"),
        (Pig(country="Germany", hide_from_other_animals=False, name="Porky"), "pig.xml"),
    ]


def serialize_demo_command(
    output_dir: Path, log_level: str | None, log_file: Path | None = None
) -> None:
    """Serialise the demo animals into output_dir.

    Args:
        output_dir: Directory receiving one XML file per animal
        log_level: Logging level override
        log_file: Optional log file

    """
    setup_logging(level=log_level, log_file=log_file)

    with cli_error_handler("serialize", "Animal serialisation failed"):
        logger.info("Starting animal serialisation demo")
        register_animal_types()
        serializer = AnimalXmlSerializer()
        formatter = OutputFormatter()

        for animal, file_name in demo_animals():
            logger.info("Processing %s named %s", animal.what_animal, animal.name)
            formatter.print_animal(animal)
            serializer.serialize(animal, output_dir / file_name)

        logger.info("Animal serialisation demo completed successfully")


def deserialize_command(
    file_path: Path, log_level: str | None, log_file: Path | None = None
) -> None:
    """Read an animal back from XML and print it.

    Args:
        file_path: XML file written by the serialize command
        log_level: Logging level override
        log_file: Optional log file

    """
    setup_logging(level=log_level, log_file=log_file)

    with cli_error_handler("deserialize", "Animal deserialisation failed"):
        register_animal_types()
        animal = AnimalXmlSerializer().deserialize(file_path)
        OutputFormatter().print_animal(animal)
