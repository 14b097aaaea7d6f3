"""XML serialisation and deserialisation for animal objects."""

import inspect
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from pydantic import ValidationError

from animal_diagram.animals import ANIMAL_HIERARCHY, Animal
from animal_diagram.errors import AnimalSerializationError
from animal_diagram.metadata.registry import HierarchyRegistry
from animal_diagram.renderers.xml_renderer import INDENT, XML_DECLARATION
from animal_diagram.writer import write_document

logger = logging.getLogger(__name__)


class AnimalXmlSerializer:
    """Writes animals to XML files and reads them back.

    The root element is named after the concrete animal class and holds one
    child element per field, named by the field's PascalCase alias::

        <Cow>
          <Country>USA</Country>
          <HideFromOtherAnimals>false</HideFromOtherAnimals>
          <Name>Bessie</Name>
          <WhatAnimal>Cow</WhatAnimal>
        </Cow>
    """

    def __init__(
        self,
        registry: HierarchyRegistry | None = None,
        hierarchy: str = ANIMAL_HIERARCHY,
    ) -> None:
        """Initialise the serializer.

        Args:
            registry: Registry used to resolve root element names to classes
            hierarchy: Hierarchy marker the animal classes are registered under

        """
        self._registry = registry if registry is not None else HierarchyRegistry()
        self._hierarchy = hierarchy

    def to_xml(self, animal: Animal) -> str:
        """Serialise an animal to XML text."""
        root = ET.Element(type(animal).__name__)
        for key, value in animal.model_dump(mode="json", by_alias=True).items():
            child = ET.SubElement(root, key)
            child.text = str(value).lower() if isinstance(value, bool) else str(value)
        ET.indent(root, space=INDENT)
        return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"

    def serialize(self, animal: Animal, file_path: Path) -> None:
        """Serialise an animal to an XML file, replacing any existing file.

        Raises:
            AnimalSerializationError: If the file cannot be written

        """
        animal_type = type(animal).__name__
        logger.info("Starting XML serialisation of %s to %s", animal_type, file_path)
        try:
            write_document(file_path, self.to_xml(animal))
        except OSError as e:
            logger.error("Failed to serialise %s to XML: %s", animal_type, e)
            raise AnimalSerializationError(
                f"Failed to write {animal_type} to {file_path}: {e}"
            ) from e
        logger.info("Successfully serialised %s to %s", animal_type, file_path)

    def _resolve_class(self, tag: str, expected: type[Animal]) -> type[Animal]:
        for entry in self._registry.enumerate_types(self._hierarchy):
            if entry.name == tag:
                if inspect.isabstract(entry.type_):
                    raise AnimalSerializationError(
                        f"XML element '{tag}' names an abstract type"
                    )
                if not issubclass(entry.type_, expected):
                    raise AnimalSerializationError(
                        f"XML element '{tag}' is not a {expected.__name__}"
                    )
                return entry.type_
        raise AnimalSerializationError(
            f"XML element '{tag}' does not name a type in hierarchy '{self._hierarchy}'"
        )

    def from_xml(self, text: str, expected: type[Animal] = Animal) -> Animal:
        """Deserialise an animal from XML text.

        Args:
            text: XML document produced by to_xml()
            expected: Class the result must be an instance of

        Raises:
            AnimalSerializationError: If the document is malformed, names an
                unknown or unexpected type, or fails validation

        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise AnimalSerializationError(f"Malformed animal XML: {e}") from e

        animal_class = self._resolve_class(root.tag, expected)
        values = {child.tag: child.text or "" for child in root}
        try:
            return animal_class.model_validate(values)
        except (ValidationError, TypeError) as e:
            raise AnimalSerializationError(
                f"Invalid {animal_class.__name__} XML: {e}"
            ) from e

    def deserialize(self, file_path: Path, expected: type[Animal] = Animal) -> Animal:
        """Deserialise an animal from an XML file.

        Raises:
            FileNotFoundError: If the file does not exist
            AnimalSerializationError: If the content cannot be turned into an animal

        """
        logger.info(
            "Starting XML deserialisation of %s from %s", expected.__name__, file_path
        )
        if not file_path.exists():
            logger.error("XML file not found: %s", file_path)
            raise FileNotFoundError(f"XML file not found: {file_path}")

        try:
            animal = self.from_xml(file_path.read_text(encoding="utf-8"), expected)
        except AnimalSerializationError as e:
            logger.error("Failed to deserialise %s from XML: %s", expected.__name__, e)
            raise

        logger.info(
            "Successfully deserialised %s from %s", type(animal).__name__, file_path
        )
        return animal
