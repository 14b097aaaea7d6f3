"""Class diagram generation over a registered type hierarchy."""

import abc
import logging
from collections.abc import Collection
from datetime import datetime

from pydantic import BaseModel

from animal_diagram.diagram.introspection import describe_type
from animal_diagram.diagram.models import DiagramDocument
from animal_diagram.errors import EmptyHierarchyError
from animal_diagram.metadata.registry import HierarchyRegistry

logger = logging.getLogger(__name__)

DEFAULT_FOUNDATION_BASES: tuple[type, ...] = (object, abc.ABC, BaseModel)


class DiagramGenerator:
    """Builds a DiagramDocument from the types registered under a hierarchy.

    Generation is a pure transformation: the registry is only read, the
    timestamp is supplied by the caller, and nothing is written. Rendering
    and persistence are separate steps.
    """

    def __init__(
        self,
        registry: HierarchyRegistry | None = None,
        foundation_bases: Collection[type] = DEFAULT_FOUNDATION_BASES,
    ) -> None:
        """Initialise the generator.

        Args:
            registry: Registry to enumerate types from (defaults to the singleton)
            foundation_bases: Base classes that sit outside every hierarchy

        """
        self._registry = registry if registry is not None else HierarchyRegistry()
        self._foundation_bases = tuple(foundation_bases)

    def generate(self, hierarchy: str, generated_at: datetime) -> DiagramDocument:
        """Generate the class diagram for a hierarchy.

        Args:
            hierarchy: Marker identifying the closed hierarchy
            generated_at: Timestamp recorded on the document

        Returns:
            DiagramDocument with one descriptor per type, ordered by name

        Raises:
            EmptyHierarchyError: If the hierarchy has no types
            AmbiguousBaseTypeError: If a base type does not resolve inside the hierarchy

        """
        entries = sorted(
            self._registry.enumerate_types(hierarchy), key=lambda entry: entry.name
        )
        if not entries:
            raise EmptyHierarchyError(hierarchy)

        known_types = frozenset(entry.type_ for entry in entries)
        descriptors = []
        for entry in entries:
            descriptor = describe_type(entry, known_types, self._foundation_bases)
            logger.debug(
                "Described %s '%s'",
                "enum" if descriptor.is_enumeration else "class",
                descriptor.name,
            )
            descriptors.append(descriptor)

        return DiagramDocument(
            generated_at=generated_at,
            hierarchy=hierarchy,
            types=tuple(descriptors),
        )
