"""Class diagram generation for a closed, self-describing animal hierarchy."""

from animal_diagram.animals import ANIMAL_HIERARCHY, register_animal_types
from animal_diagram.diagram import DiagramDocument, DiagramGenerator, TypeDescriptor
from animal_diagram.errors import (
    AmbiguousBaseTypeError,
    AnimalDiagramError,
    EmptyHierarchyError,
)
from animal_diagram.metadata import HierarchyRegistry, TypeEntry

__all__ = [
    "ANIMAL_HIERARCHY",
    "AmbiguousBaseTypeError",
    "AnimalDiagramError",
    "DiagramDocument",
    "DiagramGenerator",
    "EmptyHierarchyError",
    "HierarchyRegistry",
    "TypeDescriptor",
    "TypeEntry",
    "register_animal_types",
]
