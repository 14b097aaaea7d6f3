"""Class diagram extraction for registered type hierarchies."""

from animal_diagram.diagram.generator import DEFAULT_FOUNDATION_BASES, DiagramGenerator
from animal_diagram.diagram.models import (
    DiagramDocument,
    FieldDescriptor,
    OperationDescriptor,
    ParameterDescriptor,
    TypeDescriptor,
)

__all__ = [
    "DEFAULT_FOUNDATION_BASES",
    "DiagramDocument",
    "DiagramGenerator",
    "FieldDescriptor",
    "OperationDescriptor",
    "ParameterDescriptor",
    "TypeDescriptor",
]
