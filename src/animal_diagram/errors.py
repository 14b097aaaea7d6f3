"""Error classes for the animal diagram toolkit.

This module provides:
- AnimalDiagramError: Base exception class for all toolkit errors
- HierarchyError, EmptyHierarchyError, AmbiguousBaseTypeError,
  TypeAlreadyRegisteredError: Type hierarchy exceptions
- RendererNotFoundError: Renderer lookup exception
- ConfigurationError: Configuration loading exception
- AnimalSerializationError, UnknownAnimalError: Animal domain exceptions
"""


class AnimalDiagramError(Exception):
    """Base exception for all animal diagram errors."""

    pass


class HierarchyError(AnimalDiagramError):
    """Base exception for type hierarchy errors."""

    pass


class EmptyHierarchyError(HierarchyError):
    """Raised when a hierarchy has no types to introspect."""

    def __init__(self, hierarchy: str) -> None:
        """Initialise with the hierarchy marker that resolved to nothing."""
        super().__init__(f"Hierarchy '{hierarchy}' has no registered types")
        self.hierarchy = hierarchy


class AmbiguousBaseTypeError(HierarchyError):
    """Raised when a type's base cannot be resolved inside its own hierarchy."""

    def __init__(self, type_name: str, reason: str) -> None:
        """Initialise with the offending type and a description of the problem."""
        super().__init__(f"Cannot resolve base type of '{type_name}': {reason}")
        self.type_name = type_name


class TypeAlreadyRegisteredError(HierarchyError):
    """Raised when attempting to register a type name twice in one hierarchy."""

    pass


class RendererNotFoundError(AnimalDiagramError):
    """Raised when a requested renderer is not registered."""

    pass


class ConfigurationError(AnimalDiagramError):
    """Raised when generator configuration is invalid."""

    pass


class AnimalSerializationError(AnimalDiagramError):
    """Raised when an animal cannot be written to or read from XML."""

    pass


class UnknownAnimalError(AnimalDiagramError):
    """Raised when an animal kind has no entry in the diet table."""

    pass
