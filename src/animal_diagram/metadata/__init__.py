"""Registry of closed, self-describing type hierarchies."""

from animal_diagram.metadata.registry import (
    HierarchyRegistry,
    HierarchyRegistryState,
    TypeEntry,
)

__all__ = [
    "HierarchyRegistry",
    "HierarchyRegistryState",
    "TypeEntry",
]
