"""Hierarchy registry for introspectable type hierarchies.

Provides a singleton registry that maps a hierarchy marker to the closed set
of types belonging to it, together with the comments declared for each type.
"""

from dataclasses import dataclass
from typing import Any, TypedDict

from animal_diagram.errors import TypeAlreadyRegisteredError


@dataclass(frozen=True)
class TypeEntry:
    """A registered type and the comments declared on it."""

    type_: type
    comments: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Short type name, unique within its hierarchy."""
        return self.type_.__name__


class HierarchyRegistryState(TypedDict):
    """State snapshot for HierarchyRegistry (used for test isolation)."""

    hierarchies: dict[str, dict[str, TypeEntry]]


class HierarchyRegistry:
    """Singleton registry of closed type hierarchies.

    Each hierarchy is identified by a marker string (typically the module
    that owns the root type). Types are registered explicitly rather than
    discovered by scanning, so the set of introspected types is exactly the
    set that was registered.
    """

    _instance: "HierarchyRegistry | None" = None
    _hierarchies: dict[str, dict[str, TypeEntry]]

    def __new__(cls, *args: Any, **kwargs: Any) -> "HierarchyRegistry":  # noqa: ANN401
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._hierarchies = {}
        return cls._instance

    def register(
        self,
        hierarchy: str,
        type_: type,
        comments: tuple[str, ...] | list[str] = (),
    ) -> TypeEntry:
        """Register a type under a hierarchy marker.

        Args:
            hierarchy: Marker identifying the closed hierarchy
            type_: The class or enumeration to register
            comments: Free-text comments in declaration order

        Returns:
            The stored TypeEntry

        Raises:
            TypeAlreadyRegisteredError: If the short name is already taken

        """
        entries = self._hierarchies.setdefault(hierarchy, {})
        if type_.__name__ in entries:
            raise TypeAlreadyRegisteredError(
                f"Type '{type_.__name__}' is already registered in hierarchy '{hierarchy}'"
            )

        entry = TypeEntry(type_=type_, comments=tuple(comments))
        entries[entry.name] = entry
        return entry

    def enumerate_types(self, hierarchy: str) -> tuple[TypeEntry, ...]:
        """Return every type registered under a hierarchy, in registration order.

        An unknown marker yields an empty tuple.
        """
        return tuple(self._hierarchies.get(hierarchy, {}).values())

    def is_registered(self, hierarchy: str) -> bool:
        """Check if a hierarchy has at least one registered type."""
        return bool(self._hierarchies.get(hierarchy))

    def list_hierarchies(self) -> list[str]:
        """List all hierarchy markers."""
        return list(self._hierarchies.keys())

    def clear(self) -> None:
        """Clear all registered hierarchies (for testing)."""
        self._hierarchies.clear()

    @classmethod
    def snapshot_state(cls) -> HierarchyRegistryState:
        """Capture current state for later restoration (test isolation)."""
        instance = cls()
        return {
            "hierarchies": {
                marker: entries.copy()
                for marker, entries in instance._hierarchies.items()
            },
        }

    @classmethod
    def restore_state(cls, state: HierarchyRegistryState) -> None:
        """Restore state from a previously captured snapshot."""
        instance = cls()
        instance._hierarchies = {
            marker: entries.copy() for marker, entries in state["hierarchies"].items()
        }
