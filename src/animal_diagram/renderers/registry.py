"""Registry for diagram renderers."""

from typing import TypedDict

from animal_diagram.errors import RendererNotFoundError
from animal_diagram.renderers.protocol import Renderer


class RendererRegistryState(TypedDict):
    """State snapshot for RendererRegistry.

    Used for test isolation - captures and restores registry state
    to prevent test pollution.
    """

    renderers: dict[str, Renderer]


class RendererRegistry:
    """Registry for diagram renderers."""

    _renderers: dict[str, Renderer] = {}

    @classmethod
    def register(cls, renderer: Renderer) -> None:
        """Register a renderer.

        Args:
            renderer: Renderer instance to register.

        """
        cls._renderers[renderer.name] = renderer

    @classmethod
    def get(cls, name: str) -> Renderer:
        """Get renderer by name.

        Args:
            name: Name of the renderer to retrieve.

        Returns:
            Registered renderer instance.

        Raises:
            RendererNotFoundError: If renderer not found.

        """
        if name not in cls._renderers:
            available = list(cls._renderers.keys())
            msg = f"Unknown renderer '{name}'. Available: {available}"
            raise RendererNotFoundError(msg)
        return cls._renderers[name]

    @classmethod
    def list_renderers(cls) -> list[str]:
        """List available renderer names."""
        return list(cls._renderers.keys())

    @classmethod
    def snapshot_state(cls) -> RendererRegistryState:
        """Capture current RendererRegistry state for later restoration."""
        return {"renderers": cls._renderers.copy()}

    @classmethod
    def restore_state(cls, state: RendererRegistryState) -> None:
        """Restore RendererRegistry state from a previously captured snapshot."""
        cls._renderers = state["renderers"].copy()
