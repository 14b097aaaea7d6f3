"""Protocol for diagram renderers."""

from typing import Protocol

from animal_diagram.diagram.models import DiagramDocument


class Renderer(Protocol):
    """Protocol for diagram renderers.

    Renderers are stateless: they turn a completed DiagramDocument into text
    and never touch the filesystem.
    """

    @property
    def name(self) -> str:
        """Renderer identifier (e.g., 'xml', 'json')."""
        ...

    @property
    def file_extension(self) -> str:
        """Default file extension for rendered output, including the dot."""
        ...

    def render(self, document: DiagramDocument) -> str:
        """Render a diagram document.

        Args:
            document: Completed diagram document

        Returns:
            Rendered text, identical for identical documents

        """
        ...
