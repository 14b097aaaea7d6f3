"""JSON renderer for class diagrams."""

from animal_diagram.diagram.models import DiagramDocument


class JsonRenderer:
    """Renders the diagram document as indented JSON."""

    @property
    def name(self) -> str:
        """Return renderer identifier."""
        return "json"

    @property
    def file_extension(self) -> str:
        """Return default file extension."""
        return ".json"

    def render(self, document: DiagramDocument) -> str:
        """Render the document through its pydantic JSON serialisation."""
        return document.model_dump_json(indent=2) + "\n"
