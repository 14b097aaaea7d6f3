"""Output formatting for animal-diagram CLI commands."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from animal_diagram.animals import Animal
from animal_diagram.diagram.models import DiagramDocument

console = Console()


class OutputFormatter:
    """Handles formatting CLI output for different commands."""

    def print_types_table(self, document: DiagramDocument) -> None:
        """Print one row per type in the diagram."""
        table = Table(title=f"Types in {document.hierarchy}")
        table.add_column("Name", style="cyan")
        table.add_column("Kind")
        table.add_column("Base")
        table.add_column("Members", justify="right")
        table.add_column("Comments")

        for descriptor in document.types:
            if descriptor.is_enumeration:
                kind = "enum"
                members = len(descriptor.enumerated_values)
            else:
                kind = "abstract class" if descriptor.is_abstract else "class"
                members = len(descriptor.fields) + len(descriptor.operations)
            table.add_row(
                descriptor.name,
                kind,
                descriptor.base_type_name or "-",
                str(members),
                "; ".join(descriptor.annotations),
            )

        console.print(table)

    def print_generation_summary(
        self, document: DiagramDocument, output_path: Path, renderer_name: str
    ) -> None:
        """Print the result of a generation run."""
        console.print(
            f"[green]Wrote {len(document.types)} types from "
            f"[bold]{document.hierarchy}[/bold] to {output_path} "
            f"({renderer_name})[/green]"
        )

    def print_animal(self, animal: Animal) -> None:
        """Print an animal's details and greeting."""
        table = Table(title=f"{animal.what_animal} Information", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Name", animal.name)
        table.add_row("Country", animal.country)
        table.add_row("Hides from other animals", str(animal.hide_from_other_animals))
        table.add_row("Classification", animal.get_classification_animal().value)
        table.add_row("Favorite Food", animal.get_favorite_food().value)
        console.print(table)
        console.print(animal.say_hello())
