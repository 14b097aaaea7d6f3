"""Configuration for diagram generation."""

from pathlib import Path
from typing import Any, Literal, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from animal_diagram.animals import ANIMAL_HIERARCHY
from animal_diagram.errors import ConfigurationError

DEFAULT_OUTPUT_PATH = Path("ClassDiagram.xml")


class GeneratorConfig(BaseModel):
    """Configuration for a diagram generation run with Pydantic validation.

    Values typically come from a YAML file and are overridden by CLI options.
    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
    )

    hierarchy: str = Field(
        default=ANIMAL_HIERARCHY,
        description="Marker of the type hierarchy to introspect",
    )
    output_path: Path = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="Destination file for the rendered diagram (overwritten)",
    )
    output_format: Literal["xml", "json"] = Field(
        default="xml",
        description="Renderer used for the diagram",
    )

    @field_validator("hierarchy")
    @classmethod
    def validate_hierarchy(cls, v: str) -> str:
        """Reject blank hierarchy markers."""
        if not v.strip():
            raise ValueError("hierarchy must not be empty")
        return v.strip()

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties dictionary.

        Args:
            properties: Raw properties, e.g. loaded from a YAML file

        Returns:
            Validated configuration object

        Raises:
            ConfigurationError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid generator configuration: {e}") from e

    def with_overrides(self, **overrides: Any) -> Self:  # noqa: ANN401
        """Return a copy with the non-None overrides applied and validated."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return self.from_properties(values)


def load_config_file(path: Path) -> GeneratorConfig:
    """Load generator configuration from a YAML file.

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated

    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML config {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read config file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Top-level YAML must be a mapping in {path}, got {type(data).__name__}"
        )
    return GeneratorConfig.from_properties(data)
