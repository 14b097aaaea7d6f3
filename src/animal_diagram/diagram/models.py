"""Data models for extracted type structure and the diagram document."""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class ParameterDescriptor(BaseModel):
    """A parameter of an operation."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_name: str


class FieldDescriptor(BaseModel):
    """A field declared directly on a structured type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_name: str


class OperationDescriptor(BaseModel):
    """An operation declared directly on a structured type."""

    model_config = ConfigDict(frozen=True)

    name: str
    return_type_name: str
    is_abstract: bool = False
    parameters: tuple[ParameterDescriptor, ...] = ()


class TypeDescriptor(BaseModel):
    """Read-only structural summary of one type in a hierarchy.

    Enumerations only carry ``enumerated_values``; structured types carry
    fields, operations and an optional base type name. Ordering inside every
    sequence follows declaration order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str
    is_enumeration: bool = False
    is_abstract: bool = False
    base_type_name: str | None = None
    annotations: tuple[str, ...] = ()
    fields: tuple[FieldDescriptor, ...] = ()
    operations: tuple[OperationDescriptor, ...] = ()
    enumerated_values: tuple[str, ...] = ()

    @model_validator(mode="after")
    def validate_kind_specific_members(self) -> Self:
        """Keep enumeration and structured-type members disjoint."""
        if self.is_enumeration:
            if self.fields or self.operations or self.base_type_name:
                raise ValueError(
                    f"Enumeration '{self.name}' cannot have fields, operations or a base type"
                )
        elif self.enumerated_values:
            raise ValueError(
                f"Structured type '{self.name}' cannot have enumerated values"
            )
        return self


class DiagramDocument(BaseModel):
    """The ordered class diagram produced by one generation run."""

    model_config = ConfigDict(frozen=True)

    generated_at: datetime
    hierarchy: str
    types: tuple[TypeDescriptor, ...]

    @model_validator(mode="after")
    def validate_unique_type_names(self) -> Self:
        """Reject documents that name the same type twice."""
        seen: set[str] = set()
        for descriptor in self.types:
            if descriptor.name in seen:
                raise ValueError(f"Duplicate type name in diagram: '{descriptor.name}'")
            seen.add(descriptor.name)
        return self

    def get(self, name: str) -> TypeDescriptor | None:
        """Look up a type descriptor by short name."""
        for descriptor in self.types:
            if descriptor.name == name:
                return descriptor
        return None
