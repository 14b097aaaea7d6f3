"""Tests for per-type structural extraction."""

import abc
import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import ClassVar, Literal, Optional

import pytest

from animal_diagram.diagram.introspection import (
    describe_type,
    extract_enumerated_values,
    extract_fields,
    extract_operations,
    resolve_base_type_name,
    type_name,
)
from animal_diagram.diagram.models import (
    FieldDescriptor,
    OperationDescriptor,
    ParameterDescriptor,
)
from animal_diagram.errors import AmbiguousBaseTypeError
from animal_diagram.metadata.registry import TypeEntry

FOUNDATION = (object, abc.ABC)


class Root(ABC):
    name: str
    country: str
    registry: ClassVar[list[str]] = []
    _secret: int = 0

    @abstractmethod
    def act(self, target: str, times: int = 1) -> bool: ...

    def describe(self, verbose):
        return str(verbose)

    @property
    def label(self) -> str:
        return self.name

    @staticmethod
    def build() -> int:
        return 1

    @classmethod
    def create(cls) -> None:
        return None

    def _helper(self) -> None:
        pass

    def __repr__(self) -> str:
        return "Root"


class Leaf(Root):
    def act(self, target: str, times: int = 1) -> bool:
        return True


class Variant(Root):
    weight: float

    def act(self, target: str, times: int = 1) -> bool:
        return False

    def grow(self, *parts: str, **options: int) -> list[str]:
        return list(parts)


class Mixin:
    pass


class Tangled(Root, Mixin):
    def act(self, target: str, times: int = 1) -> bool:
        return True


class Level(Enum):
    LOW = 1
    MID = 2
    HIGH = 3
    ALSO_LOW = 1


class TestTypeName:
    """Tests for rendering annotations as type names."""

    @pytest.mark.parametrize(
        ("annotation", "expected"),
        [
            (int, "int"),
            (None, "None"),
            (type(None), "None"),
            (inspect.Parameter.empty, "Any"),
            ("Forward", "Forward"),
            (list[str], "list[str]"),
            (tuple[int, ...], "tuple[int, ...]"),
            (dict[str, int] | None, "dict[str, int] | None"),
            (Optional[int], "int | None"),  # noqa: UP045
            (Mapping[str, Level], "Mapping[str, Level]"),
            (Literal["xml", "json"], "Literal['xml', 'json']"),
        ],
    )
    def test_type_name(self, annotation: object, expected: str) -> None:
        """Test that annotations render as short, stable names."""
        assert type_name(annotation) == expected


class TestExtractFields:
    """Tests for field extraction."""

    def test_extracts_public_instance_fields_in_declaration_order(self) -> None:
        """Test that ClassVar and private annotations are skipped."""
        assert extract_fields(Root) == (
            FieldDescriptor(name="name", type_name="str"),
            FieldDescriptor(name="country", type_name="str"),
        )

    def test_inherited_fields_are_not_repeated(self) -> None:
        """Test that a subclass declaring nothing has no fields."""
        assert extract_fields(Leaf) == ()

    def test_subclass_reports_only_its_own_fields(self) -> None:
        """Test that only fields introduced by the subclass are reported."""
        assert extract_fields(Variant) == (
            FieldDescriptor(name="weight", type_name="float"),
        )


class TestExtractOperations:
    """Tests for operation extraction."""

    def test_excludes_properties_static_class_and_special_members(self) -> None:
        """Test that only plain public instance methods are operations."""
        names = [operation.name for operation in extract_operations(Root)]

        assert names == ["act", "describe"]

    def test_abstract_operation_with_parameters(self) -> None:
        """Test abstract flag, return type and parameter order."""
        act = extract_operations(Root)[0]

        assert act == OperationDescriptor(
            name="act",
            return_type_name="bool",
            is_abstract=True,
            parameters=(
                ParameterDescriptor(name="target", type_name="str"),
                ParameterDescriptor(name="times", type_name="int"),
            ),
        )

    def test_unannotated_operation(self) -> None:
        """Test that missing annotations render as Any."""
        describe = extract_operations(Root)[1]

        assert describe.return_type_name == "Any"
        assert describe.parameters == (
            ParameterDescriptor(name="verbose", type_name="Any"),
        )

    def test_overrides_are_declared_on_the_subclass(self) -> None:
        """Test that an override is reported on the overriding class, not abstract."""
        operations = extract_operations(Leaf)

        assert [operation.name for operation in operations] == ["act"]
        assert operations[0].is_abstract is False

    def test_variadic_parameters_keep_their_markers(self) -> None:
        """Test that *args and **kwargs are named with their star prefixes."""
        grow = extract_operations(Variant)[1]

        assert grow.return_type_name == "list[str]"
        assert grow.parameters == (
            ParameterDescriptor(name="*parts", type_name="str"),
            ParameterDescriptor(name="**options", type_name="int"),
        )


class TestExtractEnumeratedValues:
    """Tests for enumeration value extraction."""

    def test_values_in_declaration_order_without_aliases(self) -> None:
        """Test that enum constants keep declaration order and skip aliases."""
        assert extract_enumerated_values(Level) == ("LOW", "MID", "HIGH")


class TestResolveBaseTypeName:
    """Tests for base type resolution."""

    def test_root_has_no_base(self) -> None:
        """Test that foundation bases are not reported."""
        assert resolve_base_type_name(Root, {Root}, FOUNDATION) is None

    def test_variant_resolves_to_root(self) -> None:
        """Test that a variant records its in-hierarchy parent."""
        assert resolve_base_type_name(Leaf, {Root, Leaf}, FOUNDATION) == "Root"

    def test_base_outside_hierarchy_raises(self) -> None:
        """Test that a base missing from the hierarchy is a consistency failure."""
        with pytest.raises(AmbiguousBaseTypeError, match="not part of the hierarchy"):
            resolve_base_type_name(Leaf, {Leaf}, FOUNDATION)

    def test_multiple_bases_raise(self) -> None:
        """Test that more than one candidate base is ambiguous."""
        with pytest.raises(AmbiguousBaseTypeError, match="multiple candidate bases"):
            resolve_base_type_name(Tangled, {Root, Mixin, Tangled}, FOUNDATION)

    def test_base_sharing_a_registered_name_raises(self) -> None:
        """Test that bases are matched by identity, not by name."""
        ForeignRoot = type("Root", (ABC,), {})
        Impostor = type("Impostor", (ForeignRoot,), {})

        with pytest.raises(AmbiguousBaseTypeError, match="'Root' is not part"):
            resolve_base_type_name(Impostor, {Root, Impostor}, FOUNDATION)


class TestDescribeType:
    """Tests for building TypeDescriptors."""

    def test_describe_structured_type(self) -> None:
        """Test describing an abstract root class."""
        entry = TypeEntry(type_=Root, comments=("A", "B"))

        descriptor = describe_type(entry, {Root}, FOUNDATION)

        assert descriptor.name == "Root"
        assert descriptor.full_name.endswith(".Root")
        assert descriptor.is_enumeration is False
        assert descriptor.is_abstract is True
        assert descriptor.base_type_name is None
        assert descriptor.annotations == ("A", "B")
        assert len(descriptor.fields) == 2
        assert descriptor.enumerated_values == ()

    def test_describe_concrete_variant(self) -> None:
        """Test describing a concrete subclass."""
        descriptor = describe_type(TypeEntry(type_=Leaf), {Root, Leaf}, FOUNDATION)

        assert descriptor.is_abstract is False
        assert descriptor.base_type_name == "Root"
        assert descriptor.annotations == ()

    def test_describe_enumeration(self) -> None:
        """Test that enumerations only carry their values."""
        descriptor = describe_type(
            TypeEntry(type_=Level, comments=("levels",)), {Level}, FOUNDATION
        )

        assert descriptor.is_enumeration is True
        assert descriptor.is_abstract is False
        assert descriptor.enumerated_values == ("LOW", "MID", "HIGH")
        assert descriptor.annotations == ("levels",)
        assert descriptor.fields == ()
        assert descriptor.operations == ()
        assert descriptor.base_type_name is None
