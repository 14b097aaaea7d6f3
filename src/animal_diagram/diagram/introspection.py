"""Structural fact extraction for registered types.

Reads a type's own namespace through the runtime's introspection facilities
and turns it into a TypeDescriptor. Only members declared directly on the
type are read, so inherited members never show up on a descendant.
"""

import enum
import inspect
import types
import typing
from collections.abc import Callable, Collection
from typing import Any, ClassVar, Literal, get_args, get_origin

from animal_diagram.diagram.models import (
    FieldDescriptor,
    OperationDescriptor,
    ParameterDescriptor,
    TypeDescriptor,
)
from animal_diagram.errors import AmbiguousBaseTypeError
from animal_diagram.metadata.registry import TypeEntry

UNANNOTATED = "Any"
NONE_TYPE_NAME = "None"


def type_name(annotation: Any) -> str:  # noqa: ANN401, PLR0911
    """Render an annotation as a short, stable type name.

    Examples: ``str``, ``list[str]``, ``Mapping[str, DietProfile] | None``.
    """
    if annotation is inspect.Parameter.empty:
        return UNANNOTATED
    if annotation is None or annotation is type(None):
        return NONE_TYPE_NAME
    if isinstance(annotation, str):
        return annotation

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is typing.Union or origin is types.UnionType:
        return " | ".join(type_name(arg) for arg in args)
    if origin is Literal:
        return f"Literal[{', '.join(repr(arg) for arg in args)}]"
    if origin is not None:
        origin_name = getattr(origin, "__name__", None) or str(origin).replace(
            "typing.", ""
        )
        if not args:
            return origin_name
        rendered = ", ".join("..." if arg is Ellipsis else type_name(arg) for arg in args)
        return f"{origin_name}[{rendered}]"

    if isinstance(annotation, (type, typing.TypeVar)):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def _own_annotations(obj: Any) -> dict[str, Any]:  # noqa: ANN401
    """Return annotations declared on obj itself, resolving string forms when possible."""
    try:
        return inspect.get_annotations(obj, eval_str=True)
    except NameError:
        return inspect.get_annotations(obj)


def _signature(func: Callable[..., Any]) -> inspect.Signature:
    try:
        return inspect.signature(func, eval_str=True)
    except NameError:
        return inspect.signature(func)


def _is_class_var(annotation: Any) -> bool:  # noqa: ANN401
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def extract_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """Extract public instance fields declared directly on cls."""
    return tuple(
        FieldDescriptor(name=name, type_name=type_name(annotation))
        for name, annotation in _own_annotations(cls).items()
        if _is_public(name) and not _is_class_var(annotation)
    )


def extract_parameters(func: Callable[..., Any]) -> tuple[ParameterDescriptor, ...]:
    """Extract the parameters of an instance method, excluding the receiver."""
    parameters = list(_signature(func).parameters.values())[1:]
    descriptors: list[ParameterDescriptor] = []
    for parameter in parameters:
        name = parameter.name
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            name = f"*{name}"
        elif parameter.kind is inspect.Parameter.VAR_KEYWORD:
            name = f"**{name}"
        descriptors.append(
            ParameterDescriptor(name=name, type_name=type_name(parameter.annotation))
        )
    return tuple(descriptors)


def extract_operations(cls: type) -> tuple[OperationDescriptor, ...]:
    """Extract public instance operations declared directly on cls.

    Properties, static and class methods, constructors and other special
    (underscore) members are not operations.
    """
    operations: list[OperationDescriptor] = []
    for name, member in vars(cls).items():
        if not _is_public(name) or not inspect.isfunction(member):
            continue
        signature = _signature(member)
        operations.append(
            OperationDescriptor(
                name=name,
                return_type_name=type_name(signature.return_annotation),
                is_abstract=bool(getattr(member, "__isabstractmethod__", False)),
                parameters=extract_parameters(member),
            )
        )
    return tuple(operations)


def extract_enumerated_values(cls: type[enum.Enum]) -> tuple[str, ...]:
    """Extract enumeration constant names in declaration order."""
    return tuple(member.name for member in cls)


def resolve_base_type_name(
    cls: type,
    known_types: Collection[type],
    foundation_bases: Collection[type],
) -> str | None:
    """Resolve the immediate in-hierarchy parent of cls.

    Foundation bases (``object``, framework base classes) are not part of
    the hierarchy and are ignored.

    Raises:
        AmbiguousBaseTypeError: If more than one base remains, or the
            remaining base is not a member of the hierarchy

    """
    bases = [base for base in cls.__bases__ if base not in foundation_bases]
    if not bases:
        return None
    if len(bases) > 1:
        names = ", ".join(base.__name__ for base in bases)
        raise AmbiguousBaseTypeError(cls.__name__, f"multiple candidate bases ({names})")

    base = bases[0]
    if base not in known_types:
        raise AmbiguousBaseTypeError(
            cls.__name__, f"base '{base.__name__}' is not part of the hierarchy"
        )
    return base.__name__


def describe_type(
    entry: TypeEntry,
    known_types: Collection[type],
    foundation_bases: Collection[type],
) -> TypeDescriptor:
    """Build the TypeDescriptor for one registered type."""
    cls = entry.type_
    full_name = f"{cls.__module__}.{cls.__qualname__}"

    if issubclass(cls, enum.Enum):
        return TypeDescriptor(
            name=entry.name,
            full_name=full_name,
            is_enumeration=True,
            annotations=entry.comments,
            enumerated_values=extract_enumerated_values(cls),
        )

    return TypeDescriptor(
        name=entry.name,
        full_name=full_name,
        is_abstract=inspect.isabstract(cls),
        base_type_name=resolve_base_type_name(cls, known_types, foundation_bases),
        annotations=entry.comments,
        fields=extract_fields(cls),
        operations=extract_operations(cls),
    )
