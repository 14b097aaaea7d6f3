"""XML renderer for class diagrams.

Produces a ``ClassDiagram`` document::

    <ClassDiagram GeneratedAt="..." Hierarchy="...">
      <Class Name="Cow" FullName="..." IsAbstract="false">
        <Comment>A class representing cows</Comment>
        <BaseType>Animal</BaseType>
        <Properties><Property Name="..." Type="..." /></Properties>
        <Methods>
          <Method Name="..." ReturnType="..." IsAbstract="false">
            <Parameters><Parameter Name="..." Type="..." /></Parameters>
          </Method>
        </Methods>
      </Class>
      <Enum Name="FavoriteFood" FullName="..." IsAbstract="false">
        <Value>Meat</Value>
      </Enum>
    </ClassDiagram>
"""

import xml.etree.ElementTree as ET

from animal_diagram.diagram.models import (
    DiagramDocument,
    OperationDescriptor,
    TypeDescriptor,
)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'
INDENT = "  "


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _operation_element(operation: OperationDescriptor) -> ET.Element:
    method = ET.Element(
        "Method",
        {
            "Name": operation.name,
            "ReturnType": operation.return_type_name,
            "IsAbstract": _bool(operation.is_abstract),
        },
    )
    if operation.parameters:
        parameters = ET.SubElement(method, "Parameters")
        for parameter in operation.parameters:
            ET.SubElement(
                parameters,
                "Parameter",
                {"Name": parameter.name, "Type": parameter.type_name},
            )
    return method


def type_element(descriptor: TypeDescriptor) -> ET.Element:
    """Build the ``Class`` or ``Enum`` element for one type."""
    element = ET.Element(
        "Enum" if descriptor.is_enumeration else "Class",
        {
            "Name": descriptor.name,
            "FullName": descriptor.full_name,
            "IsAbstract": _bool(descriptor.is_abstract),
        },
    )

    for comment in descriptor.annotations:
        ET.SubElement(element, "Comment").text = comment

    if descriptor.base_type_name:
        ET.SubElement(element, "BaseType").text = descriptor.base_type_name

    if descriptor.is_enumeration:
        for value in descriptor.enumerated_values:
            ET.SubElement(element, "Value").text = value
        return element

    if descriptor.fields:
        properties = ET.SubElement(element, "Properties")
        for field in descriptor.fields:
            ET.SubElement(
                properties, "Property", {"Name": field.name, "Type": field.type_name}
            )

    if descriptor.operations:
        methods = ET.SubElement(element, "Methods")
        methods.extend(_operation_element(op) for op in descriptor.operations)

    return element


class XmlRenderer:
    """Renders the diagram document as an indented XML tree."""

    @property
    def name(self) -> str:
        """Return renderer identifier."""
        return "xml"

    @property
    def file_extension(self) -> str:
        """Return default file extension."""
        return ".xml"

    def render_element(self, document: DiagramDocument) -> ET.Element:
        """Build the ``ClassDiagram`` element tree without serialising it."""
        root = ET.Element(
            "ClassDiagram",
            {
                "GeneratedAt": document.generated_at.isoformat(),
                "Hierarchy": document.hierarchy,
            },
        )
        root.extend(type_element(descriptor) for descriptor in document.types)
        return root

    def render(self, document: DiagramDocument) -> str:
        """Render the document as UTF-8 XML text."""
        root = self.render_element(document)
        ET.indent(root, space=INDENT)
        return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"
