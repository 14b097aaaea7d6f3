"""Renderers turning diagram documents into text."""

from animal_diagram.renderers.json_renderer import JsonRenderer
from animal_diagram.renderers.protocol import Renderer
from animal_diagram.renderers.registry import RendererRegistry, RendererRegistryState
from animal_diagram.renderers.xml_renderer import XmlRenderer


def register_renderers() -> None:
    """Register the built-in renderers."""
    RendererRegistry.register(XmlRenderer())
    RendererRegistry.register(JsonRenderer())


__all__ = [
    "JsonRenderer",
    "Renderer",
    "RendererRegistry",
    "RendererRegistryState",
    "XmlRenderer",
    "register_renderers",
]
