"""Workspace-level pytest configuration and fixtures."""

import pytest

from animal_diagram.metadata import HierarchyRegistry
from animal_diagram.renderers import RendererRegistry


@pytest.fixture(autouse=True, scope="function")
def isolate_registries():
    """Automatically preserve and restore registry state for each test.

    HierarchyRegistry and RendererRegistry hold process-wide mutable state;
    tests that clear or extend them must not leak into later tests.
    """
    saved_hierarchies = HierarchyRegistry.snapshot_state()
    saved_renderers = RendererRegistry.snapshot_state()

    yield

    HierarchyRegistry.restore_state(saved_hierarchies)
    RendererRegistry.restore_state(saved_renderers)
