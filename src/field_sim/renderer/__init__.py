# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - BufferedRenderer: Records frames for inspection or export.

The field engine has no drawing dependency; these adapters are optional.

Typical usage:
    from field_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_scene(scene, cursor=(400, 250))
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "BufferedRenderer",
]
