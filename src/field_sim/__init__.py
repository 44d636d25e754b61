# MIT License (see LICENSE)
"""
field_sim - electric and magnetic field visualization engine.

This package computes what an interactive field visualizer shows: field
samples from point charges and straight wires, traced field lines, and a
damped Coulomb N-body simulation of draggable charges.

Main entry points:
    - Scene: Application state (mode, sources, settings) and per-frame queries.
    - Charge, Wire: Point sources.
    - Vector2D: Immutable 2D vector.
    - SimulationMode: ELECTRIC, MAGNETIC or DYNAMIC.
    - TickSource: Fixed-cadence driver for the dynamics loop.

Submodules:
    - core: Field samplers, field-line tracer, dynamics integrator.
    - renderer: Optional visualization adapters.

Example:
    from field_sim import Scene, SimulationMode, Vector2D

    scene = Scene(width=800, height=600)
    print(scene.field_at(Vector2D(400, 300)))
    scene.set_mode(SimulationMode.DYNAMIC)
    scene.step()
"""
from .types import Vector2D, Charge, Wire, Source, SimulationMode
from .util import magnitude, normalize
from .config import SimSettings
from .scene import Scene
from .scheduler import TickSource

__all__ = [
    # Values and sources
    "Vector2D",
    "Charge",
    "Wire",
    "Source",
    "SimulationMode",
    # Vector helpers
    "magnitude",
    "normalize",
    # State
    "SimSettings",
    "Scene",
    "TickSource",
]
