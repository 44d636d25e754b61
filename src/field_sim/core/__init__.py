# MIT License (see LICENSE)
"""
Core numeric engine.

This subpackage provides:
    - Field samplers: electric (point charges) and magnetic (straight wires).
    - Field-line tracing and seeding.
    - Coulomb dynamics integrator and force snapshot.
    - Diagnostic invariants.

Typical usage:
    from field_sim.core import electric_field_at, step_dynamics

    E = electric_field_at(Vector2D(400, 300), charges)
    charges = step_dynamics(charges, width=800, height=600)
"""
from .fields import (
    electric_field_at,
    magnetic_field_at,
    field_at,
    sampler_for,
    sample_grid,
)
from .tracing import (
    Seed,
    trace_line,
    electric_seeds,
    magnetic_seeds,
    trace_field_lines,
)
from .dynamics import step_dynamics, net_forces
from .invariants import kinetic_energy, linear_momentum

__all__ = [
    # Fields
    "electric_field_at",
    "magnetic_field_at",
    "field_at",
    "sampler_for",
    "sample_grid",
    # Tracing
    "Seed",
    "trace_line",
    "electric_seeds",
    "magnetic_seeds",
    "trace_field_lines",
    # Dynamics
    "step_dynamics",
    "net_forces",
    # Diagnostics
    "kinetic_energy",
    "linear_momentum",
]
