# MIT License (see LICENSE)
"""
Field-line tracing by fixed-step integration along the normalized field.

A field line is followed with explicit Euler steps of constant arc length:

    p(n+1) = p(n) + h · dir · F(p(n)) / |F(p(n))|

Tracing stops, in this order of priority, when
    1. the field is too weak to define a direction (|F| < 0.1),
    2. the line comes within the absorption radius of any source,
    3. the line leaves the scene plus a 10-unit margin,
    4. the step cap is reached (degenerate fields, e.g. saddle points).

Seeding follows the usual picture-book convention: lines leave positive
charges (dir = +1) and are traced backwards into negative ones (dir = -1).
Wires get a few concentric rings of seeds.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence

from ..constants import (
    MIN_FIELD_MAGNITUDE,
    ABSORPTION_R2,
    TRACE_MARGIN,
    MAX_TRACE_STEPS,
    CHARGE_SEED_RADIUS,
    WIRE_SEED_RADII,
    WIRE_SEED_DIVISIONS,
)
from ..types import Charge, Wire, Source, Vector2D, SimulationMode
from ..util import magnitude, normalize, dist2
from .fields import FieldSampler, electric_field_at, magnetic_field_at


@dataclass(frozen=True)
class Seed:
    """Starting point of a field line and the direction to integrate in."""
    point: Vector2D
    direction: int


def trace_line(
    seed: Vector2D,
    direction: int,
    sampler: FieldSampler,
    sources: Sequence[Source],
    step_size: float,
    bounds: tuple[float, float],
    max_steps: int = MAX_TRACE_STEPS,
) -> list[Vector2D]:
    """
    Trace one field line from a seed point.

    Args:
        seed: First point of the polyline.
        direction: +1 to follow the field, -1 to trace against it.
        sampler: Field function called as sampler(point, sources).
        sources: Sources for the sampler; also used for absorption.
        step_size: Arc length of each step (positive).
        bounds: Scene (width, height); lines may exceed it by TRACE_MARGIN.
        max_steps: Maximum number of steps.

    Returns:
        Polyline starting at the seed. Has at most max_steps + 1 points and
        may be a single point when the seed sits in a null region.
    """
    width, height = bounds
    points = [seed]
    p = seed
    for _ in range(max_steps):
        field = sampler(p, sources)
        if magnitude(field) < MIN_FIELD_MAGNITUDE:
            break
        d = normalize(field)
        p = Vector2D(p.x + d.x * step_size * direction, p.y + d.y * step_size * direction)
        points.append(p)

        if any(dist2(p, s) < ABSORPTION_R2 for s in sources):
            break
        if (
            p.x < -TRACE_MARGIN or p.x > width + TRACE_MARGIN
            or p.y < -TRACE_MARGIN or p.y > height + TRACE_MARGIN
        ):
            break
    return points


def electric_seeds(charges: Sequence[Charge], density: int) -> list[Seed]:
    """
    Seeds evenly spaced on a ring of radius 10 around every charge.

    Lines start outward from positive charges and inward from the rest.
    """
    seeds = []
    if density <= 0:
        return seeds
    for charge in charges:
        direction = 1 if charge.q > 0 else -1
        for k in range(density):
            angle = (k / density) * math.pi * 2
            seeds.append(Seed(
                charge.position + Vector2D(
                    math.cos(angle) * CHARGE_SEED_RADIUS,
                    math.sin(angle) * CHARGE_SEED_RADIUS,
                ),
                direction,
            ))
    return seeds


def magnetic_seeds(wires: Sequence[Wire]) -> list[Seed]:
    """Seeds on concentric rings around every wire, 4 per ring."""
    seeds = []
    for wire in wires:
        direction = 1 if wire.i > 0 else -1
        for r in WIRE_SEED_RADII:
            for k in range(WIRE_SEED_DIVISIONS):
                angle = (k / WIRE_SEED_DIVISIONS) * math.pi * 2
                seeds.append(Seed(
                    wire.position + Vector2D(math.cos(angle) * r, math.sin(angle) * r),
                    direction,
                ))
    return seeds


def trace_field_lines(
    mode: SimulationMode,
    charges: Sequence[Charge],
    wires: Sequence[Wire],
    step_size: float,
    density: int,
    bounds: tuple[float, float],
    max_steps: int = MAX_TRACE_STEPS,
) -> list[list[Vector2D]]:
    """
    Seed and trace every field line for the active mode.

    Dynamics mode draws no field lines, and neither does a density of 0.
    """
    if mode is SimulationMode.DYNAMIC or density <= 0:
        return []

    if mode is SimulationMode.ELECTRIC:
        seeds = electric_seeds(charges, density)
        sampler, sources = electric_field_at, charges
    else:
        seeds = magnetic_seeds(wires)
        sampler, sources = magnetic_field_at, wires

    return [
        trace_line(s.point, s.direction, sampler, sources, step_size, bounds, max_steps)
        for s in seeds
    ]
