# MIT License (see LICENSE)
"""
Core type definitions for the field engine.

Defines the fundamental data structures:
- Vector2D: immutable 2D value used for points and field samples
- Charge, Wire: the two kinds of point sources
- Source: tagged union over Charge and Wire
- SimulationMode: which variant of source is active

Coordinates are scene units (pixels). Sources are plain mutable records owned
by the caller; the engine reads them and, for the integrator, returns updated
copies instead of mutating them.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

import numpy as np


class SimulationMode(Enum):
    """Operating mode of the visualizer."""

    ELECTRIC = "ELECTRIC"
    MAGNETIC = "MAGNETIC"
    DYNAMIC = "DYNAMIC"


# =============================================================================
# Vector
# =============================================================================

@dataclass(frozen=True)
class Vector2D:
    """
    Immutable 2D vector.

    Arithmetic always returns new vectors; there is no in-place update.

    Attributes:
        x: Horizontal component.
        y: Vertical component (screen convention, +y points down).
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Vector2D:
        return Vector2D(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_array(self) -> np.ndarray:
        """Return the vector as a float64 array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)


# =============================================================================
# Sources
# =============================================================================

@dataclass
class Charge:
    """
    A movable point charge.

    Attributes:
        id: Caller-assigned identifier, unique among all charges.
        x, y: Position in scene units.
        q: Signed charge (scaled units).
        vx, vy: Velocity, only changed by the dynamics integrator or drags.
        mass: Inertia, strictly positive. The integrator currently divides by
              a constant instead (see constants.FORCE_DIVISOR); mass is read
              by the diagnostics in core.invariants only.
    """
    id: str
    x: float
    y: float
    q: float
    vx: float = 0.0
    vy: float = 0.0
    mass: float = 10.0

    @property
    def position(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    @property
    def velocity(self) -> Vector2D:
        return Vector2D(self.vx, self.vy)


@dataclass
class Wire:
    """
    An infinite straight wire perpendicular to the scene plane.

    Positive current flows out of the page, giving a counterclockwise field
    (right-hand rule) in a y-up frame.

    Attributes:
        id: Caller-assigned identifier, unique among all wires.
        x, y: Position of the wire's cross-section.
        i: Signed current.
    """
    id: str
    x: float
    y: float
    i: float

    @property
    def position(self) -> Vector2D:
        return Vector2D(self.x, self.y)


# Tagged union for source dispatch
Source = Charge | Wire


def source_value(source: Source) -> float:
    """Signed strength of a source: charge for Charge, current for Wire."""
    if isinstance(source, Charge):
        return source.q
    if isinstance(source, Wire):
        return source.i
    raise TypeError(f"Unknown source type: {type(source)}")
