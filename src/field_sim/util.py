# MIT License (see LICENSE)
"""
Utility functions for 2D vector math and numeric conversion.

The scalar helpers work on Vector2D values (or anything with .x/.y) and use
plain float arithmetic so results are bit-for-bit reproducible.
"""
from __future__ import annotations
import math

from .types import Vector2D


def as_vector(p) -> Vector2D:
    """Accept a Vector2D, a source with x/y, or an (x, y) pair."""
    if isinstance(p, Vector2D):
        return p
    if hasattr(p, "x") and hasattr(p, "y"):
        return Vector2D(float(p.x), float(p.y))
    return Vector2D(float(p[0]), float(p[1]))


def magnitude(v: Vector2D) -> float:
    """Euclidean norm sqrt(x² + y²). Zero vector gives 0."""
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize(v: Vector2D) -> Vector2D:
    """
    Return a unit vector in the direction of v.

    A vector of exactly zero length normalizes to (0, 0) instead of raising.
    """
    mag = magnitude(v)
    if mag == 0:
        return Vector2D(0.0, 0.0)
    return Vector2D(v.x / mag, v.y / mag)


def dist2(a: Vector2D, b) -> float:
    """Squared distance between a point and anything with x/y."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy
