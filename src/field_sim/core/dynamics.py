# MIT License (see LICENSE)
"""
Coulomb N-body dynamics for the charge simulation mode.

One call to step_dynamics advances every charge by a fixed step using a
semi-implicit (symplectic) Euler update with damping:

    a  = F / 12
    v' = (v + a·dt) · friction
    x' = x + v'·dt

Pairwise forces use Coulomb's law with a minimum-distance clamp
r² → max(r², 625), so two charges are never treated as closer than 25 units.
This keeps every step finite even for coincident charges.

After moving, each charge is clamped into a padded box [30, dim - 30] per
axis. Hitting a wall reverses and halves that velocity component.

Complexity: O(N²) per step.
"""
from __future__ import annotations
import math
from dataclasses import replace
from typing import Sequence

import numpy as np

from ..constants import (
    K_COULOMB,
    DYNAMICS_DT,
    FRICTION,
    FORCE_DIVISOR,
    MIN_FORCE_R2,
    WALL_PADDING,
    WALL_RESTITUTION,
)
from ..types import Charge


def _coulomb_force(c1: Charge, c2: Charge, min_r2: float) -> tuple[float, float]:
    """Clamped Coulomb force exerted by c2 on c1."""
    dx = c1.x - c2.x
    dy = c1.y - c2.y
    r2 = max(dx * dx + dy * dy, min_r2)
    r = math.sqrt(r2)
    f_mag = (K_COULOMB * c1.q * c2.q) / r2
    return f_mag * (dx / r), f_mag * (dy / r)


def step_dynamics(
    charges: Sequence[Charge],
    width: float,
    height: float,
    dt: float = DYNAMICS_DT,
    friction: float = FRICTION,
    min_r2: float = MIN_FORCE_R2,
) -> list[Charge]:
    """
    Advance all charges by one time step.

    The input list and its charges are left untouched; a new list of shallow
    copies is returned in the same order with only x, y, vx, vy changed.

    Charges are advanced one after another, in list order, on the copied
    list: the force on a charge uses the already-advanced positions of the
    charges before it. This ordering is part of the result and must be kept
    for reproducible trajectories.

    Args:
        charges: Current charge states.
        width, height: Scene dimensions used for the wall clamp.
        dt: Time step.
        friction: Velocity damping factor per step.
        min_r2: Lower bound on the squared distance used for forces.

    Returns:
        Updated charges.
    """
    updated = [replace(c) for c in charges]
    n = len(updated)

    for i in range(n):
        c1 = updated[i]
        fx = 0.0
        fy = 0.0
        for j in range(n):
            if i == j:
                continue
            dfx, dfy = _coulomb_force(c1, updated[j], min_r2)
            fx += dfx
            fy += dfy

        c1.vx = (c1.vx + (fx / FORCE_DIVISOR) * dt) * friction
        c1.vy = (c1.vy + (fy / FORCE_DIVISOR) * dt) * friction

        c1.x += c1.vx * dt
        c1.y += c1.vy * dt

        _bounce(c1, width, height)

    return updated


def _bounce(c: Charge, width: float, height: float) -> None:
    """Clamp a charge into the padded scene, reflecting and damping per axis."""
    if c.x < WALL_PADDING:
        c.x = WALL_PADDING
        c.vx *= WALL_RESTITUTION
    if c.x > width - WALL_PADDING:
        c.x = width - WALL_PADDING
        c.vx *= WALL_RESTITUTION
    if c.y < WALL_PADDING:
        c.y = WALL_PADDING
        c.vy *= WALL_RESTITUTION
    if c.y > height - WALL_PADDING:
        c.y = height - WALL_PADDING
        c.vy *= WALL_RESTITUTION


def net_forces(charges: Sequence[Charge], min_r2: float = MIN_FORCE_R2) -> np.ndarray:
    """
    Net clamped Coulomb force on each charge at the current positions.

    Unlike step_dynamics, nothing moves, so every force sees the same
    snapshot. Used to draw force arrows in dynamics mode.

    Returns:
        Array of shape (N, 2), row i being [Fx, Fy] on charges[i].
    """
    n = len(charges)
    out = np.zeros((n, 2), dtype=np.float64)
    for i in range(n):
        fx = 0.0
        fy = 0.0
        for j in range(n):
            if i == j:
                continue
            dfx, dfy = _coulomb_force(charges[i], charges[j], min_r2)
            fx += dfx
            fy += dfy
        out[i] = (fx, fy)
    return out
