# MIT License (see LICENSE)
"""
Diagnostic quantities for the charge dynamics.

The damped integrator is not conservative, so these are for watching the
system settle rather than for checking conservation. Both use Charge.mass,
which the integrator itself does not read.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..types import Charge


def kinetic_energy(charges: Sequence[Charge]) -> float:
    """
    Total kinetic energy T = Σ ½·m·v².

    Args:
        charges: Charges to sum over.
    """
    ke = 0.0
    for c in charges:
        ke += 0.5 * c.mass * (c.vx * c.vx + c.vy * c.vy)
    return ke


def linear_momentum(charges: Sequence[Charge]) -> np.ndarray:
    """Total linear momentum P = Σ m·v as an array [Px, Py]."""
    p = np.zeros(2, dtype=np.float64)
    for c in charges:
        p += c.mass * c.velocity.as_array()
    return p
