# MIT License (see LICENSE)
"""
Scaled physical constants and tuning values used by the field engine.

None of these are SI values. Scene coordinates are pixels and the constants
were picked so that fields and motion look pleasant on a typical canvas.
"""
from __future__ import annotations

# Scaled Coulomb constant k = 1/(4πε₀) in scene units.
K_COULOMB: float = 9e3

# Scaled μ₀/2π for the field of an infinite straight wire, B = (μ₀/2π)·I/r.
MU0_2PI: float = 2.0

# Field samplers ignore sources closer than these radii (singularity guard).
E_MIN_DISTANCE: float = 15.0
B_MIN_DISTANCE: float = 10.0

# -----------------------------------------------------------------------------
# Dynamics
# -----------------------------------------------------------------------------

# Fixed integration step. Deliberately small so motion reads as slow-motion.
DYNAMICS_DT: float = 0.08

# Velocity damping factor applied every step (approximates drag).
FRICTION: float = 0.98

# Uniform force-to-acceleration divisor. Charge.mass is not read here.
FORCE_DIVISOR: float = 12.0

# Pairwise forces treat charges as never closer than 25 units (r² >= 625).
MIN_FORCE_R2: float = 625.0

# Padded invisible wall and the velocity factor applied on impact.
WALL_PADDING: float = 30.0
WALL_RESTITUTION: float = -0.5

# -----------------------------------------------------------------------------
# Field-line tracing
# -----------------------------------------------------------------------------

# Below this magnitude the field has no meaningful direction.
MIN_FIELD_MAGNITUDE: float = 0.1

# A traced line is absorbed once within radius 10 of any source (r² < 100).
ABSORPTION_R2: float = 100.0

# Lines may run this far outside the scene before being cut.
TRACE_MARGIN: float = 10.0

MAX_TRACE_STEPS: int = 300

# Seed ring radius around charges, and ring radii/divisions around wires.
CHARGE_SEED_RADIUS: float = 10.0
WIRE_SEED_RADII: tuple[float, ...] = (30.0, 70.0, 110.0, 150.0, 190.0)
WIRE_SEED_DIVISIONS: int = 4
