# MIT License (see LICENSE)
"""
The application state container.

Scene is the explicit state object a host owns and passes into the engine
every frame. It manages:
- The active SimulationMode.
- The charge and wire sets (add, remove, edit, drag, clear, reset).
- Display settings (SimSettings), including the pause flag.
- Per-frame queries: field sample, field lines, vector grid, force arrows.
- The dynamics tick (step), which replaces the charge list with the
  integrator's output.

Mode decides which source variant is active: MAGNETIC works on wires, the
other two modes on charges. Edits are checked at this boundary (unique ids,
positive mass) so the numeric core never has to.

Structure:
    - Host creates a Scene (starts with the default dipole and one wire).
    - UI actions call the editing methods.
    - A TickSource calls scene.step() at a fixed cadence.
    - A renderer reads the per-frame queries.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace

import numpy as np

from .config import SimSettings
from .constants import DYNAMICS_DT
from .profiler import Profiler
from .types import Charge, Wire, Source, Vector2D, SimulationMode
from .util import as_vector, dist2
from .core.fields import field_at, sampler_for, sample_grid
from .core.tracing import trace_field_lines
from .core.dynamics import step_dynamics, net_forces

logger = logging.getLogger(__name__)

# Picking radius for drag-and-drop (r² < 625).
PICK_RADIUS: float = 25.0

DEFAULT_CHARGE_VALUE: float = 10.0
DEFAULT_WIRE_CURRENT: float = 10.0
DEFAULT_MASS: float = 10.0

# New sources land uniformly in [150, 550) x [100, 500).
SPAWN_ORIGIN: tuple[float, float] = (150.0, 100.0)
SPAWN_EXTENT: tuple[float, float] = (400.0, 400.0)


def initial_charges() -> list[Charge]:
    """Default dipole: +15 and -15 on a horizontal line."""
    return [
        Charge(id="1", x=250.0, y=300.0, q=15.0, mass=DEFAULT_MASS),
        Charge(id="2", x=550.0, y=300.0, q=-15.0, mass=DEFAULT_MASS),
    ]


def initial_wires() -> list[Wire]:
    """Default single wire at the scene center."""
    return [Wire(id="w1", x=400.0, y=300.0, i=DEFAULT_WIRE_CURRENT)]


def _check_unique(items: list[Source]) -> None:
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"Duplicate source id: {item.id!r}")
        seen.add(item.id)


def _check_charge(charge: Charge) -> None:
    if charge.mass <= 0:
        raise ValueError(f"Charge {charge.id!r} mass must be positive, got {charge.mass}")


@dataclass
class Scene:
    """
    Visualizer state.

    Attributes:
        width, height: Scene dimensions in scene units. Must be positive.
        mode: Active simulation mode.
        settings: Display and tracing settings.
        charges: Point charges (active in ELECTRIC and DYNAMIC modes).
        wires: Straight wires (active in MAGNETIC mode).
        profiler: Optional Profiler timing step and overlay sections.
        rng: Random generator for the ids and positions of added sources.
        time: Simulated time advanced by step(), in dynamics time units.
    """
    width: float = 800.0
    height: float = 600.0
    mode: SimulationMode = SimulationMode.ELECTRIC
    settings: SimSettings = field(default_factory=SimSettings)
    charges: list[Charge] = field(default_factory=initial_charges)
    wires: list[Wire] = field(default_factory=initial_wires)
    profiler: Profiler | None = None
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    time: float = 0.0

    def __post_init__(self) -> None:
        self.resize(self.width, self.height)
        _check_unique(self.charges)
        _check_unique(self.wires)
        for c in self.charges:
            _check_charge(c)

    # -------------------------------------------------------------------------
    # Mode and settings
    # -------------------------------------------------------------------------

    def set_mode(self, mode: SimulationMode) -> None:
        if mode is not self.mode:
            logger.info("Mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def update_settings(self, **changes) -> SimSettings:
        """Apply validated setting changes and return the new settings."""
        self.settings = self.settings.updated(**changes)
        return self.settings

    def set_paused(self, paused: bool) -> None:
        if paused != self.settings.is_paused:
            logger.info("Dynamics %s", "paused" if paused else "resumed")
        self.settings = self.settings.updated(is_paused=paused)

    def resize(self, width: float, height: float) -> None:
        """Change scene dimensions (e.g. when the canvas is resized)."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Scene dimensions must be positive, got ({width}, {height})")
        self.width = float(width)
        self.height = float(height)

    @property
    def bounds(self) -> tuple[float, float]:
        return self.width, self.height

    @property
    def active_sources(self) -> list[Source]:
        """Sources of the variant the current mode works on."""
        if self.mode is SimulationMode.MAGNETIC:
            return self.wires
        return self.charges

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def _new_id(self) -> str:
        taken = {s.id for s in self.active_sources}
        while True:
            new_id = format(int(self.rng.integers(0, 16**9)), "09x")
            if new_id not in taken:
                return new_id

    def add_source(
        self,
        x: float | None = None,
        y: float | None = None,
        value: float | None = None,
    ) -> Source:
        """
        Add a source of the active variant.

        Missing coordinates are drawn uniformly from the spawn area. Charges
        start at rest with the default mass.

        Args:
            x, y: Position. Random if omitted.
            value: Charge or current. Defaults to 10.

        Returns:
            The new source.
        """
        ox, oy = SPAWN_ORIGIN
        ex, ey = SPAWN_EXTENT
        if x is None:
            x = ox + float(self.rng.random()) * ex
        if y is None:
            y = oy + float(self.rng.random()) * ey

        source_id = self._new_id()
        if self.mode is SimulationMode.MAGNETIC:
            current = DEFAULT_WIRE_CURRENT if value is None else float(value)
            source = Wire(id=source_id, x=float(x), y=float(y), i=current)
            self.wires = [*self.wires, source]
        else:
            q = DEFAULT_CHARGE_VALUE if value is None else float(value)
            source = Charge(id=source_id, x=float(x), y=float(y), q=q, mass=DEFAULT_MASS)
            self.charges = [*self.charges, source]
        logger.debug("Added %s %s at (%.1f, %.1f)", type(source).__name__, source_id, x, y)
        return source

    def add_charge(self, charge: Charge) -> None:
        """Add a caller-built charge, checking id uniqueness and mass."""
        _check_charge(charge)
        _check_unique([*self.charges, charge])
        self.charges = [*self.charges, charge]

    def add_wire(self, wire: Wire) -> None:
        """Add a caller-built wire, checking id uniqueness."""
        _check_unique([*self.wires, wire])
        self.wires = [*self.wires, wire]

    def find(self, source_id: str) -> Source | None:
        """Look up a source of the active variant by id."""
        for s in self.active_sources:
            if s.id == source_id:
                return s
        return None

    def _require(self, source_id: str) -> Source:
        s = self.find(source_id)
        if s is None:
            raise ValueError(f"No {self.mode.value.lower()} source with id {source_id!r}")
        return s

    def remove(self, source_id: str) -> None:
        """Remove a source of the active variant."""
        self._require(source_id)
        if self.mode is SimulationMode.MAGNETIC:
            self.wires = [w for w in self.wires if w.id != source_id]
        else:
            self.charges = [c for c in self.charges if c.id != source_id]
        logger.debug("Removed source %s", source_id)

    def clear(self) -> None:
        """Remove every source of the active variant."""
        if self.mode is SimulationMode.MAGNETIC:
            self.wires = []
        else:
            self.charges = []
        logger.info("Cleared %s sources", self.mode.value.lower())

    def update_value(self, source_id: str, value: float) -> None:
        """Set the charge (or current, in magnetic mode) of a source."""
        self._require(source_id)
        if self.mode is SimulationMode.MAGNETIC:
            self.wires = [replace(w, i=float(value)) if w.id == source_id else w for w in self.wires]
        else:
            self.charges = [replace(c, q=float(value)) if c.id == source_id else c for c in self.charges]

    def update_position(self, source_id: str, x: float, y: float) -> None:
        """
        Move a source (drag). A dragged charge is put at rest.
        """
        self._require(source_id)
        x, y = float(x), float(y)
        if self.mode is SimulationMode.MAGNETIC:
            self.wires = [replace(w, x=x, y=y) if w.id == source_id else w for w in self.wires]
        else:
            self.charges = [
                replace(c, x=x, y=y, vx=0.0, vy=0.0) if c.id == source_id else c
                for c in self.charges
            ]

    def query_point(self, point, radius: float = PICK_RADIUS) -> Source | None:
        """
        Find the first active source within `radius` of a point.

        Used to start a drag. Returns None when nothing is close enough.
        """
        p = as_vector(point)
        r2 = radius * radius
        for s in self.active_sources:
            if dist2(p, s) < r2:
                return s
        return None

    def reset(self) -> None:
        """Restore the default sources and unpause."""
        self.charges = initial_charges()
        self.wires = initial_wires()
        self.settings = self.settings.updated(is_paused=False)
        self.time = 0.0
        logger.info("Scene reset")

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def step(self) -> bool:
        """
        Advance the dynamics by one tick.

        Only runs in DYNAMIC mode while not paused.

        Returns:
            True if the charges were advanced.
        """
        if self.mode is not SimulationMode.DYNAMIC or self.settings.is_paused:
            return False
        if self.profiler:
            with self.profiler.section("dynamics"):
                self.charges = step_dynamics(self.charges, self.width, self.height)
        else:
            self.charges = step_dynamics(self.charges, self.width, self.height)
        self.time += DYNAMICS_DT
        return True

    # -------------------------------------------------------------------------
    # Per-frame queries
    # -------------------------------------------------------------------------

    def field_at(self, point) -> Vector2D:
        """Field of the active sources at a point (cursor vector)."""
        return field_at(self.mode, as_vector(point), self.charges, self.wires)

    def field_lines(self) -> list[list[Vector2D]]:
        """Traced field lines for the current mode and settings."""
        def trace():
            return trace_field_lines(
                self.mode,
                self.charges,
                self.wires,
                self.settings.step_size,
                self.settings.field_line_density,
                self.bounds,
            )

        if self.profiler:
            with self.profiler.section("field_lines"):
                return trace()
        return trace()

    def vector_grid(self, spacing: float = 40.0) -> tuple[np.ndarray, np.ndarray]:
        """Field samples on the arrow grid as (points, fields) arrays."""
        sampler = sampler_for(self.mode)
        if self.profiler:
            with self.profiler.section("vector_grid"):
                return sample_grid(sampler, self.active_sources, self.width, self.height, spacing)
        return sample_grid(sampler, self.active_sources, self.width, self.height, spacing)

    def force_vectors(self) -> np.ndarray:
        """Net Coulomb force on each charge, shape (N, 2)."""
        return net_forces(self.charges)

