# MIT License (see LICENSE)
"""
Renderer adapters for field visualization.

This module provides an abstract base class for rendering and two concrete
implementations. The engine never paints: a renderer receives the per-frame
draw data (vector samples, field lines, force arrows, sources, cursor) and
turns it into pixels, text or recorded frames.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, TextIO
import sys

import numpy as np

from ..constants import MIN_FIELD_MAGNITUDE
from ..types import Charge, Wire, Source, Vector2D, SimulationMode, source_value
from ..util import as_vector, magnitude

if TYPE_CHECKING:
    from ..scene import Scene

# Force arrows below this magnitude are not drawn.
MIN_FORCE_MAGNITUDE: float = 0.5


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a graphics backend (matplotlib, pygame, a web
    canvas, ...). The convenience method render_scene() decides what to
    draw for the scene's mode and calls the hooks below in canvas order:
    vector grid, field lines, force arrows, sources, cursor.
    """

    @abstractmethod
    def begin_frame(self, time: float, mode: SimulationMode) -> None:
        """Begin a new frame."""
        ...

    @abstractmethod
    def draw_vector(self, origin: Vector2D, field: Vector2D) -> None:
        """Draw one field sample (arrow grid or cursor)."""
        ...

    @abstractmethod
    def draw_field_line(self, points: Sequence[Vector2D]) -> None:
        """Draw a traced field line polyline."""
        ...

    @abstractmethod
    def draw_force(self, charge: Charge, force: Vector2D) -> None:
        """Draw the net force arrow on a charge (dynamics mode)."""
        ...

    @abstractmethod
    def draw_source(self, source: Source) -> None:
        """Draw a charge or wire marker."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_scene(self, scene: "Scene", cursor=None) -> None:
        """
        Render one frame of a scene.

        Args:
            scene: The scene to render.
            cursor: Optional cursor position; adds the field vector there.
        """
        mode = scene.mode
        settings = scene.settings
        self.begin_frame(scene.time, mode)

        if mode is SimulationMode.DYNAMIC:
            forces = scene.force_vectors()
            for charge, (fx, fy) in zip(scene.charges, forces):
                force = Vector2D(float(fx), float(fy))
                if magnitude(force) > MIN_FORCE_MAGNITUDE:
                    self.draw_force(charge, force)
        else:
            if settings.show_vectors:
                points, fields = scene.vector_grid()
                mags = np.hypot(fields[:, 0], fields[:, 1])
                for (px, py), (fx, fy), m in zip(points, fields, mags):
                    if m < MIN_FIELD_MAGNITUDE:
                        continue
                    self.draw_vector(Vector2D(float(px), float(py)), Vector2D(float(fx), float(fy)))
            for line in scene.field_lines():
                self.draw_field_line(line)

        for source in scene.active_sources:
            self.draw_source(source)

        if cursor is not None and settings.show_mouse_vector and mode is not SimulationMode.DYNAMIC:
            p = as_vector(cursor)
            field = scene.field_at(p)
            if magnitude(field) > MIN_FIELD_MAGNITUDE:
                self.draw_vector(p, field)

        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Field lines and vectors are summarized rather than dumped point by point.

    Output:
        === Frame t=0.0000 ELECTRIC ===
        line n=42 (260.0, 300.0) -> (540.1, 300.4)
        [1] Charge +15.00 @ (250.00, 300.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = False):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also print every vector sample.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._vectors = 0

    def begin_frame(self, time: float, mode: SimulationMode) -> None:
        self._vectors = 0
        self.output.write(f"=== Frame t={time:.4f} {mode.value} ===\n")

    def draw_vector(self, origin: Vector2D, field: Vector2D) -> None:
        self._vectors += 1
        if self.verbose:
            self.output.write(
                f"vec ({origin.x:.1f}, {origin.y:.1f}) |F|={magnitude(field):.2f}\n"
            )

    def draw_field_line(self, points: Sequence[Vector2D]) -> None:
        a, b = points[0], points[-1]
        self.output.write(
            f"line n={len(points)} ({a.x:.1f}, {a.y:.1f}) -> ({b.x:.1f}, {b.y:.1f})\n"
        )

    def draw_force(self, charge: Charge, force: Vector2D) -> None:
        self.output.write(f"force [{charge.id}] ({force.x:.2f}, {force.y:.2f})\n")

    def draw_source(self, source: Source) -> None:
        kind = "Wire" if isinstance(source, Wire) else "Charge"
        line = f"[{source.id}] {kind} {source_value(source):+.2f} @ ({source.x:.2f}, {source.y:.2f})"
        if isinstance(source, Charge):
            line += f" v=({source.vx:.2f}, {source.vy:.2f})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write(f"vectors={self._vectors}\n\n")
        self.output.flush()


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frame data for later inspection.

    Example:
        renderer = BufferedRenderer()
        renderer.render_scene(scene)
        frame = renderer.frames[-1]
        print(len(frame["lines"]), "field lines")
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float, mode: SimulationMode) -> None:
        self._current_frame = {
            "time": time,
            "mode": mode,
            "vectors": [],
            "lines": [],
            "forces": [],
            "sources": [],
        }

    def draw_vector(self, origin: Vector2D, field: Vector2D) -> None:
        if self._current_frame is not None:
            self._current_frame["vectors"].append((origin, field))

    def draw_field_line(self, points: Sequence[Vector2D]) -> None:
        if self._current_frame is not None:
            self._current_frame["lines"].append(list(points))

    def draw_force(self, charge: Charge, force: Vector2D) -> None:
        if self._current_frame is not None:
            self._current_frame["forces"].append((charge.id, force))

    def draw_source(self, source: Source) -> None:
        if self._current_frame is not None:
            self._current_frame["sources"].append({
                "id": source.id,
                "kind": "wire" if isinstance(source, Wire) else "charge",
                "position": (source.x, source.y),
                "value": source_value(source),
            })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
