# MIT License (see LICENSE)
"""
User-adjustable visualization settings.

SimSettings is an immutable record; the UI produces a new one for every
change through updated(), which also validates the values.
"""
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from numbers import Integral


@dataclass(frozen=True)
class SimSettings:
    """
    Display and tracing settings shared by the scene and renderers.

    Attributes:
        show_grid: Draw the background grid (renderer concern).
        show_vectors: Draw the sampled vector-arrow grid.
        field_line_density: Field lines per charge. 0 disables tracing.
        step_size: Arc length of each field-line tracing step.
        show_mouse_vector: Draw the field vector under the cursor.
        intensity_coloring: Color arrows by field magnitude (renderer concern).
        is_paused: Freeze the dynamics simulation.
    """
    show_grid: bool = True
    show_vectors: bool = True
    field_line_density: int = 16
    step_size: float = 2.0
    show_mouse_vector: bool = True
    intensity_coloring: bool = True
    is_paused: bool = False

    def __post_init__(self) -> None:
        if self.step_size <= 0:
            raise ValueError(f"step_size must be positive, got {self.step_size}")
        density = self.field_line_density
        if isinstance(density, bool) or not isinstance(density, Integral):
            raise ValueError(f"field_line_density must be an integer, got {density!r}")
        if density < 0:
            raise ValueError(
                f"field_line_density must be >= 0, got {self.field_line_density}"
            )

    def updated(self, **changes) -> SimSettings:
        """
        Return a copy with some settings changed.

        Raises:
            ValueError: On unknown setting names or invalid values.
        """
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown settings: {sorted(unknown)}")
        return replace(self, **changes)
