"""
Electric field of the default dipole: point samples and traced field lines.
Run:
  python examples/dipole_field.py
"""
import logging

from field_sim import Scene, Vector2D, magnitude
from field_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO)

scene = Scene(width=800, height=600)
scene.update_settings(field_line_density=4)

for p in [Vector2D(400, 300), Vector2D(400, 200), Vector2D(100, 300)]:
    e = scene.field_at(p)
    print(f"E{tuple(p)} = ({e.x:.3f}, {e.y:.3f})  |E| = {magnitude(e):.3f}")

DebugRenderer().render_scene(scene, cursor=(400, 250))
