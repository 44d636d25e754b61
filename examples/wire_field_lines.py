"""
Magnetic field lines around two antiparallel wires.
Run:
  python examples/wire_field_lines.py
"""
import logging

from field_sim import Scene, SimulationMode, Wire
from field_sim.renderer import BufferedRenderer

logging.basicConfig(level=logging.INFO)

scene = Scene(width=800, height=600)
scene.set_mode(SimulationMode.MAGNETIC)
scene.clear()
scene.add_wire(Wire(id="up", x=300, y=300, i=10))
scene.add_wire(Wire(id="down", x=500, y=300, i=-10))

renderer = BufferedRenderer()
renderer.render_scene(scene)
frame = renderer.frames[0]
lengths = [len(line) for line in frame["lines"]]
print(f"{len(lengths)} lines, {min(lengths)}..{max(lengths)} points each")
