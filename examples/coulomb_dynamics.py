"""
Three charges moving under mutual Coulomb forces, driven by a TickSource.
Run:
  python examples/coulomb_dynamics.py
"""
import logging

from field_sim import Scene, SimulationMode, TickSource, Charge
from field_sim.core import kinetic_energy

logging.basicConfig(level=logging.INFO)

scene = Scene(width=800, height=600)
scene.set_mode(SimulationMode.DYNAMIC)
scene.add_charge(Charge(id="3", x=400, y=150, q=10))

ticker = TickSource(interval=1 / 60)
ticker.register(scene.step)

for second in range(5):
    ticker.advance(1.0)
    print(f"t={scene.time:6.2f}  KE={kinetic_energy(scene.charges):10.3f}")
    for c in scene.charges:
        print(f"  [{c.id}] ({c.x:7.2f}, {c.y:7.2f}) v=({c.vx:6.2f}, {c.vy:6.2f})")
