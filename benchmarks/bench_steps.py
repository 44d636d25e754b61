"""
Microbenchmark: time per dynamics step and per field-line frame vs number of charges.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from field_sim.profiler import Profiler
from field_sim.scene import Scene
from field_sim.types import Charge, SimulationMode


def run(n: int, steps: int = 200):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # same layout on every run

    charges = [
        Charge(
            id=str(k),
            x=float(rng.uniform(50, 750)),
            y=float(rng.uniform(50, 550)),
            q=float(rng.choice([-10.0, 10.0])),
        )
        for k in range(n)
    ]
    scene = Scene(width=800, height=600, charges=charges, profiler=prof)
    scene.update_settings(field_line_density=8)

    # one frame of overlays in electric mode
    scene.vector_grid()
    scene.field_lines()

    scene.set_mode(SimulationMode.DYNAMIC)
    t0 = time.perf_counter()
    for _ in range(steps):
        scene.step()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [2, 10, 25, 50, 100]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["vector_grid", "field_lines", "dynamics"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
