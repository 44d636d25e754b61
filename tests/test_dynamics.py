import math

import numpy as np
import pytest
from field_sim.constants import K_COULOMB, DYNAMICS_DT, FRICTION, FORCE_DIVISOR
from field_sim.core.dynamics import step_dynamics, net_forces
from field_sim.core.invariants import kinetic_energy, linear_momentum
from field_sim.types import Charge

W, H = 800.0, 600.0


def _finite(c: Charge) -> bool:
    return all(math.isfinite(v) for v in (c.x, c.y, c.vx, c.vy))


def test_step_is_pure():
    """Inputs are not mutated; outputs are new objects with the same ids."""
    charges = [
        Charge(id="a", x=300.0, y=300.0, q=10.0, vx=1.0),
        Charge(id="b", x=500.0, y=320.0, q=-10.0),
    ]
    before = [(c.x, c.y, c.vx, c.vy) for c in charges]
    out = step_dynamics(charges, W, H)

    assert [(c.x, c.y, c.vx, c.vy) for c in charges] == before
    assert [c.id for c in out] == ["a", "b"]
    assert all(o is not c for o, c in zip(out, charges))
    assert [(c.q, c.mass) for c in out] == [(c.q, c.mass) for c in charges]


def test_single_step_repulsion_values():
    """
    Two q=10 charges 100 apart, at rest:
      F = k q² / r² = 9000 * 100 / 10000 = 90
      v' = (0 - 90/12 * dt) * 0.98 = -0.588,  x' = 300 + v' dt
    The second charge is updated after the first has moved, so it sees the
    slightly larger separation.
    """
    charges = [
        Charge(id="a", x=300.0, y=300.0, q=10.0),
        Charge(id="b", x=400.0, y=300.0, q=10.0),
    ]
    a, b = step_dynamics(charges, W, H)

    assert a.vx == pytest.approx(-0.588)
    assert a.x == pytest.approx(300.0 - 0.588 * DYNAMICS_DT)
    assert a.vy == 0.0

    r = 400.0 - a.x
    f = K_COULOMB * 100.0 / (r * r)
    vb = (f / FORCE_DIVISOR) * DYNAMICS_DT * FRICTION
    assert b.vx == pytest.approx(vb, rel=1e-12)
    assert b.vx < 0.588
    assert b.x == pytest.approx(400.0 + vb * DYNAMICS_DT, rel=1e-12)


def test_opposite_charges_attract():
    charges = [
        Charge(id="p", x=300.0, y=300.0, q=15.0),
        Charge(id="n", x=500.0, y=300.0, q=-15.0),
    ]
    for _ in range(20):
        charges = step_dynamics(charges, W, H)
    assert charges[0].vx > 0
    assert charges[1].vx < 0
    assert charges[1].x - charges[0].x < 200.0


def test_min_distance_clamp_keeps_state_finite():
    """Charges 1 unit apart: r² is clamped to 625 so nothing blows up."""
    charges = [
        Charge(id="a", x=400.0, y=300.0, q=10.0),
        Charge(id="b", x=401.0, y=300.0, q=10.0),
    ]
    for _ in range(2000):
        charges = step_dynamics(charges, W, H)
        assert all(_finite(c) for c in charges)
    for c in charges:
        assert 30.0 <= c.x <= W - 30.0
        assert 30.0 <= c.y <= H - 30.0


def test_coincident_charges_stay_finite():
    charges = [
        Charge(id="a", x=400.0, y=300.0, q=10.0),
        Charge(id="b", x=400.0, y=300.0, q=-10.0),
    ]
    out = step_dynamics(charges, W, H)
    assert all(_finite(c) for c in out)


def test_left_wall_bounce():
    """
    x = 29, vx = -5:
      vx' = -5 * 0.98 = -4.9, x' = 29 - 0.392 < 30
      -> x = 30, vx = -4.9 * -0.5 = 2.45
    """
    c = Charge(id="a", x=29.0, y=300.0, q=10.0, vx=-5.0)
    (out,) = step_dynamics([c], 800.0, H)
    assert out.x == 30.0
    assert out.vx > 0
    assert out.vx == pytest.approx(2.45)
    assert out.vy == 0.0


def test_right_and_bottom_walls_independent():
    c = Charge(id="a", x=771.0, y=569.5, q=10.0, vx=5.0, vy=3.0)
    (out,) = step_dynamics([c], W, H)
    assert out.x == W - 30.0
    assert out.vx == pytest.approx(-2.45)
    # y' = 569.5 + 2.94 * 0.08 = 569.7352 < 570: no bounce on y
    assert out.y == pytest.approx(569.5 + 3.0 * FRICTION * DYNAMICS_DT)
    assert out.vy == pytest.approx(3.0 * FRICTION)


def test_top_wall_bounce():
    """
    y = 29, vy = -5:
      vy' = -4.9, y' = 29 - 0.392 < 30
      -> y = 30, vy = -4.9 * -0.5 = 2.45
    """
    c = Charge(id="a", x=400.0, y=29.0, q=10.0, vy=-5.0)
    (out,) = step_dynamics([c], W, H)
    assert out.y == 30.0
    assert out.vy == pytest.approx(2.45)
    assert out.x == 400.0
    assert out.vx == 0.0


def test_corner_bounce_both_axes():
    """Left and bottom walls in the same step; each axis reflects on its own."""
    c = Charge(id="a", x=29.0, y=571.0, q=10.0, vx=-5.0, vy=5.0)
    (out,) = step_dynamics([c], W, H)
    assert (out.x, out.y) == (30.0, H - 30.0)
    assert out.vx == pytest.approx(2.45)
    assert out.vy == pytest.approx(-2.45)


def test_lone_charge_only_damps():
    c = Charge(id="a", x=400.0, y=300.0, q=10.0, vx=10.0, vy=-4.0)
    (out,) = step_dynamics([c], W, H)
    assert out.vx == pytest.approx(9.8)
    assert out.vy == pytest.approx(-3.92)
    assert out.x == pytest.approx(400.0 + 9.8 * DYNAMICS_DT)
    assert step_dynamics([], W, H) == []


def test_mass_not_used_by_integrator():
    light = [Charge(id="a", x=300.0, y=300.0, q=10.0, mass=1.0),
             Charge(id="b", x=400.0, y=310.0, q=-5.0, mass=1.0)]
    heavy = [Charge(id="a", x=300.0, y=300.0, q=10.0, mass=500.0),
             Charge(id="b", x=400.0, y=310.0, q=-5.0, mass=500.0)]
    for l, h in zip(step_dynamics(light, W, H), step_dynamics(heavy, W, H)):
        assert (l.x, l.y, l.vx, l.vy) == (h.x, h.y, h.vx, h.vy)


def test_step_is_deterministic():
    charges = [Charge(id=str(k), x=100.0 + 53.0 * k, y=120.0 + 37.0 * k, q=(-1) ** k * 12.0)
               for k in range(8)]
    a = charges
    b = [Charge(**vars(c)) for c in charges]
    for _ in range(50):
        a = step_dynamics(a, W, H)
        b = step_dynamics(b, W, H)
    assert [(c.x, c.y, c.vx, c.vy) for c in a] == [(c.x, c.y, c.vx, c.vy) for c in b]


def test_net_forces_snapshot():
    """Forces at a fixed snapshot obey Newton's third law."""
    charges = [
        Charge(id="a", x=300.0, y=300.0, q=10.0),
        Charge(id="b", x=400.0, y=300.0, q=10.0),
    ]
    f = net_forces(charges)
    assert f.shape == (2, 2)
    np.testing.assert_allclose(f[0], [-90.0, 0.0])
    np.testing.assert_allclose(f[1], [90.0, 0.0])
    np.testing.assert_allclose(f.sum(axis=0), [0.0, 0.0], atol=1e-12)
    assert net_forces([]).shape == (0, 2)


def test_damping_drains_kinetic_energy():
    charges = [Charge(id="a", x=400.0, y=300.0, q=10.0, vx=20.0, vy=5.0)]
    ke0 = kinetic_energy(charges)
    for _ in range(100):
        charges = step_dynamics(charges, W, H)
    print("ke", ke0, "->", kinetic_energy(charges))
    assert kinetic_energy(charges) < 0.1 * ke0


def test_invariants():
    """T = ½ m v², P = m v; m = 10, v = (3, 4) -> T = 125, P = (30, 40)."""
    charges = [Charge(id="a", x=0.0, y=0.0, q=1.0, vx=3.0, vy=4.0, mass=10.0)]
    assert kinetic_energy(charges) == pytest.approx(125.0)
    p = linear_momentum(charges)
    assert p.dtype == np.float64
    np.testing.assert_allclose(p, [30.0, 40.0])
    np.testing.assert_array_equal(p, charges[0].mass * charges[0].velocity.as_array())
    assert kinetic_energy([]) == 0.0
