import pytest
from field_sim.scene import Scene
from field_sim.scheduler import TickSource
from field_sim.types import SimulationMode


def _no_sleep(_):
    pass


def test_advance_fires_one_tick_per_interval():
    ticker = TickSource(interval=0.25)
    calls = []
    ticker.register(lambda: calls.append(1))

    assert ticker.advance(1.0) == 4
    assert ticker.advance(0.125) == 0
    assert ticker.advance(0.125) == 1
    assert len(calls) == 5
    assert ticker.ticks == 5


def test_pause_discards_elapsed_time():
    ticker = TickSource(interval=0.25)
    calls = []
    ticker.register(lambda: calls.append(1))
    ticker.paused = True
    assert ticker.advance(10.0) == 0
    assert ticker.tick() is False
    ticker.paused = False
    assert ticker.advance(0.2) == 0
    assert calls == []


def test_deregister_cancels():
    ticker = TickSource(interval=0.5)
    calls = []
    handle = ticker.register(lambda: calls.append("a"))
    ticker.register(lambda: calls.append("b"))
    ticker.tick()
    ticker.deregister(handle)
    ticker.deregister(handle)  # second call is a no-op
    ticker.tick()
    assert calls == ["a", "b", "b"]


def test_run_drives_scene_dynamics():
    scene = Scene()
    scene.set_mode(SimulationMode.DYNAMIC)
    ticker = TickSource()
    ticker.register(scene.step)

    sleeps = []
    assert ticker.run(max_ticks=30, sleep=sleeps.append) == 30
    assert len(sleeps) == 30
    assert all(0.0 <= s <= ticker.interval for s in sleeps)
    assert scene.time == pytest.approx(30 * 0.08)
    assert scene.charges[0].x > 250.0


def test_run_sleeps_only_the_rest_of_the_interval():
    """
    interval = 0.016; ticks cost 0.006, 0.010, 0.020 of clock time
      -> sleeps 0.010, 0.006, 0.0 (an overrun is not made up)
    """
    now = [0.0]
    costs = iter([0.006, 0.010, 0.020])

    def work():
        now[0] += next(costs)

    def sleep(s):
        sleeps.append(s)
        now[0] += s

    ticker = TickSource(interval=0.016)
    ticker.register(work)
    sleeps = []
    assert ticker.run(max_ticks=3, sleep=sleep, clock=lambda: now[0]) == 3
    assert sleeps == pytest.approx([0.010, 0.006, 0.0])
    assert now[0] == pytest.approx(0.016 + 0.016 + 0.020)


def test_run_stops_when_callback_deregisters_itself():
    ticker = TickSource(interval=0.01)
    count = []

    def once():
        count.append(1)
        if len(count) == 3:
            ticker.deregister(handle)

    handle = ticker.register(once)
    assert ticker.run(max_ticks=100, sleep=_no_sleep) == 3
    assert ticker.active is False


def test_invalid_interval():
    with pytest.raises(ValueError):
        TickSource(interval=0.0)
