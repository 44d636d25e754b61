import io

from field_sim.renderer import BufferedRenderer, DebugRenderer
from field_sim.scene import Scene
from field_sim.types import SimulationMode


def test_electric_frame_contents():
    scene = Scene()
    renderer = BufferedRenderer()
    renderer.render_scene(scene)
    frame = renderer.frames[-1]

    assert frame["mode"] is SimulationMode.ELECTRIC
    assert [s["id"] for s in frame["sources"]] == ["1", "2"]
    assert all(s["kind"] == "charge" for s in frame["sources"])
    assert len(frame["lines"]) == 2 * scene.settings.field_line_density
    assert 0 < len(frame["vectors"]) <= 300
    assert frame["forces"] == []


def test_cursor_adds_one_vector():
    scene = Scene()
    renderer = BufferedRenderer()
    renderer.render_scene(scene)
    renderer.render_scene(scene, cursor=(400.0, 250.0))
    without, with_cursor = renderer.frames
    assert len(with_cursor["vectors"]) == len(without["vectors"]) + 1
    origin, field = with_cursor["vectors"][-1]
    assert (origin.x, origin.y) == (400.0, 250.0)

    scene.update_settings(show_mouse_vector=False, show_vectors=False)
    renderer.clear()
    renderer.render_scene(scene, cursor=(400.0, 250.0))
    assert renderer.frames[0]["vectors"] == []


def test_dynamic_frame_draws_forces_only():
    scene = Scene()
    scene.set_mode(SimulationMode.DYNAMIC)
    renderer = BufferedRenderer()
    renderer.render_scene(scene, cursor=(400.0, 250.0))
    frame = renderer.frames[0]
    assert frame["lines"] == []
    assert frame["vectors"] == []
    assert [cid for cid, _ in frame["forces"]] == ["1", "2"]
    _, f1 = frame["forces"][0]
    assert f1.x > 0


def test_magnetic_frame_uses_wires():
    scene = Scene()
    scene.set_mode(SimulationMode.MAGNETIC)
    renderer = BufferedRenderer()
    renderer.render_scene(scene)
    frame = renderer.frames[0]
    assert [(s["kind"], s["value"]) for s in frame["sources"]] == [("wire", 10.0)]
    assert len(frame["lines"]) == 20


def test_debug_renderer_output():
    out = io.StringIO()
    scene = Scene()
    scene.update_settings(field_line_density=2)
    DebugRenderer(output=out).render_scene(scene)
    text = out.getvalue()
    print(text)
    assert text.startswith("=== Frame t=0.0000 ELECTRIC ===")
    assert text.count("line n=") == 4
    assert "[1] Charge +15.00 @ (250.00, 300.00)" in text
    assert "vectors=" in text
