"""Tests for 2D/3D projection and the component comparison fallback.

Run with:
    python -m pytest tests/test_projection.py -v
"""

import math

import pytest

from cosine_lab.vectors.projection import (
    ComponentScene,
    DragTracker,
    Projector3D,
    Rotation,
    Scene2D,
    Scene3D,
    build_scene,
    dimension_comparison,
    project_2d,
)


# ============== Fixtures ==============

@pytest.fixture
def front_view():
    """No rotation: screen x is world x, screen y is world y."""
    return Rotation(pitch=0.0, yaw=0.0)


@pytest.fixture
def unit_projector(front_view):
    """Projector whose scale is 16 px per unit (extent floor of 5 applies)."""
    return Projector3D([1, 0, 0], [0, 1, 0], rotation=front_view)


# ============== Tests ==============

class TestProject2D:
    """Tests for the 2D Cartesian projection."""

    def test_scaling_and_y_flip(self):
        scene = project_2d([3, 0], [0, 4])

        # Extent 4 padded by 20% -> 4.8; (150 - 20) / 4.8 px per unit
        expected_scale = 130 / 4.8
        assert scene.scale == pytest.approx(expected_scale)
        assert (scene.origin.x, scene.origin.y) == (150.0, 150.0)
        assert scene.end_a.x == pytest.approx(150 + 3 * expected_scale)
        assert scene.end_a.y == pytest.approx(150.0)
        assert scene.end_b.x == pytest.approx(150.0)
        assert scene.end_b.y == pytest.approx(150 - 4 * expected_scale)

    def test_negative_components(self):
        scene = project_2d([-1, -1], [1, 1])

        assert scene.end_a.x < scene.origin.x
        assert scene.end_a.y > scene.origin.y
        assert scene.end_b.y < scene.origin.y

    def test_near_zero_vectors_use_floor(self):
        scene = project_2d([0, 0], [1e-9, 0])

        assert scene.scale == pytest.approx(130 / 1.2)
        assert math.isfinite(scene.end_b.x)

    def test_fits_canvas(self):
        scene = project_2d([100, -250], [-40, 80])

        for point in (scene.end_a, scene.end_b):
            assert 0 <= point.x <= scene.size
            assert 0 <= point.y <= scene.size

    def test_custom_size(self):
        scene = project_2d([1, 0], [0, 1], size=200)
        assert (scene.origin.x, scene.origin.y) == (100.0, 100.0)

    def test_rejects_other_dimensions(self):
        with pytest.raises(ValueError):
            project_2d([1, 2, 3], [1, 2, 3])


class TestRotation:
    """Tests for the mutable rotation state."""

    def test_defaults(self):
        rotation = Rotation()
        assert (rotation.pitch, rotation.yaw) == (-20.0, 45.0)

    def test_drag_applies_sensitivity(self):
        rotation = Rotation().drag(dx=10, dy=4)
        assert rotation.pitch == pytest.approx(-18.0)
        assert rotation.yaw == pytest.approx(50.0)

    def test_pitch_clamped(self):
        rotation = Rotation()
        rotation.drag(dx=0, dy=1000)
        assert rotation.pitch == 90.0
        rotation.drag(dx=0, dy=-5000)
        assert rotation.pitch == -90.0

    def test_initial_pitch_clamped(self):
        assert Rotation(pitch=120.0).pitch == 90.0

    def test_yaw_unbounded(self):
        rotation = Rotation(pitch=0.0, yaw=0.0)
        rotation.drag(dx=1000, dy=0)
        assert rotation.yaw == pytest.approx(500.0)


class TestDragTracker:
    """Tests for press/move/release handling."""

    def test_move_without_press_is_ignored(self):
        tracker = DragTracker()
        tracker.move(50, 50)
        assert (tracker.rotation.pitch, tracker.rotation.yaw) == (-20.0, 45.0)

    def test_drag_sequence(self):
        tracker = DragTracker()
        tracker.press(100, 100)
        tracker.move(110, 104)
        tracker.move(120, 104)

        assert tracker.is_dragging
        assert tracker.rotation.pitch == pytest.approx(-18.0)
        assert tracker.rotation.yaw == pytest.approx(55.0)

        tracker.release()
        tracker.move(500, 500)
        assert tracker.rotation.yaw == pytest.approx(55.0)


class TestProjector3D:
    """Tests for the orthographic 3D projection."""

    def test_scale_uses_minimum_extent(self, unit_projector):
        assert unit_projector.max_val == pytest.approx(7.5)
        assert unit_projector.scale == pytest.approx(16.0)

    def test_default_rotation_is_initial_view(self):
        projector = Projector3D([1, 0, 0], [0, 1, 0])

        assert (projector.rotation.pitch, projector.rotation.yaw) == (-20.0, 45.0)
        assert projector.scene().size == 320

    def test_scale_from_large_components(self):
        projector = Projector3D([10, 0, 0], [0, 0, 0])
        assert projector.max_val == pytest.approx(15.0)
        assert projector.scale == pytest.approx(8.0)

    def test_front_view(self, unit_projector):
        point = unit_projector.project(1, 2, 3)

        assert point.x == pytest.approx(176.0)
        assert point.y == pytest.approx(128.0)
        assert point.depth == pytest.approx(3.0)

    def test_yaw_quarter_turn(self):
        projector = Projector3D([1, 0, 0], [0, 1, 0], rotation=Rotation(pitch=0.0, yaw=90.0))

        x_axis = projector.project(1, 0, 0)
        assert x_axis.x == pytest.approx(160.0)
        assert x_axis.depth == pytest.approx(1.0)

        z_axis = projector.project(0, 0, 1)
        assert z_axis.x == pytest.approx(144.0)
        assert z_axis.depth == pytest.approx(0.0, abs=1e-12)

    def test_pitch_quarter_turn(self):
        projector = Projector3D([1, 0, 0], [0, 1, 0], rotation=Rotation(pitch=90.0, yaw=0.0))

        z_axis = projector.project(0, 0, 1)
        assert z_axis.y == pytest.approx(176.0)

        y_axis = projector.project(0, 1, 0)
        assert y_axis.y == pytest.approx(160.0)
        assert y_axis.depth == pytest.approx(1.0)

    def test_yaw_before_pitch(self):
        """Yaw is applied first, then pitch."""
        rotation = Rotation(pitch=30.0, yaw=60.0)
        projector = Projector3D([1, 2, 3], [3, 2, 1], rotation=rotation)
        x, y, z = 1.0, 2.0, 3.0

        pitch, yaw = math.radians(30.0), math.radians(60.0)
        x1 = x * math.cos(yaw) - z * math.sin(yaw)
        z1 = x * math.sin(yaw) + z * math.cos(yaw)
        y2 = y * math.cos(pitch) - z1 * math.sin(pitch)
        z2 = y * math.sin(pitch) + z1 * math.cos(pitch)

        point = projector.project(x, y, z)
        assert point.x == pytest.approx(160 + x1 * projector.scale)
        assert point.y == pytest.approx(160 - y2 * projector.scale)
        assert point.depth == pytest.approx(z2)

    def test_yaw_periodicity(self):
        a = Projector3D([1, 2, 3], [0, 1, 0], rotation=Rotation(pitch=10.0, yaw=45.0))
        b = Projector3D([1, 2, 3], [0, 1, 0], rotation=Rotation(pitch=10.0, yaw=405.0))

        pa, pb = a.project(1, 2, 3), b.project(1, 2, 3)
        assert pa.x == pytest.approx(pb.x)
        assert pa.y == pytest.approx(pb.y)

    def test_rotation_preserves_length(self):
        projector = Projector3D([1, 2, 3], [0, 1, 0], rotation=Rotation(pitch=-35.0, yaw=123.0))
        point = projector.project(1, 2, 3)

        sx = (point.x - projector.center) / projector.scale
        sy = (projector.center - point.y) / projector.scale
        assert math.sqrt(sx ** 2 + sy ** 2 + point.depth ** 2) == pytest.approx(math.sqrt(14))

    def test_scene(self, front_view):
        scene = Projector3D([2, 3, 4], [1, 0, 0], rotation=front_view).scene()

        assert isinstance(scene, Scene3D)
        assert set(scene.axes) == {"x", "y", "z"}
        assert scene.axes["x"].x == pytest.approx(160 + scene.max_val * scene.scale)
        assert scene.floor_a.x == pytest.approx(scene.end_a.x)
        assert scene.floor_a.y == pytest.approx(160.0)
        assert scene.floor_a.depth == pytest.approx(4.0)
        assert (scene.rotation.pitch, scene.rotation.yaw) == (0.0, 0.0)

    def test_rotation_does_not_rescale(self):
        still = Projector3D([2, 3, 4], [1, 0, 0], rotation=Rotation(0.0, 0.0))
        turned = Projector3D([2, 3, 4], [1, 0, 0], rotation=Rotation(45.0, 200.0))
        assert still.scale == turned.scale

    def test_rejects_other_dimensions(self):
        with pytest.raises(ValueError):
            Projector3D([1, 2], [1, 2])


class TestDimensionComparison:
    """Tests for the non-geometric fallback."""

    def test_rows(self):
        scene = dimension_comparison([1, -5, 3, 4], [4, 3], "King", "Queen")

        assert scene.chart == "radar"
        assert [row.dimension for row in scene.rows] == ["Dim 1", "Dim 2", "Dim 3", "Dim 4"]
        assert scene.rows[1].full_mark == 5
        assert scene.rows[2].value_b == 0.0
        assert scene.rows[3].full_mark == 4
        assert (scene.label_a, scene.label_b) == ("King", "Queen")

    def test_bar_for_low_dimensions(self):
        scene = dimension_comparison([5], [-7])

        assert scene.chart == "bar"
        assert scene.rows[0].full_mark == 7


class TestBuildScene:
    """Tests for chart mode selection."""

    def test_empty(self):
        assert build_scene([], [1, 2]) is None

    def test_2d(self):
        assert isinstance(build_scene([1, 2], [3, 4]), Scene2D)

    def test_3d(self):
        scene = build_scene([1, 2, 3], [3, 2, 1], rotation=Rotation(10.0, 20.0))

        assert isinstance(scene, Scene3D)
        assert scene.rotation.pitch == 10.0

    def test_mismatched_dimensions_fall_back(self):
        scene = build_scene([1, 2], [1, 2, 3])

        assert isinstance(scene, ComponentScene)
        assert scene.chart == "bar"

    def test_high_dimensions(self):
        scene = build_scene([1, 2, 3, 4, 5], [5, 4, 3, 2, 1])

        assert isinstance(scene, ComponentScene)
        assert scene.chart == "radar"
        assert scene.to_dict()["mode"] == "components"
