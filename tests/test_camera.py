"""Unit tests for the thin-lens camera.

Tests cover:
- Orthonormal basis from up/forward
- Viewport size from field of view, aspect ratio and focus distance
- Pinhole ray generation (no random draws)
- Depth of field: lens offsets converge on the focus plane
"""

import pytest

from raytrace.camera.camera import Camera
from raytrace.core.vector import Vector3


def make_camera(**overrides):
    params = dict(
        origin=Vector3(0.0, 0.0, 0.0),
        up=Vector3(0.0, 1.0, 0.0),
        forward=Vector3(0.0, 0.0, -1.0),
        vfov=90.0,
        aspect_ratio=2.0,
        aperture=0.0,
        focus_distance=1.0,
    )
    params.update(overrides)
    return Camera(**params)


class TestCameraBasis:
    """Tests for the derived basis and viewport."""

    def test_right_is_up_cross_forward(self):
        camera = make_camera(up=Vector3(0.0, 3.0, 0.0), forward=Vector3(0.0, 0.0, -5.0))
        assert camera.right == camera.up.cross(camera.forward)
        assert camera.up.length() == pytest.approx(1.0)
        assert camera.forward.length() == pytest.approx(1.0)
        assert camera.right.length() == pytest.approx(1.0)

    def test_basis_is_orthogonal(self):
        camera = make_camera(forward=Vector3(1.0, 0.0, -1.0), up=Vector3(1.0, 2.0, 1.0))
        assert camera.right.dot(camera.up) == pytest.approx(0.0, abs=1e-12)
        assert camera.right.dot(camera.forward) == pytest.approx(0.0, abs=1e-12)

    def test_viewport_size(self):
        """vfov 90 gives a viewport twice as tall as the focus distance."""
        camera = make_camera(focus_distance=3.0)
        assert camera.vertical.length() == pytest.approx(6.0)
        assert camera.horizontal.length() == pytest.approx(12.0)

    def test_horizontal_and_vertical_follow_basis(self):
        camera = make_camera()
        assert camera.horizontal.normalize() == camera.right
        assert camera.vertical.normalize() == camera.up

    def test_lens_radius(self):
        assert make_camera(aperture=0.5).lens_radius == 0.25


class TestPinhole:
    """Zero aperture: every ray starts at the camera origin."""

    def test_center_ray_looks_forward(self, no_random):
        camera = make_camera(origin=Vector3(1.0, 2.0, 3.0), focus_distance=2.0)
        ray = camera.get_ray(0.5, 0.5, no_random)
        assert ray.origin == Vector3(1.0, 2.0, 3.0)
        assert tuple(ray.direction.normalize()) == pytest.approx((0.0, 0.0, -1.0))

    def test_corner_ray(self):
        camera = make_camera()
        ray = camera.get_ray(0.0, 0.0)
        assert tuple(ray.direction) == pytest.approx(tuple(camera.lower_left_corner - camera.origin))

    def test_top_edge_points_up(self):
        camera = make_camera()
        ray = camera.get_ray(0.5, 1.0)
        assert tuple(ray.direction) == pytest.approx((0.0, 1.0, -1.0))


class TestDepthOfField:
    """Finite aperture: jittered origins, shared focus point."""

    def test_rays_converge_on_focus_plane(self, rng):
        camera = make_camera(aperture=0.4, focus_distance=5.0)
        target = camera.lower_left_corner + camera.horizontal * 0.3 + camera.vertical * 0.7
        origins = set()
        for _ in range(100):
            ray = camera.get_ray(0.3, 0.7, rng)
            assert tuple(ray.at(1.0)) == pytest.approx(tuple(target))
            offset = ray.origin - camera.origin
            assert offset.length() <= camera.lens_radius + 1e-12
            # Lens lies in the plane spanned by right and up
            assert offset.dot(camera.forward) == pytest.approx(0.0, abs=1e-12)
            origins.add(tuple(ray.origin))
        assert len(origins) > 1

    def test_lens_without_rng_is_rejected(self):
        camera = make_camera(aperture=0.4)
        with pytest.raises(ValueError, match="needs a random generator"):
            camera.get_ray(0.5, 0.5)
