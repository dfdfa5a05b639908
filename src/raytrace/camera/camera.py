# camera/camera.py
import math

from raytrace.core.vector import Vector3
from raytrace.core.ray import Ray
from raytrace.core.utils import random_in_unit_disk


class Camera:
    """
    Thin-lens camera. The user-facing parameters are kept so the camera can
    be serialized; everything get_ray() needs is derived once here.

    vfov is the vertical field of view in degrees. right = up x forward,
    so for up=+y and forward=+z the image's u axis runs along +x
    (looking down -z mirrors it).
    """
    def __init__(self, origin: Vector3, up: Vector3, forward: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_distance: float = 1.0):
        self.origin = origin
        self.up_direction = up
        self.forward_direction = forward
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_distance = focus_distance  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.up = self.up_direction.normalize()
        self.forward = self.forward_direction.normalize()
        self.right = self.up.cross(self.forward)

        # Scale by focus distance
        self.horizontal = self.right * (viewport_width * self.focus_distance)
        self.vertical = self.up * (viewport_height * self.focus_distance)

        self.lower_left_corner = (self.origin +
                                  self.forward * self.focus_distance -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float, rng=None) -> Ray:
        """
        Generates a ray through (u, v) on the focus plane, with depth of field.
        A pinhole camera (aperture 0) never draws from rng and may omit it.
        """
        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         self.origin)
            return Ray(self.origin, direction)

        if rng is None:
            raise ValueError(f"camera has aperture {self.aperture}, get_ray() needs a random generator")

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.right * rd.x + self.up * rd.y

        # Update ray origin and direction for depth of field
        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * u +
                         self.vertical * v -
                         ray_origin)

        return Ray(ray_origin, ray_direction)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, up={self.up_direction!r}, "
                f"forward={self.forward_direction!r}, vfov={self.vfov}, "
                f"aspect_ratio={self.aspect_ratio}, aperture={self.aperture}, "
                f"focus_distance={self.focus_distance})")
