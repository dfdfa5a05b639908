# materials/lambertian.py
from typing import Tuple

from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3
from raytrace.core.utils import random_unit_vector
from raytrace.geometry.hittable import HitRecord
from raytrace.materials.material import Material


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Vector3, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Always scatters.
        """
        # Normal plus a unit vector gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.length_squared() < 1e-16:
            scatter_direction = rec.normal

        return self.albedo, Ray(rec.point, scatter_direction)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
