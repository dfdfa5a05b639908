# materials/metal.py
from typing import Optional, Tuple

from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3
from raytrace.core.utils import random_in_unit_sphere
from raytrace.geometry.hittable import HitRecord
from raytrace.materials.material import Material


class Metal(Material):
    """
    Metal material with mirror reflection blurred by fuzz.
    Fuzz is conventionally in [0, 1] but is not clamped.
    """
    def __init__(self, albedo: Vector3, fuzz: float):
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Vector3, Ray]]:
        reflected = ray_in.direction.normalize().reflect(rec.normal)
        scattered = Ray(rec.point, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        return None  # Absorb the ray if fuzz pushed it below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, {self.fuzz})"
