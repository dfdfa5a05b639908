# materials/dielectric.py
import math
from typing import Tuple

from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3
from raytrace.core.utils import schlick
from raytrace.geometry.hittable import HitRecord
from raytrace.materials.material import Material


class Dielectric(Material):
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Vector3, Ray]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()

        # Calculate cosine using the angle between incoming ray and normal
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Total internal reflection: no random draw, always reflect
        if ni_over_nt * sin_theta > 1.0:
            return attenuation, Ray(rec.point, unit_direction.reflect(rec.normal))

        # Calculate reflection probability using Schlick's approximation
        if rng.random() < schlick(cos_theta, ni_over_nt):
            direction = unit_direction.reflect(rec.normal)
        else:
            direction = unit_direction.refract(rec.normal, ni_over_nt)

        return attenuation, Ray(rec.point, direction)

    def __repr__(self) -> str:
        return f"Dielectric({self.refraction_index})"
