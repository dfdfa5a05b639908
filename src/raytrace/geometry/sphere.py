# geometry/sphere.py
import math
from typing import Optional

from raytrace.core.vector import Vector3
from raytrace.core.ray import Ray
from raytrace.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius flips the outward normal, which turns the sphere
    into an inward-facing shell (used for hollow glass).
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.radius == 0:
            return None

        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # Also rejects NaN, and a zero-length direction (a == 0 gives 0).
        if not discriminant > 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not t_min <= root < t_max:
            root = (-half_b + sqrt_disc) / a
            if not t_min <= root < t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.point = ray.at(rec.t)
        outward_normal = (rec.point - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
