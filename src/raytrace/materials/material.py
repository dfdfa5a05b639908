# materials/material.py
from typing import Optional, Tuple

from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3
from raytrace.geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials hold no mutable state, so one instance can be shared by many
    primitives and read from many threads at once.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Vector3, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray), or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
