"""Monte Carlo ray tracer.

Subpackages:
    core: Vector3, Ray and random sampling helpers
    geometry: Hittable protocol, Sphere and HittableList
    materials: Lambertian, Metal and Dielectric scattering
    camera: thin-lens Camera
    scene: Scene, JSON (de)serialization and built-in scenes
    renderer: recursive tracing, parallel sampling, tone mapping and image output
"""

from raytrace.camera.camera import Camera
from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3
from raytrace.geometry.hittable import HitRecord, Hittable
from raytrace.geometry.sphere import Sphere
from raytrace.geometry.world import HittableList
from raytrace.materials.dielectric import Dielectric
from raytrace.materials.lambertian import Lambertian
from raytrace.materials.material import Material
from raytrace.materials.metal import Metal
from raytrace.renderer.raytracer import render
from raytrace.renderer.settings import ImageSettings, RenderSettings
from raytrace.scene.scene import Scene
from raytrace.scene.serialization import (
    SceneFormatError,
    deserialize_scene,
    load_scene,
    save_scene,
    serialize_scene,
)

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "Ray",
    "Vector3",
    "HitRecord",
    "Hittable",
    "Sphere",
    "HittableList",
    "Material",
    "Lambertian",
    "Metal",
    "Dielectric",
    "Scene",
    "ImageSettings",
    "RenderSettings",
    "render",
    "SceneFormatError",
    "serialize_scene",
    "deserialize_scene",
    "save_scene",
    "load_scene",
]
