# scene/builders.py
"""
Built-in demo scenes. Each builder returns a Scene whose camera matches the
requested aspect ratio.
"""
import numpy as np

from raytrace.camera.camera import Camera
from raytrace.core.vector import Vector3
from raytrace.geometry.sphere import Sphere
from raytrace.geometry.world import HittableList
from raytrace.materials.dielectric import Dielectric
from raytrace.materials.lambertian import Lambertian
from raytrace.materials.metal import Metal
from raytrace.scene.scene import Scene

DEFAULT_ASPECT_RATIO = 16.0 / 9.0


def simple_scene(aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> Scene:
    """One diffuse sphere resting on a huge ground sphere, seen through a pinhole."""
    world = HittableList()
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(Vector3(0.5, 0.5, 0.5))))

    camera = Camera(
        origin=Vector3(0.0, 0.0, 0.0),
        up=Vector3(0.0, 1.0, 0.0),
        forward=Vector3(0.0, 0.0, -1.0),
        vfov=90.0,
        aspect_ratio=aspect_ratio,
        aperture=0.0,
        focus_distance=1.0,
    )
    return Scene(world, camera)


def showcase_scene(aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> Scene:
    """
    Ground plus three spheres, one per material. The glass sphere has a
    negative radius, so it renders as a hollow shell.
    """
    world = HittableList()
    # Ground
    world.add(Sphere(Vector3(0.0, -100.5, 1.0), 100.0, Lambertian(Vector3(0.3, 0.8, 0.3))))
    world.add(Sphere(Vector3(-1.0, 0.0, 1.0), 0.5, Lambertian(Vector3(0.7, 0.1, 0.1))))
    world.add(Sphere(Vector3(0.0, 0.0, 2.0), 0.5, Metal(Vector3(0.5, 0.5, 0.5), fuzz=0.3)))
    world.add(Sphere(Vector3(1.0, 0.0, 1.0), -0.5, Dielectric(1.5)))

    camera = Camera(
        origin=Vector3(0.0, 1.5, -2.0),
        up=Vector3(0.0, 1.0, 0.3),
        forward=Vector3(0.0, 0.0, 1.0),
        vfov=90.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_distance=5.0,
    )
    return Scene(world, camera)


def random_scene(aspect_ratio: float = DEFAULT_ASPECT_RATIO, rng=None) -> Scene:
    """
    A large field of small random spheres on a grey ground.

    Materials: 75% diffuse, 15% metal, 10% glass.
    """
    if rng is None:
        rng = np.random.default_rng()

    world = HittableList()
    # Ground
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vector3(0.5, 0.5, 0.5))))

    for a in range(-11, 12):
        for b in range(-11, 12):
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            choose_mat = rng.random()

            if choose_mat < 0.75:
                # diffuse
                albedo = Vector3(rng.random(), rng.random(), rng.random())
                material = Lambertian(albedo * albedo)
            elif choose_mat < 0.9:
                # metal
                albedo = Vector3(rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0))
                material = Metal(albedo, fuzz=rng.uniform(0.0, 0.5))
            else:
                # glass
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    forward = Vector3(0.0, -0.2, 1.0).normalize()
    up = forward.cross(Vector3(1.0, 0.0, 0.0))
    camera = Camera(
        origin=Vector3(0.0, 1.0, -5.0),
        up=up,
        forward=forward,
        vfov=30.0,
        aspect_ratio=aspect_ratio,
        aperture=0.05,
        focus_distance=4.0,
    )
    return Scene(world, camera)


SCENES = {
    "simple": simple_scene,
    "showcase": showcase_scene,
    "random": random_scene,
}
