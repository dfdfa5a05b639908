# renderer/raytracer.py
"""
CPU path tracer.

Every worker process renders the full image at a share of the sample budget
with its own random stream. The per-pixel color sums of all workers are added
together and divided once by the total sample count.
"""
import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Tuple

import numpy as np

from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3
from raytrace.geometry.hittable import Hittable
from raytrace.renderer.settings import ImageSettings, RenderSettings
from raytrace.renderer.tone_mapping import to_rgb8
from raytrace.scene.scene import Scene

logger = logging.getLogger(__name__)

# Nearest accepted hit distance; keeps bounced rays off their own surface.
T_MIN = 1e-6
INFINITY = math.inf


def background(ray: Ray) -> Vector3:
    """White-to-sky-blue gradient over the direction's vertical component."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return Vector3(1.0, 1.0, 1.0) * (1.0 - t) + Vector3(0.5, 0.7, 1.0) * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Vector3:
    """
    Estimate the radiance carried back along a ray.

    Recurses once per bounce until the depth budget runs out, the ray escapes
    to the background, or a material absorbs it.
    """
    if depth <= 0:
        return Vector3(0.0, 0.0, 0.0)

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return Vector3(0.0, 0.0, 0.0)
    attenuation, scattered_ray = scattered
    return attenuation * ray_color(scattered_ray, world, depth - 1, rng)


def split_samples(samples_per_pixel: int, thread_count: int) -> List[int]:
    """
    Share a sample budget between workers as evenly as possible.
    The shares always add up to samples_per_pixel; empty shares are dropped.
    """
    base, extra = divmod(samples_per_pixel, thread_count)
    shares = [base + 1 if i < extra else base for i in range(thread_count)]
    return [s for s in shares if s > 0]


def render_pass(scene: Scene, width: int, height: int, samples_per_pixel: int,
                max_depth: int, rng, show_progress: bool = False) -> np.ndarray:
    """
    Render the whole image at the given sample count.

    Returns the unnormalized color sums as a (height*width, 3) float array,
    row-major, top row first.
    """
    world, camera = scene
    pixels = np.zeros((width * height, 3), dtype=np.float64)
    index = 0

    for j in range(height - 1, -1, -1):
        if show_progress:
            logger.info("Scanline %d/%d", height - j, height)
        for i in range(width):
            pixel_color = Vector3(0.0, 0.0, 0.0)
            for _ in range(samples_per_pixel):
                u = (i + rng.random()) / (width - 1)
                v = (j + rng.random()) / (height - 1)
                ray = camera.get_ray(u, v, rng)
                pixel_color += ray_color(ray, world, max_depth, rng)
            pixels[index] = (pixel_color.x, pixel_color.y, pixel_color.z)
            index += 1

    return pixels


def render_sums(scene: Scene, image_settings: ImageSettings, render_settings: RenderSettings,
                show_progress: bool = False) -> Tuple[np.ndarray, int]:
    """
    Run all workers and merge their buffers.

    With more than one share every worker runs in its own process, so the
    scene and each worker's generator are pickled across. Returns
    (color sums, total samples per pixel). A worker failure is re-raised
    here and aborts the whole render.
    """
    image_settings.validate()
    render_settings.validate()

    width, height = image_settings.width, image_settings.height
    shares = split_samples(render_settings.samples_per_pixel, render_settings.thread_count)
    seeds = np.random.SeedSequence(render_settings.seed).spawn(len(shares))
    rngs = [np.random.default_rng(s) for s in seeds]
    logger.debug("Rendering %dx%d with %d worker(s), samples per worker: %s",
                 width, height, len(shares), shares)

    if len(shares) == 1:
        sums = render_pass(scene, width, height, shares[0], render_settings.max_depth,
                           rngs[0], show_progress)
    else:
        with ProcessPoolExecutor(max_workers=len(shares)) as executor:
            futures = [
                executor.submit(render_pass, scene, width, height, share,
                                render_settings.max_depth, rng, show_progress)
                for share, rng in zip(shares, rngs)
            ]
            # Accumulate all the results into the first worker's buffer,
            # in submission order.
            sums = futures[0].result()
            for future in futures[1:]:
                sums += future.result()

    return sums, sum(shares)


def render(scene: Scene, image_settings: ImageSettings, render_settings: RenderSettings,
           show_progress: bool = False) -> bytes:
    """
    Render a scene to width*height*3 bytes of RGB, row-major, top row first.
    """
    start = time.perf_counter()
    sums, samples = render_sums(scene, image_settings, render_settings, show_progress)
    pixels = to_rgb8(sums, samples, render_settings.gamma).tobytes()
    logger.info("Rendered %dx%d at %d spp in %.2fs", image_settings.width,
                image_settings.height, samples, time.perf_counter() - start)
    return pixels
