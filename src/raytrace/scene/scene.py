# scene/scene.py
from raytrace.camera.camera import Camera
from raytrace.geometry.hittable import Hittable


class Scene:
    """
    A root Hittable and the Camera looking at it. Built once, then read
    (never mutated) by every render worker.
    """
    def __init__(self, root: Hittable, camera: Camera):
        self.root = root
        self.camera = camera

    def __iter__(self):
        # Allows `root, camera = scene`.
        yield self.root
        yield self.camera

    def __repr__(self) -> str:
        return f"Scene({self.root!r}, {self.camera!r})"
