# scene/serialization.py
"""
Reading and writing scenes as JSON.

Geometry and materials are stored as a tagged union: every object is a JSON
object whose "type" field names its class, next to that class's fields.
Vectors are 3-element arrays. The camera is stored by the parameters it was
built from and rebuilt on load.
"""
import json
import logging
import math
from pathlib import Path
from typing import Union

from raytrace.camera.camera import Camera
from raytrace.core.vector import Vector3
from raytrace.geometry.sphere import Sphere
from raytrace.geometry.world import HittableList
from raytrace.materials.dielectric import Dielectric
from raytrace.materials.lambertian import Lambertian
from raytrace.materials.metal import Metal
from raytrace.scene.scene import Scene

logger = logging.getLogger(__name__)


class SceneFormatError(ValueError):
    """Raised when a scene description cannot be decoded."""


###############################################################################
# Field helpers
###############################################################################
def _field(data: dict, key: str, context: str):
    if not isinstance(data, dict):
        raise SceneFormatError(f"{context}: expected an object, got {type(data).__name__}")
    if key not in data:
        raise SceneFormatError(f"{context}: missing field '{key}'")
    return data[key]


def _finite(value, where: str) -> float:
    # JSON allows integers of any size and the Infinity/NaN literals.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneFormatError(f"{where}: expected a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as e:
        raise SceneFormatError(f"{where}: number out of range") from e
    if not math.isfinite(number):
        raise SceneFormatError(f"{where}: expected a finite number, got {value!r}")
    return number


def _number(data: dict, key: str, context: str) -> float:
    return _finite(_field(data, key, context), f"{context}.{key}")


def _vector(data: dict, key: str, context: str) -> Vector3:
    value = _field(data, key, context)
    if not isinstance(value, list) or len(value) != 3:
        raise SceneFormatError(f"{context}.{key}: expected 3 numbers, got {value!r}")
    return Vector3(*(_finite(c, f"{context}.{key}") for c in value))


def _encode_vector(v: Vector3) -> list:
    return [float(c) for c in v]


###############################################################################
# Materials
###############################################################################
def _encode_material(material) -> dict:
    if type(material) is Lambertian:
        return {"type": "Lambertian", "albedo": _encode_vector(material.albedo)}
    if type(material) is Metal:
        return {"type": "Metal", "albedo": _encode_vector(material.albedo),
                "fuzz": float(material.fuzz)}
    if type(material) is Dielectric:
        return {"type": "Dielectric", "refraction_index": float(material.refraction_index)}
    raise SceneFormatError(f"cannot serialize material of type {type(material).__name__}")


def _decode_material(data, context: str):
    tag = _field(data, "type", context)
    if tag == "Lambertian":
        return Lambertian(_vector(data, "albedo", context))
    if tag == "Metal":
        return Metal(_vector(data, "albedo", context), _number(data, "fuzz", context))
    if tag == "Dielectric":
        return Dielectric(_number(data, "refraction_index", context))
    raise SceneFormatError(f"{context}: unknown material type {tag!r}")


###############################################################################
# Geometry
###############################################################################
def _encode_hittable(obj) -> dict:
    if type(obj) is Sphere:
        return {"type": "Sphere", "center": _encode_vector(obj.center),
                "radius": float(obj.radius), "material": _encode_material(obj.material)}
    if type(obj) is HittableList:
        return {"type": "HittableList", "hittables": [_encode_hittable(o) for o in obj.objects]}
    raise SceneFormatError(f"cannot serialize hittable of type {type(obj).__name__}")


def _decode_hittable(data, context: str):
    tag = _field(data, "type", context)
    if tag == "Sphere":
        return Sphere(_vector(data, "center", context),
                      _number(data, "radius", context),
                      _decode_material(_field(data, "material", context), f"{context}.material"))
    if tag == "HittableList":
        children = _field(data, "hittables", context)
        if not isinstance(children, list):
            raise SceneFormatError(f"{context}.hittables: expected a list")
        return HittableList(_decode_hittable(child, f"{context}.hittables[{i}]")
                            for i, child in enumerate(children))
    raise SceneFormatError(f"{context}: unknown hittable type {tag!r}")


###############################################################################
# Camera
###############################################################################
def _encode_camera(camera: Camera) -> dict:
    return {
        "origin": _encode_vector(camera.origin),
        "up": _encode_vector(camera.up_direction),
        "forward": _encode_vector(camera.forward_direction),
        "vfov": float(camera.vfov),
        "aspect_ratio": float(camera.aspect_ratio),
        "aperture": float(camera.aperture),
        "focus_distance": float(camera.focus_distance),
    }


def _decode_camera(data, context: str = "camera") -> Camera:
    return Camera(
        origin=_vector(data, "origin", context),
        up=_vector(data, "up", context),
        forward=_vector(data, "forward", context),
        vfov=_number(data, "vfov", context),
        aspect_ratio=_number(data, "aspect_ratio", context),
        aperture=_number(data, "aperture", context),
        focus_distance=_number(data, "focus_distance", context),
    )


###############################################################################
# Public API
###############################################################################
def serialize_scene(scene: Scene) -> str:
    """
    Encode a scene as pretty-printed JSON.
    """
    document = {"root": _encode_hittable(scene.root), "camera": _encode_camera(scene.camera)}
    return json.dumps(document, indent=2)


def deserialize_scene(text: Union[str, bytes]) -> Scene:
    """
    Decode a scene produced by serialize_scene().

    Raises:
        SceneFormatError: if the text is not valid JSON or does not describe
            a scene. No partial scene is returned.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SceneFormatError(f"scene is not valid UTF-8: {e}") from e
    try:
        document = json.loads(text)
    except RecursionError as e:
        raise SceneFormatError("scene is nested too deeply") from e
    except ValueError as e:
        # JSONDecodeError, or an integer literal past the int parsing limit
        raise SceneFormatError(f"scene is not valid JSON: {e}") from e

    try:
        root = _decode_hittable(_field(document, "root", "scene"), "root")
    except RecursionError as e:
        raise SceneFormatError("root: hittables are nested too deeply") from e
    camera = _decode_camera(_field(document, "camera", "scene"))
    return Scene(root, camera)


def save_scene(scene: Scene, path: Union[str, Path]) -> None:
    path = Path(path)
    path.write_text(serialize_scene(scene), encoding="utf-8")
    logger.debug("Saved scene to %s", path)


def load_scene(path: Union[str, Path]) -> Scene:
    path = Path(path)
    scene = deserialize_scene(path.read_bytes())
    logger.debug("Loaded scene from %s", path)
    return scene
