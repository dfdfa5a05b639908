# renderer/image_writer.py
from pathlib import Path
from typing import Union

from PIL import Image


def _check_size(pixels: bytes, width: int, height: int):
    if len(pixels) != width * height * 3:
        raise ValueError(f"expected {width * height * 3} bytes for a {width}x{height} RGB image, "
                         f"got {len(pixels)}")


def write_image(path: Union[str, Path], pixels: bytes, width: int, height: int) -> Path:
    """
    Save an interleaved RGB byte buffer. A .ppm suffix writes a binary
    portable pixmap; anything else is written as PNG.
    """
    _check_size(pixels, width, height)
    path = Path(path)
    image = Image.frombytes("RGB", (width, height), bytes(pixels))
    image_format = "PPM" if path.suffix.lower() == ".ppm" else "PNG"
    image.save(path, format=image_format)
    return path


def write_ppm_ascii(path: Union[str, Path], pixels: bytes, width: int, height: int) -> Path:
    """Plain-text (P3) portable pixmap, one pixel per line."""
    _check_size(pixels, width, height)
    path = Path(path)
    with open(path, "w", encoding="ascii") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for i in range(0, len(pixels), 3):
            f.write(f"{pixels[i]} {pixels[i + 1]} {pixels[i + 2]}\n")
    return path
