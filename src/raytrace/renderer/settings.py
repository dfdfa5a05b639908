# renderer/settings.py
from dataclasses import dataclass, replace
from typing import Optional

# Named sample/bounce budgets, from quick look to final image.
QUALITY_PRESETS = {
    "preview": {"samples_per_pixel": 4, "max_depth": 8},
    "balanced": {"samples_per_pixel": 32, "max_depth": 25},
    "final": {"samples_per_pixel": 100, "max_depth": 50},
}


@dataclass(frozen=True)
class ImageSettings:
    width: int
    height: int

    @classmethod
    def from_aspect_ratio(cls, width: int, aspect_ratio: float) -> "ImageSettings":
        """Height is width / aspect_ratio, truncated."""
        return cls(width, int(width / aspect_ratio))

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def validate(self):
        # u and v are divided by (width - 1) and (height - 1).
        if self.width < 2 or self.height < 2:
            raise ValueError(f"image must be at least 2x2 pixels, got {self.width}x{self.height}")


@dataclass(frozen=True)
class RenderSettings:
    """
    How hard to work on an image.

    samples_per_pixel is the total across all threads. gamma=1.0 leaves the
    averaged color linear. seed=None draws fresh OS entropy for every render.
    """
    samples_per_pixel: int = 100
    max_depth: int = 50
    thread_count: int = 1
    gamma: float = 1.0
    seed: Optional[int] = None

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "RenderSettings":
        if name not in QUALITY_PRESETS:
            raise ValueError(f"unknown quality preset {name!r}, expected one of {sorted(QUALITY_PRESETS)}")
        return replace(cls(**QUALITY_PRESETS[name]), **overrides)

    def validate(self):
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.thread_count < 1:
            raise ValueError(f"thread_count must be at least 1, got {self.thread_count}")
        if not self.gamma > 0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")
