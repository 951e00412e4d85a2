# renderer/config.py
import logging
from dataclasses import dataclass, field
from typing import Optional

from camera.camera import Camera
from core.vector import Vector3

logger = logging.getLogger(__name__)

MAX_DEPTH = 50

# Named quality levels: samples per pixel and maximum bounce depth
QUALITY_PRESETS = {
    "interactive": {"samples": 4, "bounces": 4},
    "balanced": {"samples": 16, "bounces": 16},
    "high_quality": {"samples": 100, "bounces": MAX_DEPTH},
}


class ConfigError(ValueError):
    """Raised for render settings that cannot be used to start a render."""


@dataclass
class RenderConfig:
    """
    Flat settings record for one render.

    seed=None draws worker seeds from OS entropy, so repeated renders differ.
    jitter=False samples every pixel at its center instead of a random
    sub-pixel position.
    """
    width: int
    height: int
    samples_per_pixel: int = 16
    workers: int = 1
    max_depth: int = MAX_DEPTH
    seed: Optional[int] = None
    use_processes: bool = False
    jitter: bool = True

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def rays_to_trace(self) -> int:
        return self.width * self.height * self.samples_per_pixel

    def validate(self) -> "RenderConfig":
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Resolution must be positive, got {self.width}x{self.height}")
        if self.workers < 1:
            raise ConfigError(f"At least one worker is required, got {self.workers}")
        if self.samples_per_pixel < 1:
            raise ConfigError(f"At least one sample per pixel is required, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ConfigError(f"Maximum depth cannot be negative, got {self.max_depth}")
        if self.samples_per_pixel < self.workers:
            logger.warning("Only %d samples for %d workers; %d workers will be idle",
                           self.samples_per_pixel, self.workers,
                           self.workers - self.samples_per_pixel)
        return self

    @classmethod
    def from_preset(cls, name: str, width: int, height: int, workers: int = 1, **kwargs) -> "RenderConfig":
        try:
            quality = QUALITY_PRESETS[name]
        except KeyError:
            raise ConfigError(f"Unknown quality preset {name!r}, "
                              f"expected one of {sorted(QUALITY_PRESETS)}") from None
        return cls(width, height, samples_per_pixel=quality["samples"], workers=workers,
                   max_depth=quality["bounces"], **kwargs)


@dataclass
class CameraConfig:
    """
    Camera extrinsics. focus_distance defaults to the look-at distance.
    """
    look_from: Vector3 = field(default_factory=lambda: Vector3(12.0, 6.0, 0.51))
    look_at: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    vfov: float = 20.0
    aperture: float = 0.6
    focus_distance: Optional[float] = None

    def build(self, aspect_ratio: float) -> Camera:
        if self.aperture < 0:
            raise ConfigError(f"Aperture cannot be negative, got {self.aperture}")
        if not 0 < self.vfov < 180:
            raise ConfigError(f"Vertical field of view must be in (0, 180), got {self.vfov}")
        focus = self.focus_distance
        if focus is None:
            focus = (self.look_from - self.look_at).length()
        return Camera(self.look_from, self.look_at, self.vup, self.vfov,
                      aspect_ratio, self.aperture, focus)
