# core/color.py
import math
from typing import Tuple
from core.vector import Vector3

# Colors are linear RGB triples stored in a Vector3 (x = r, y = g, z = b).
Color = Vector3

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def lerp(a: Color, b: Color, t: float) -> Color:
    """
    Linear blend from a (t = 0) to b (t = 1).
    """
    return a * (1.0 - t) + b * t


def to_rgb8(color: Color, gamma: float = 1.0) -> Tuple[int, int, int]:
    """
    Converts a color with channels in [0, 1] to 8-bit values.
    A gamma other than 1 applies the display transfer function first.
    """
    def to8(c: float) -> int:
        if not math.isfinite(c) or c <= 0.0:
            return 0
        if gamma != 1.0:
            c = c ** (1.0 / gamma)
        return min(255, int(c * 255.99))

    return to8(color.x), to8(color.y), to8(color.z)
