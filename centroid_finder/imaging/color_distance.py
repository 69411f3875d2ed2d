"""
Color distance metrics over 24-bit RGB colors.
"""

import math
from typing import Protocol, Tuple

import numpy as np

RGB_MASK = 0xFFFFFF


def split_rgb(color: int) -> Tuple[int, int, int]:
    """Split a packed color into (r, g, b), ignoring anything above 24 bits."""
    color &= RGB_MASK
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def unpack_rgb(colors: np.ndarray) -> np.ndarray:
    """Convert an (H, W) array of packed colors into an (H, W, 3) uint8 array."""
    colors = np.asarray(colors, dtype=np.int64) & RGB_MASK
    return np.stack([(colors >> 16) & 0xFF,
                     (colors >> 8) & 0xFF,
                     colors & 0xFF], axis=-1).astype(np.uint8)


class ColorDistanceMetric(Protocol):
    """Anything that can measure how far apart two colors are."""

    def distance(self, a: int, b: int) -> float:
        ...

    def distances(self, pixels: np.ndarray, target: int) -> np.ndarray:
        ...


class EuclideanColorDistance:
    """
    Straight-line distance between two colors in RGB space.

    The result is 0 for identical colors and sqrt(3 * 255**2) for black
    against white. Bits beyond the low 24 (e.g. alpha) are discarded.
    """

    def distance(self, a: int, b: int) -> float:
        ra, ga, ba = split_rgb(a)
        rb, gb, bb = split_rgb(b)
        return math.sqrt((ra - rb) ** 2 + (ga - gb) ** 2 + (ba - bb) ** 2)

    def distances(self, pixels: np.ndarray, target: int) -> np.ndarray:
        """
        Distance from every pixel to ``target``.

        Args:
            pixels: Array of shape (H, W, 3) in RGB channel order
            target: Packed 24-bit target color

        Returns:
            Float array of shape (H, W)
        """
        diff = np.asarray(pixels, dtype=np.int64) - np.array(split_rgb(target), dtype=np.int64)
        return np.sqrt(np.sum(diff * diff, axis=-1))
