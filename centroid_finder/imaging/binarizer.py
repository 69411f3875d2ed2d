"""
Conversion between color frames and binary masks.
"""

from typing import Optional

import numpy as np

from ..errors import InvalidArgumentError
from .color_distance import ColorDistanceMetric, EuclideanColorDistance, unpack_rgb
from .validation import as_binary_mask, as_grid

WHITE = 255


def as_rgb_frame(frame) -> np.ndarray:
    """
    Normalize a frame to an (H, W, 3) RGB array.

    Accepts an (H, W, 3) RGB array, an (H, W, 4) RGBA array (alpha dropped),
    or an (H, W) grid of packed 24-bit colors.
    """
    grid = as_grid(frame, 'frame')
    if grid.ndim == 2:
        if not np.issubdtype(grid.dtype, np.integer):
            raise InvalidArgumentError("packed frames must hold integer colors")
        return unpack_rgb(grid)
    if grid.ndim == 3 and grid.shape[2] in (3, 4):
        return grid[..., :3]
    raise InvalidArgumentError(f"unsupported frame shape {grid.shape}")


class DistanceImageBinarizer:
    """
    Binarizes frames by color distance to a target.

    A pixel becomes foreground (1) when its distance to the target color is
    strictly less than the threshold, background (0) otherwise.
    """

    def __init__(self, metric: Optional[ColorDistanceMetric] = None):
        self.metric = metric if metric is not None else EuclideanColorDistance()

    def to_binary_mask(self, frame, target_color: int, threshold: float) -> np.ndarray:
        """
        Build the binary mask of a frame.

        Args:
            frame: RGB frame, see ``as_rgb_frame``
            target_color: Packed 24-bit target color
            threshold: Distance below which a pixel counts as foreground

        Returns:
            uint8 array of shape (H, W) holding 0s and 1s
        """
        rgb = as_rgb_frame(frame)
        distances = self.metric.distances(rgb, target_color)
        return (distances < threshold).astype(np.uint8)

    def to_frame(self, mask) -> np.ndarray:
        """Render a mask as an RGB image: 1 -> white, 0 -> black."""
        binary = as_binary_mask(mask)
        return np.repeat((binary * WHITE)[..., np.newaxis], 3, axis=2).astype(np.uint8)
