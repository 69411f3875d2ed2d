"""
Per-frame analysis: color distance, binarization and connected groups.
"""

from .color_distance import (
    ColorDistanceMetric,
    EuclideanColorDistance,
    split_rgb,
    unpack_rgb,
)
from .binarizer import DistanceImageBinarizer, as_rgb_frame
from .group_finder import (
    BfsGroupFinder,
    BinarizingFrameGroupFinder,
    Coordinate,
    Group,
    LabelGroupFinder,
    make_group_finder,
    sort_groups,
)

__all__ = [
    'ColorDistanceMetric',
    'EuclideanColorDistance',
    'split_rgb',
    'unpack_rgb',
    'DistanceImageBinarizer',
    'as_rgb_frame',
    'BfsGroupFinder',
    'BinarizingFrameGroupFinder',
    'Coordinate',
    'Group',
    'LabelGroupFinder',
    'make_group_finder',
    'sort_groups',
]
