"""
Centroid Finder: follow the largest region of a target color through a video.
"""

from .errors import (
    ConfigError,
    DecodeFailure,
    InvalidArgumentError,
    InvalidInput,
    NullReferenceError,
)
from .imaging import (
    BfsGroupFinder,
    BinarizingFrameGroupFinder,
    Coordinate,
    DistanceImageBinarizer,
    EuclideanColorDistance,
    Group,
    LabelGroupFinder,
    make_group_finder,
)
from .video import TimedCoordinate, TrajectoryExtractor, extract_trajectory, open_video

__version__ = "1.0.0"

__all__ = [
    'ConfigError',
    'DecodeFailure',
    'InvalidArgumentError',
    'InvalidInput',
    'NullReferenceError',
    'BfsGroupFinder',
    'BinarizingFrameGroupFinder',
    'Coordinate',
    'DistanceImageBinarizer',
    'EuclideanColorDistance',
    'Group',
    'LabelGroupFinder',
    'make_group_finder',
    'TimedCoordinate',
    'TrajectoryExtractor',
    'extract_trajectory',
    'open_video',
]
