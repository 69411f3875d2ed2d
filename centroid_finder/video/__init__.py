"""
Video to trajectory conversion module.
"""

from .video_processor import (
    InMemoryVideoSource,
    OpenCVVideoSource,
    VideoSource,
    open_video,
    read_image,
    write_image,
)
from .trajectory_extractor import (
    TimedCoordinate,
    TrajectoryExtractor,
    extract_trajectory,
)

__all__ = [
    'InMemoryVideoSource',
    'OpenCVVideoSource',
    'VideoSource',
    'open_video',
    'read_image',
    'write_image',
    'TimedCoordinate',
    'TrajectoryExtractor',
    'extract_trajectory',
]
