"""
Trajectory extraction: follow the largest target-colored group through a video.

Every frame is binarized against the target color, its connected groups are
found, and the centroid of the largest group is recorded together with the
frame's timestamp. Frames without any group are skipped.
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

from tqdm import tqdm

from ..imaging import (
    BinarizingFrameGroupFinder,
    Coordinate,
    DistanceImageBinarizer,
    make_group_finder,
)
from .video_processor import VideoSource, open_video

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class TimedCoordinate:
    """
    Centroid of the dominant group at a moment of the video.

    ``time`` is in seconds from the start of the video. Instances order by
    time.
    """
    time: float
    centroid: Coordinate

    @property
    def x(self) -> int:
        return self.centroid.x

    @property
    def y(self) -> int:
        return self.centroid.y

    def to_csv_row(self) -> str:
        return f"{self.time:.2f},{self.x},{self.y}"


class TrajectoryExtractor:
    """
    Extract the dominant-group trajectory of a video.

    Frames are numbered from 1, so a detection on frame ``n`` of a video at
    ``fps`` frames per second is stamped ``n / fps`` seconds.
    """

    def __init__(self, group_finder: BinarizingFrameGroupFinder, show_progress: bool = False):
        """
        Initialize trajectory extractor.

        Args:
            group_finder: Turns one frame into an ordered list of groups
            show_progress: Display a tqdm progress bar over the frames
        """
        self.group_finder = group_finder
        self.show_progress = show_progress

    def extract(self, source: VideoSource, target_color: int, threshold: float) -> List[TimedCoordinate]:
        """
        Run the whole video through the group finder.

        Args:
            source: Frame source; ``next_frame()`` returns None at end of stream
            target_color: Packed 24-bit target color
            threshold: Color distance threshold

        Returns:
            One TimedCoordinate per frame containing at least one group,
            in frame order
        """
        fps = source.frame_rate()
        coordinates = []
        frame_index = 1

        pbar = tqdm(total=source.total_frames() or None, desc="Processing frames",
                    unit="frame", disable=not self.show_progress)
        try:
            while True:
                frame = source.next_frame()
                if frame is None:
                    break

                groups = self.group_finder.find_groups(frame, target_color, threshold)
                if groups:
                    largest = groups[0]
                    coordinates.append(TimedCoordinate(frame_index / fps, largest.centroid))
                    logger.debug(f"Frame {frame_index}: {len(groups)} groups, largest "
                                 f"size={largest.size} at {tuple(largest.centroid)}")

                frame_index += 1
                pbar.update(1)
        finally:
            pbar.close()

        visited = frame_index - 1
        if coordinates:
            logger.info(f"Visited {visited} frames, found the target in {len(coordinates)}")
        else:
            logger.warning(f"Visited {visited} frames, target color never found")

        return coordinates


def extract_trajectory(video_path: str, target_color: int, threshold: float,
                       strategy: str = 'bfs', show_progress: bool = False,
                       group_finder: Optional[BinarizingFrameGroupFinder] = None) -> List[TimedCoordinate]:
    """
    Convenience function to extract a trajectory straight from a video file.

    Args:
        video_path: Path to the video
        target_color: Packed 24-bit target color
        threshold: Color distance threshold
        strategy: Component finding strategy ('bfs' or 'label')
        show_progress: Display a progress bar
        group_finder: Use this frame group finder instead of building one

    Returns:
        List of TimedCoordinate records in time order
    """
    if group_finder is None:
        group_finder = BinarizingFrameGroupFinder(DistanceImageBinarizer(),
                                                  make_group_finder(strategy))
    extractor = TrajectoryExtractor(group_finder, show_progress=show_progress)

    with open_video(video_path) as source:
        return extractor.extract(source, target_color, threshold)
