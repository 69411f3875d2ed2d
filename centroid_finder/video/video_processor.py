"""
Video frame sources.

Frames are handed out one at a time as RGB arrays of shape (H, W, 3); ``None``
marks the end of the stream.
"""

import cv2
import numpy as np
from pathlib import Path
from typing import List, Optional, Protocol, Sequence
import logging

from ..errors import DecodeFailure

logger = logging.getLogger(__name__)


class VideoSource(Protocol):
    def next_frame(self) -> Optional[np.ndarray]:
        ...

    def frame_rate(self) -> float:
        ...

    def total_frames(self) -> int:
        ...

    def release(self) -> None:
        ...


class OpenCVVideoSource:
    """
    Reads frames from a video file with OpenCV.

    Attributes:
        path: Path of the video file
        width, height: Frame size reported by the container
    """

    def __init__(self, video_path: str):
        """
        Open a video file.

        Args:
            video_path: Path to video file (.mp4, .avi, etc.)

        Raises:
            FileNotFoundError: if the file does not exist
            DecodeFailure: if OpenCV cannot open it or reports no frame rate
        """
        self.path = Path(video_path)
        if not self.path.exists():
            raise FileNotFoundError(f"Video file not found: {self.path}")

        self.cap: Optional[cv2.VideoCapture] = cv2.VideoCapture(str(self.path))
        if not self.cap.isOpened():
            self.cap = None
            raise DecodeFailure(f"Failed to open video: {self.path}")

        self._fps = self.cap.get(cv2.CAP_PROP_FPS)
        self._total_frames = int(self.cap.get(cv2.CAP_PROP_FRAME_COUNT))
        self.width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self.height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        self._frames_read = 0

        if not self._fps or self._fps <= 0:
            self.release()
            raise DecodeFailure(f"Video reports no frame rate: {self.path}")

        logger.info(f"Video properties: {self.width}x{self.height} @ {self._fps} fps, "
                    f"{self._total_frames} frames")

    def next_frame(self) -> Optional[np.ndarray]:
        if self.cap is None:
            raise DecodeFailure(f"Video already released: {self.path}")

        ret, frame = self.cap.read()
        if not ret:
            if self._frames_read < self._total_frames:
                logger.warning(f"Stream ended after {self._frames_read} of "
                               f"{self._total_frames} frames: {self.path}")
            return None
        if frame is None:
            raise DecodeFailure(f"Failed to decode frame from {self.path}")
        self._frames_read += 1

        if frame.ndim == 2:
            return cv2.cvtColor(frame, cv2.COLOR_GRAY2RGB)
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

    def frame_rate(self) -> float:
        return self._fps

    def total_frames(self) -> int:
        return self._total_frames

    def release(self) -> None:
        if self.cap is not None:
            self.cap.release()
            self.cap = None

    def __enter__(self) -> 'OpenCVVideoSource':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class InMemoryVideoSource:
    """Serves a fixed list of frames, e.g. a synthetic clip."""

    def __init__(self, frames: Sequence, fps: float):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.frames: List = list(frames)
        self.fps = float(fps)
        self._position = 0

    def next_frame(self):
        if self._position >= len(self.frames):
            return None
        frame = self.frames[self._position]
        self._position += 1
        return frame

    def frame_rate(self) -> float:
        return self.fps

    def total_frames(self) -> int:
        return len(self.frames)

    def release(self) -> None:
        self._position = len(self.frames)

    def __enter__(self) -> 'InMemoryVideoSource':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def open_video(video_path: str) -> OpenCVVideoSource:
    """Open ``video_path`` for frame-by-frame reading."""
    return OpenCVVideoSource(video_path)


def read_image(image_path: str) -> np.ndarray:
    """
    Load a still image as an RGB array.

    Raises:
        FileNotFoundError: if the file does not exist
        DecodeFailure: if OpenCV cannot decode it
    """
    path = Path(image_path)
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")
    image = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if image is None:
        raise DecodeFailure(f"Failed to read image: {path}")
    return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)


def write_image(image_path: str, rgb: np.ndarray) -> None:
    """Save an RGB array to ``image_path``; the format follows the extension."""
    if not cv2.imwrite(str(image_path), cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)):
        raise IOError(f"Failed to write image: {image_path}")
