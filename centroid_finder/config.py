"""
Configuration settings for trajectory extraction and image summaries.

Raw command line strings are validated once here; the analysis code takes
the resulting dataclasses at face value.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

HEX_COLOR_RE = re.compile(r'^[0-9a-fA-F]{6}$')
STRATEGIES = ('bfs', 'label')


def parse_hex_color(text: str) -> int:
    """Parse a six-digit hex color such as 'FFA500' into 0xFFA500."""
    if not HEX_COLOR_RE.match(text or ''):
        raise ConfigError(f"Hex color must have exactly 6 hex digits (e.g. FFA500), got {text!r}")
    return int(text, 16)


def parse_threshold(text: str) -> int:
    """Parse a non-negative integer threshold."""
    try:
        value = int(text)
    except (TypeError, ValueError):
        raise ConfigError(f"Threshold must be an integer: {text!r}") from None
    if value < 0:
        raise ConfigError(f"Threshold must be a non-negative integer, got {value}")
    return value


def _check_strategy(strategy: str) -> str:
    if strategy not in STRATEGIES:
        raise ConfigError(f"Unknown strategy {strategy!r}, choose from {STRATEGIES}")
    return strategy


@dataclass(frozen=True)
class TrackingConfig:
    """Configuration for extracting a trajectory from a video."""
    video_path: str
    output_path: str
    target_color: int
    threshold: int
    strategy: str = 'bfs'
    show_progress: bool = True

    @classmethod
    def from_strings(cls, video_path: str, output_path: str, hex_color: str, threshold: str,
                     strategy: str = 'bfs', show_progress: bool = True) -> 'TrackingConfig':
        """
        Validate raw arguments.

        Checks that the video exists and is an mp4, that the output's parent
        directory exists and that the output ends with .csv.
        """
        target_color = parse_hex_color(hex_color)
        threshold_value = parse_threshold(threshold)

        video = Path(video_path)
        if not video.exists():
            raise ConfigError(f"No such file path exists: {video_path}")
        if video.suffix.lower() != '.mp4':
            raise ConfigError(f"Video type must be mp4: {video_path}")

        output = Path(output_path)
        parent = output.parent
        if not parent.is_dir():
            raise ConfigError(f"Output directory does not exist: {parent.resolve()}")
        if output.suffix.lower() != '.csv':
            raise ConfigError(f"Output file path must end with .csv: {output_path}")

        return cls(video_path=str(video), output_path=str(output),
                   target_color=target_color, threshold=threshold_value,
                   strategy=_check_strategy(strategy), show_progress=show_progress)


@dataclass(frozen=True)
class ImageSummaryConfig:
    """Configuration for summarizing the groups of a single image."""
    image_path: str
    output_dir: str
    target_color: int
    threshold: int
    strategy: str = 'bfs'
    binarized_name: str = 'binarized.png'
    groups_name: str = 'groups.csv'

    @property
    def binarized_path(self) -> Path:
        return Path(self.output_dir) / self.binarized_name

    @property
    def groups_path(self) -> Path:
        return Path(self.output_dir) / self.groups_name

    @classmethod
    def from_strings(cls, image_path: str, hex_color: str, threshold: str,
                     output_dir: str = '.', strategy: str = 'bfs') -> 'ImageSummaryConfig':
        target_color = parse_hex_color(hex_color)
        threshold_value = parse_threshold(threshold)

        if not Path(image_path).exists():
            raise ConfigError(f"No such file path exists: {image_path}")
        if not Path(output_dir).is_dir():
            raise ConfigError(f"Output directory does not exist: {output_dir}")

        return cls(image_path=str(image_path), output_dir=str(output_dir),
                   target_color=target_color, threshold=threshold_value,
                   strategy=_check_strategy(strategy))
