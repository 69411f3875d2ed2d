"""
CSV output for trajectories and group summaries.

Files have no header row and one record per line. Existing files are
overwritten; an empty input produces an empty file.
"""

import logging
import os
from typing import Iterable, Union

from ..imaging import Group
from ..video import TimedCoordinate

logger = logging.getLogger(__name__)


def _render(records) -> str:
    return ''.join(record.to_csv_row() + '\n' for record in records)


def format_trajectory(coords: Iterable[TimedCoordinate]) -> str:
    """Render ``time,x,y`` rows, time with two decimals."""
    return _render(coords)


def write_trajectory_csv(path: Union[str, os.PathLike], coords: Iterable[TimedCoordinate]) -> None:
    """Write ``time,x,y`` rows, time with two decimals."""
    coords = list(coords)
    with open(path, 'w') as f:
        f.write(_render(coords))
    logger.info(f"Saved {len(coords)} timed coordinates to {path}")


def write_groups_csv(path: Union[str, os.PathLike], groups: Iterable[Group]) -> None:
    """Write ``size,x,y`` rows, one per group."""
    groups = list(groups)
    with open(path, 'w') as f:
        f.write(_render(groups))
    logger.info(f"Saved {len(groups)} groups to {path}")
