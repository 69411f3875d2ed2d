import numpy as np
import pytest

from centroid_finder.imaging import (
    BfsGroupFinder,
    BinarizingFrameGroupFinder,
    DistanceImageBinarizer,
    LabelGroupFinder,
)

RED = 0xFF0000
BLACK_RGB = (0, 0, 0)


def blank_frame(width=8, height=6, color=BLACK_RGB):
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:, :] = color
    return frame


def paint(frame, rows, cols, color=(255, 0, 0)):
    """Paint the rectangle rows x cols (half-open ranges) with ``color``."""
    frame[rows[0]:rows[1], cols[0]:cols[1]] = color
    return frame


@pytest.fixture(params=[BfsGroupFinder, LabelGroupFinder], ids=['bfs', 'label'])
def component_finder(request):
    return request.param()


@pytest.fixture
def frame_group_finder():
    return BinarizingFrameGroupFinder(DistanceImageBinarizer(), BfsGroupFinder())
