"""
Connected group detection in binary masks.

Pixels are connected horizontally or vertically (4-connectivity), never
diagonally. The top-left cell (row 0, col 0) is coordinate (x=0, y=0); x grows
to the right and y grows downward, so (row 4, col 7) is (x=7, y=4).
"""

from collections import deque
from dataclasses import dataclass
from typing import List, NamedTuple, Protocol, Tuple

import cv2
import numpy as np

from .binarizer import DistanceImageBinarizer
from .validation import as_binary_mask

# up, down, left, right
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Coordinate(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Group:
    """A connected region of foreground pixels."""
    size: int
    centroid: Coordinate

    def to_csv_row(self) -> str:
        return f"{self.size},{self.centroid.x},{self.centroid.y}"


def group_sort_key(group: Group) -> Tuple[int, int, int]:
    return group.size, group.centroid.x, group.centroid.y


def sort_groups(groups: List[Group]) -> List[Group]:
    """Largest group first; ties go to the larger x, then the larger y."""
    return sorted(groups, key=group_sort_key, reverse=True)


def make_group(size: int, x_sum: int, y_sum: int) -> Group:
    """Build a group whose centroid is the truncated mean of its pixels."""
    return Group(size=int(size), centroid=Coordinate(int(x_sum) // int(size), int(y_sum) // int(size)))


class ComponentFinder(Protocol):
    def find_groups(self, mask) -> List[Group]:
        ...


class BfsGroupFinder:
    """
    Finds connected groups with an iterative breadth-first flood fill.

    A fresh ``visited`` grid is allocated on every call, so one instance can
    be shared between frames.
    """

    def find_groups(self, mask) -> List[Group]:
        """
        Find every 4-connected group of 1s in ``mask``.

        Args:
            mask: Rectangular 2-D grid of 0s and 1s (numpy array or nested lists)

        Returns:
            Groups sorted largest first (see ``sort_groups``); empty when the
            mask has no foreground pixels

        Raises:
            NullReferenceError: if the mask or any row is None
            InvalidArgumentError: if the mask is empty, jagged or non-binary
        """
        image = as_binary_mask(mask)
        height, width = image.shape
        visited = np.zeros((height, width), dtype=bool)
        groups = []

        # np.argwhere yields foreground cells in row-major order
        for row, col in np.argwhere(image == 1):
            if visited[row, col]:
                continue
            groups.append(self._flood_fill(image, visited, int(row), int(col)))

        return sort_groups(groups)

    @staticmethod
    def _flood_fill(image: np.ndarray, visited: np.ndarray, row: int, col: int) -> Group:
        height, width = image.shape
        queue = deque([(row, col)])
        visited[row, col] = True
        size = x_sum = y_sum = 0

        while queue:
            r, c = queue.popleft()
            size += 1
            x_sum += c
            y_sum += r
            for dr, dc in NEIGHBOR_OFFSETS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < height and 0 <= nc < width \
                        and image[nr, nc] == 1 and not visited[nr, nc]:
                    visited[nr, nc] = True
                    queue.append((nr, nc))

        return make_group(size, x_sum, y_sum)


class LabelGroupFinder:
    """
    Finds connected groups with OpenCV connected-component labelling.

    Produces the same groups as ``BfsGroupFinder`` but does the traversal in
    native code, which matters for full-resolution video frames.
    """

    def find_groups(self, mask) -> List[Group]:
        image = as_binary_mask(mask)
        num_labels, labels = cv2.connectedComponents(image, connectivity=4, ltype=cv2.CV_32S)
        if num_labels <= 1:
            return []

        rows, cols = np.indices(labels.shape)
        flat = labels.ravel()
        sizes = np.bincount(flat, minlength=num_labels)
        x_sums = np.bincount(flat, weights=cols.ravel(), minlength=num_labels)
        y_sums = np.bincount(flat, weights=rows.ravel(), minlength=num_labels)

        # label 0 is background
        groups = [make_group(sizes[i], round(x_sums[i]), round(y_sums[i]))
                  for i in range(1, num_labels)]
        return sort_groups(groups)


GROUP_FINDERS = {
    'bfs': BfsGroupFinder,
    'label': LabelGroupFinder,
}


def make_group_finder(strategy: str = 'bfs') -> ComponentFinder:
    """Create a component finder by name ('bfs' or 'label')."""
    try:
        return GROUP_FINDERS[strategy]()
    except KeyError:
        raise ValueError(f"Unknown group finding strategy: {strategy!r}. "
                         f"Choose from {sorted(GROUP_FINDERS)}") from None


class BinarizingFrameGroupFinder:
    """Binarizes a frame and hands the mask to a component finder."""

    def __init__(self, binarizer: DistanceImageBinarizer, component_finder: ComponentFinder):
        self.binarizer = binarizer
        self.component_finder = component_finder

    def find_groups(self, frame, target_color: int, threshold: float) -> List[Group]:
        mask = self.binarizer.to_binary_mask(frame, target_color, threshold)
        return self.component_finder.find_groups(mask)
