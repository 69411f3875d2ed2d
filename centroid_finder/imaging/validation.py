"""
Shape checks shared by the binarizer and the group finders.
"""

import numpy as np

from ..errors import InvalidArgumentError, NullReferenceError


def as_grid(grid, name: str = 'array') -> np.ndarray:
    """
    Turn a 2-D grid (numpy array or nested sequence) into a numpy array.

    Raises:
        NullReferenceError: if ``grid`` or one of its rows is None
        InvalidArgumentError: if the grid is empty or its rows differ in length
    """
    if grid is None:
        raise NullReferenceError(f"{name} cannot be None")

    if isinstance(grid, np.ndarray):
        if grid.ndim < 2:
            raise InvalidArgumentError(f"{name} must be at least 2-dimensional, got shape {grid.shape}")
        if grid.shape[0] == 0 or grid.shape[1] == 0:
            raise InvalidArgumentError(f"{name} cannot be empty")
        return grid

    if len(grid) == 0:
        raise InvalidArgumentError(f"{name} cannot be empty")
    for row in grid:
        if row is None:
            raise NullReferenceError(f"{name} rows cannot be None")
        if not hasattr(row, "__len__"):
            raise InvalidArgumentError(f"{name} rows must be sequences, got {type(row).__name__}")

    width = len(grid[0])
    if width == 0:
        raise InvalidArgumentError(f"{name} cannot be empty")
    if any(len(row) != width for row in grid):
        raise InvalidArgumentError(f"{name} must be rectangular")

    try:
        return np.asarray(grid)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be rectangular") from e


def as_binary_mask(mask) -> np.ndarray:
    """
    Validate a binary mask and return it as a 2-D uint8 array.

    Raises:
        NullReferenceError: if the mask or a row is None
        InvalidArgumentError: if the mask is empty, jagged, not 2-D, or holds
            anything other than 0 and 1
    """
    grid = as_grid(mask, 'mask')
    if grid.ndim != 2:
        raise InvalidArgumentError(f"mask must be 2-dimensional, got shape {grid.shape}")
    if grid.dtype == bool:
        return grid.astype(np.uint8)
    if not np.issubdtype(grid.dtype, np.number):
        raise InvalidArgumentError("mask can only contain values of 1 or 0")
    if not np.all((grid == 0) | (grid == 1)):
        raise InvalidArgumentError("mask can only contain values of 1 or 0")
    return grid.astype(np.uint8)
