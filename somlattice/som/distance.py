"""Neuron-to-neuron distance matrices for planar and toroidal lattices."""

from typing import Tuple

import numpy as np

from somlattice.infrastructure.logging import get_logger, log_operation
from .constants import X, Y, GRID_SHAPE_MSG
from .exceptions import DimensionMismatchError

logger = get_logger(__name__)


def _as_grid(grid) -> np.ndarray:
    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim != 2 or grid.shape[1] != 2 or grid.shape[0] == 0:
        raise DimensionMismatchError(
            GRID_SHAPE_MSG.format(grid.shape), expected=(None, 2), actual=grid.shape
        )
    return grid


def axis_extents(grid) -> Tuple[float, float]:
    """Return the wrap period of each lattice axis: ``max - min + 1``."""
    grid = _as_grid(grid)
    x_extent = grid[:, X].max() - grid[:, X].min() + 1.0
    y_extent = grid[:, Y].max() - grid[:, Y].min() + 1.0
    return float(x_extent), float(y_extent)


@log_operation("dist_matrix")
def dist_matrix(grid, toroidal: bool) -> np.ndarray:
    """Return the distance matrix for a non-toroidal or toroidal SOM.

    For a toroidal SOM each axis distance is wrapped to the shorter of
    the direct and the wrap-around distance.

    Args:
        grid: coordinates of all neurons as generated by ``grid_rectangular``,
            x in the first column and y in the second
        toroidal: True for a toroidal SOM

    Returns:
        Read-only symmetric (n_neurons, n_neurons) matrix with zero diagonal

    Raises:
        DimensionMismatchError: if grid is not an (n_neurons, 2) array
    """
    grid = _as_grid(grid)
    x_extent, y_extent = axis_extents(grid)

    dx = np.abs(grid[:, X, np.newaxis] - grid[np.newaxis, :, X])
    dy = np.abs(grid[:, Y, np.newaxis] - grid[np.newaxis, :, Y])

    if toroidal:
        dx = np.minimum(dx, x_extent - dx)
        dy = np.minimum(dy, y_extent - dy)

    dm = np.sqrt(dx ** 2 + dy ** 2)
    dm.setflags(write=False)

    logger.info(f"Computed {'toroidal' if toroidal else 'planar'} distance matrix "
                f"for {grid.shape[0]} neurons")
    return dm
