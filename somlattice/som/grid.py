"""Neuron coordinates of rectangular SOM lattices."""

import numbers
import logging

import numpy as np

from .constants import INVALID_DIMENSION_MSG
from .exceptions import InvalidTopologyError

logger = logging.getLogger(__name__)


def validate_dimension(name: str, value) -> int:
    """Return ``value`` as int if it is a positive integer.

    Raises:
        InvalidTopologyError: for booleans, floats and values below 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidTopologyError(INVALID_DIMENSION_MSG.format(name, value))
    return int(value)


def grid_rectangular(xdim: int, ydim: int) -> np.ndarray:
    """Create coordinates of all neurons on a rectangular SOM.

    The x index varies fastest: neuron ``ix + iy * xdim`` sits at
    ``(ix, iy)``. The first neuron sits at (0, 0) and the distance
    between lattice neighbours is 1.0.

    Args:
        xdim: number of neurons in x-direction
        ydim: number of neurons in y-direction

    Returns:
        Read-only float array of shape (xdim * ydim, 2) with x- and
        y-coordinates in the first and second column

    Raises:
        InvalidTopologyError: if a dimension is not a positive integer
    """
    xdim = validate_dimension("xdim", xdim)
    ydim = validate_dimension("ydim", ydim)

    grid = np.empty((xdim * ydim, 2), dtype=np.float64)
    grid[:, 0] = np.tile(np.arange(xdim), ydim)
    grid[:, 1] = np.repeat(np.arange(ydim), xdim)
    grid.setflags(write=False)

    logger.debug(f"Created rectangular grid {xdim}x{ydim} ({xdim * ydim} neurons)")
    return grid
