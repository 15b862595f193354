"""Neighborhood kernels mapping lattice distances to training influence."""

from typing import Union

import numpy as np
from scipy.stats import norm

from .constants import KERNEL_RADIUS_DIVISOR, DISTANCE_MATRIX_SHAPE_MSG, WINNER_RANGE_MSG
from .exceptions import DimensionMismatchError, NeuronIndexError

ArrayOrScalar = Union[float, np.ndarray]


def gaussian_kernel(distance: ArrayOrScalar, radius: float) -> ArrayOrScalar:
    """Return Gaussian(distance) for mu = 0.0 and sigma = radius / 3.

    A sigma of radius / 3 makes training results comparable between
    different kernels for the same value of radius.

    Args:
        distance: a lattice distance, or an array of distances such as one
            row of the distance matrix
        radius: nominal neighborhood radius, must be > 0

    Returns:
        float for a scalar distance, otherwise an array of the input's shape
    """
    if not radius > 0:
        raise ValueError(f"Kernel radius must be positive, got {radius}")

    sigma = radius / KERNEL_RADIUS_DIVISOR
    if np.ndim(distance) == 0:
        return float(norm.pdf(float(distance), loc=0.0, scale=sigma))
    return norm.pdf(np.asarray(distance, dtype=np.float64), loc=0.0, scale=sigma)


def neighborhood_weights(dm: np.ndarray, bmu: int, radius: float) -> np.ndarray:
    """Influence of every neuron for a given best matching unit.

    Args:
        dm: (n_neurons, n_neurons) lattice distance matrix
        bmu: index of the winner neuron
        radius: nominal neighborhood radius

    Returns:
        Array of length n_neurons with the Gaussian kernel of each neuron's
        lattice distance to ``bmu``
    """
    dm = np.asarray(dm)
    if dm.ndim != 2 or dm.shape[0] != dm.shape[1]:
        raise DimensionMismatchError(
            DISTANCE_MATRIX_SHAPE_MSG.format(dm.shape), expected="square", actual=dm.shape
        )
    if not 0 <= bmu < dm.shape[0]:
        raise NeuronIndexError(WINNER_RANGE_MSG.format(dm.shape[0], bmu))
    return gaussian_kernel(dm[bmu], radius)
