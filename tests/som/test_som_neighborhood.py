"""Tests for Gaussian neighborhood kernels."""

import numpy as np
import pytest
from scipy.stats import norm

from somlattice.som import (
    gaussian_kernel, neighborhood_weights, grid_rectangular, dist_matrix,
    DimensionMismatchError, NeuronIndexError
)


class TestGaussianKernel:
    """Test kernel values for mu = 0 and sigma = radius / 3."""

    def test_peak_value(self):
        """At distance 0 the kernel equals the normal density peak."""
        radius = 3.0
        assert gaussian_kernel(0.0, radius) == pytest.approx(1.0 / np.sqrt(2.0 * np.pi))

    def test_matches_normal_pdf(self):
        radius = 4.5
        for d in (0.0, 0.5, 1.0, 2.0, 4.5):
            assert gaussian_kernel(d, radius) == pytest.approx(norm.pdf(d, 0.0, radius / 3.0))

    def test_scalar_returns_float(self):
        assert isinstance(gaussian_kernel(1, 2.0), float)

    def test_monotone_decreasing(self):
        distances = np.linspace(0.0, 10.0, 50)
        values = gaussian_kernel(distances, 5.0)
        assert values.shape == distances.shape
        assert np.all(np.diff(values) < 0)

    def test_symmetric_in_distance(self):
        assert gaussian_kernel(-1.5, 2.0) == pytest.approx(gaussian_kernel(1.5, 2.0))

    def test_positive_everywhere(self):
        values = gaussian_kernel(np.array([0.0, 1.0, 3.0]), 3.0)
        assert np.all(values > 0)

    @pytest.mark.parametrize("radius", [0.0, -1.0, float('nan')])
    def test_invalid_radius(self, radius):
        with pytest.raises(ValueError):
            gaussian_kernel(1.0, radius)


class TestNeighborhoodWeights:
    """Test influence of every neuron for a winner."""

    def test_weights_follow_distance_row(self):
        dm = dist_matrix(grid_rectangular(4, 4), toroidal=False)
        weights = neighborhood_weights(dm, 5, 2.0)
        assert weights.shape == (16,)
        assert np.allclose(weights, gaussian_kernel(dm[5], 2.0))
        assert int(np.argmax(weights)) == 5

    def test_non_square_matrix(self):
        with pytest.raises(DimensionMismatchError):
            neighborhood_weights(np.zeros((3, 4)), 0, 1.0)

    @pytest.mark.parametrize("bmu", [-1, 9])
    def test_bmu_out_of_range(self, bmu):
        dm = dist_matrix(grid_rectangular(3, 3), toroidal=False)
        with pytest.raises(NeuronIndexError):
            neighborhood_weights(dm, bmu, 1.0)
