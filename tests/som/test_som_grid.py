"""Tests for rectangular lattice construction."""

import numpy as np
import pytest

from somlattice.som import grid_rectangular, InvalidTopologyError


class TestGridRectangular:
    """Test neuron coordinates of rectangular grids."""

    def test_shape_and_dtype(self):
        """Grid has one row per neuron and two float columns."""
        grid = grid_rectangular(4, 3)
        assert grid.shape == (12, 2)
        assert grid.dtype == np.float64

    def test_first_neuron_at_origin(self):
        grid = grid_rectangular(5, 5)
        assert np.array_equal(grid[0], [0.0, 0.0])

    def test_x_varies_fastest(self):
        """Neuron ix + iy * xdim sits at (ix, iy)."""
        xdim, ydim = 4, 3
        grid = grid_rectangular(xdim, ydim)
        for iy in range(ydim):
            for ix in range(xdim):
                assert np.array_equal(grid[ix + iy * xdim], [ix, iy])

    def test_two_by_two_layout(self):
        grid = grid_rectangular(2, 2)
        expected = np.array([[0, 0], [1, 0], [0, 1], [1, 1]], dtype=float)
        assert np.array_equal(grid, expected)

    def test_neighbour_spacing(self):
        """Adjacent neurons are 1.0 apart along each axis."""
        grid = grid_rectangular(6, 1)
        assert np.allclose(np.diff(grid[:, 0]), 1.0)
        assert np.all(grid[:, 1] == 0.0)

    def test_single_neuron(self):
        grid = grid_rectangular(1, 1)
        assert grid.shape == (1, 2)

    def test_grid_is_read_only(self):
        grid = grid_rectangular(3, 3)
        with pytest.raises(ValueError):
            grid[0, 0] = 10.0

    @pytest.mark.parametrize("xdim,ydim", [(0, 3), (3, 0), (-1, 2), (2.5, 2), (True, 2), ("3", 3)])
    def test_invalid_dimensions(self, xdim, ydim):
        """Zero, negative, fractional and non-integer dimensions are rejected."""
        with pytest.raises(InvalidTopologyError):
            grid_rectangular(xdim, ydim)

    def test_numpy_integer_dimensions(self):
        grid = grid_rectangular(np.int64(3), np.int32(2))
        assert grid.shape == (6, 2)
