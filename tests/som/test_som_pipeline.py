"""End-to-end tests: lattice, normalization, BMU search and class frequencies."""

import numpy as np
import pandas as pd
import pytest

from somlattice.som import (
    SOMTopology, Normalizer, gaussian_kernel, neighborhood_weights, visual, class_frequencies,
    grid_rectangular, dist_matrix, find_bmu
)


class TestSOMPipeline:
    """Run the computational core the way a training driver would."""

    @pytest.fixture
    def samples(self, test_data_dir):
        return pd.read_csv(test_data_dir / 'labelled_samples.csv')

    def test_two_by_two_lattice_as_codebook(self):
        """Planar 2x2 lattice: distances follow {0, 1, 1, sqrt 2} and the
        sample at the origin is won by the first neuron."""
        grid = grid_rectangular(2, 2)
        dm = dist_matrix(grid, toroidal=False)

        s = np.sqrt(2.0)
        assert np.allclose(dm, [[0, 1, 1, s], [1, 0, s, 1], [1, s, 0, 1], [s, 1, 1, 0]])
        assert find_bmu(grid, np.array([0.0, 0.0])) == 0

    def test_class_frequencies_from_file(self, samples):
        """Codebook vectors placed on the three clusters recover the labels."""
        topology = SOMTopology(3, 1)
        codes = np.array([[0.1, 0.1], [0.1, 4.0], [4.0, 4.0]])

        cfs = class_frequencies(codes, topology, samples, 'label')

        assert list(cfs.columns) == ['index', 'X', 'Y', 'Population', 'forest', 'grass', 'water']
        assert cfs['Population'].tolist() == [3, 2, 3]
        assert cfs.loc[0, 'forest'] == pytest.approx(2 / 3)
        assert cfs.loc[0, 'grass'] == pytest.approx(1 / 3)
        assert cfs.loc[1, 'grass'] == pytest.approx(1.0)
        assert cfs.loc[2, 'water'] == pytest.approx(1.0)

    def test_normalized_training_step(self, samples, config):
        """One online update moves the winner furthest towards the sample."""
        normalizer = Normalizer.from_config(config)
        x = normalizer.fit_transform(samples[['f1', 'f2']])

        topology = SOMTopology(4, 4, toroidal=True)
        rng = np.random.default_rng(0)
        codes = rng.normal(size=(topology.num_codes, 2))

        sample = x[0]
        bmu = int(visual(codes, x[:1])[0])
        weights = neighborhood_weights(topology.distances, bmu, radius=2.0)
        rate = 0.5 / gaussian_kernel(0.0, 2.0)
        updated = codes + rate * weights[:, np.newaxis] * (sample - codes)

        moved = np.linalg.norm(updated - codes, axis=1) / np.linalg.norm(sample - codes, axis=1)
        assert int(np.argmax(moved)) == bmu
        assert np.linalg.norm(updated[bmu] - sample) < np.linalg.norm(codes[bmu] - sample)
