"""Shared test fixtures for the SOM core tests."""

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from somlattice.config import Config


@pytest.fixture
def config(tmp_path, monkeypatch):
    """Defaults-only configuration, isolated from any somlattice.yml on disk."""
    monkeypatch.delenv('SOMLATTICE_CONFIG', raising=False)
    config_file = tmp_path / 'somlattice.yml'
    config_file.write_text('')
    return Config(config_file)


@pytest.fixture
def test_data_dir(config):
    """Directory holding test data files."""
    return Path(config.get('paths.test_data_dir'))


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def sample_codes(rng):
    """Codebook of a 4x3 lattice with 5 features."""
    return rng.normal(size=(12, 5))


@pytest.fixture
def sample_data(rng):
    """200 samples with 5 features on different scales."""
    data = rng.normal(size=(200, 5))
    data[:, 1] *= 50.0
    data[:, 2] += 1000.0
    return data


@pytest.fixture
def labelled_frame():
    """Two features and a class column, two samples per class."""
    return pd.DataFrame({
        'a': [0.0, 0.1, 5.0, 5.1],
        'b': [0.0, 0.1, 5.0, 5.1],
        'cls': ['A', 'A', 'B', 'B'],
    })
