"""Self-Organizing Map core: lattice, distances, kernels, BMU search, normalization and class frequencies."""

from .grid import grid_rectangular
from .distance import dist_matrix, axis_extents
from .neighborhood import gaussian_kernel, neighborhood_weights
from .bmu import find_bmu, find_bmu_distance, visual
from .conversion import convert_training_data
from .normalization import norm_train_data, apply_norm_params, Normalizer
from .frequencies import make_population, make_class_freqs, class_frequencies
from .topology import SOMTopology
from .exceptions import (
    SOMError,
    DimensionMismatchError,
    DegenerateNormalizationError,
    InvalidTopologyError,
    NonNumericDataError,
    NeuronIndexError,
    ClassLabelError,
)

__all__ = [
    'grid_rectangular',
    'dist_matrix',
    'axis_extents',
    'gaussian_kernel',
    'neighborhood_weights',
    'find_bmu',
    'find_bmu_distance',
    'visual',
    'convert_training_data',
    'norm_train_data',
    'apply_norm_params',
    'Normalizer',
    'make_population',
    'make_class_freqs',
    'class_frequencies',
    'SOMTopology',
    'SOMError',
    'DimensionMismatchError',
    'DegenerateNormalizationError',
    'InvalidTopologyError',
    'NonNumericDataError',
    'NeuronIndexError',
    'ClassLabelError',
]
