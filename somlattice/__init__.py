"""
Self-Organizing Map lattice core.

This package provides the numerical building blocks of a SOM: neuron
lattice geometry, neuron distance matrices, neighborhood kernels,
best-matching-unit search, column normalization and per-neuron class
frequency tables.
"""

__version__ = "1.0.0"
__description__ = "Computational core for Self-Organizing Maps"

# Note: Submodules are imported explicitly when needed so that importing
# the package does not read configuration files.

__all__ = [
    '__version__',
    '__description__',
]
