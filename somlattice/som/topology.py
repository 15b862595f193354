"""Lattice description shared by distance, BMU and frequency computations."""

from dataclasses import dataclass
from functools import cached_property
import logging

import numpy as np
import pandas as pd

from somlattice.abstractions.types.som_types import TopologyType
from .constants import INDEX_COLUMN, X_COLUMN, Y_COLUMN, X, Y
from .distance import dist_matrix
from .grid import grid_rectangular, validate_dimension

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SOMTopology:
    """Immutable neuron lattice: dimensions, wrap-around and derived geometry.

    The grid and the distance matrix are computed on first access and
    cached for the lifetime of the topology.
    """
    xdim: int
    ydim: int
    toroidal: bool = False
    topology: TopologyType = TopologyType.RECTANGULAR

    def __post_init__(self):
        object.__setattr__(self, 'xdim', validate_dimension('xdim', self.xdim))
        object.__setattr__(self, 'ydim', validate_dimension('ydim', self.ydim))
        object.__setattr__(self, 'toroidal', bool(self.toroidal))
        object.__setattr__(self, 'topology', TopologyType(self.topology))

    @classmethod
    def rectangular(cls, xdim: int, ydim: int, toroidal: bool = False) -> "SOMTopology":
        return cls(xdim=xdim, ydim=ydim, toroidal=toroidal)

    @classmethod
    def from_config(cls, config) -> "SOMTopology":
        """Build a topology from the ``som`` section of a Config."""
        topology = cls(
            xdim=config.get('som.xdim'),
            ydim=config.get('som.ydim'),
            toroidal=config.get('som.toroidal', False),
            topology=TopologyType(str(config.get('som.topology', 'rectangular')).lower()),
        )
        logger.debug(f"Topology from config: {topology}")
        return topology

    @property
    def num_codes(self) -> int:
        """Number of neurons."""
        return self.xdim * self.ydim

    @cached_property
    def grid(self) -> np.ndarray:
        """Neuron coordinates, shape (num_codes, 2)."""
        return grid_rectangular(self.xdim, self.ydim)

    @cached_property
    def distances(self) -> np.ndarray:
        """Lattice distance matrix, shape (num_codes, num_codes)."""
        return dist_matrix(self.grid, self.toroidal)

    def indices(self) -> pd.DataFrame:
        """Flat index and X/Y grid coordinates of every neuron."""
        return pd.DataFrame({
            INDEX_COLUMN: np.arange(self.num_codes),
            X_COLUMN: self.grid[:, X].astype(np.int64),
            Y_COLUMN: self.grid[:, Y].astype(np.int64),
        })

    def __str__(self) -> str:
        kind = 'toroidal' if self.toroidal else 'planar'
        return f"{self.xdim}x{self.ydim} {self.topology.value} ({kind})"
