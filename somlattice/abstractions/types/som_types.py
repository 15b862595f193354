"""Type definitions for Self-Organizing Map computations."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np


class NormalizationPolicy(Enum):
    """Column normalization policies applied before training."""
    MINMAX = "minmax"
    ZSCORE = "zscore"
    NONE = "none"

    @classmethod
    def from_value(cls, value: Union[str, "NormalizationPolicy"]) -> "NormalizationPolicy":
        """Resolve a policy from an enum member or its string tag."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown normalization policy '{value}' (expected one of: {valid})")


class TopologyType(Enum):
    """Neuron lattice layouts."""
    RECTANGULAR = "rectangular"


@dataclass(frozen=True)
class NormalizationParams:
    """Per-column shift and scale of a forward normalization."""
    shift: np.ndarray  # Shape: (n_features,)
    scale: np.ndarray  # Shape: (n_features,)

    @property
    def n_features(self) -> int:
        return int(self.shift.shape[0])

    def as_array(self) -> np.ndarray:
        """Stack into the (2, n_features) layout: row 0 shift, row 1 scale."""
        return np.vstack([self.shift, self.scale])

    @classmethod
    def from_array(cls, params: np.ndarray) -> "NormalizationParams":
        """Split a (2, n_features) parameter matrix."""
        params = np.asarray(params, dtype=np.float64)
        return cls(shift=params[0].copy(), scale=params[1].copy())

    def degenerate_columns(self) -> np.ndarray:
        """Indices of columns whose scale is zero or not finite."""
        bad = (self.scale == 0) | ~np.isfinite(self.scale)
        return np.flatnonzero(bad)
