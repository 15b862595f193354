"""Type definitions used across the SOM core."""

from .som_types import (
    NormalizationPolicy,
    TopologyType,
    NormalizationParams,
)

__all__ = [
    'NormalizationPolicy',
    'TopologyType',
    'NormalizationParams',
]
