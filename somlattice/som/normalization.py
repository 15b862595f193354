"""Column normalization of training data for SOM training.

Parameters are a (2, n_features) matrix: row 0 holds the per-column
shift, row 1 the per-column scale. The forward transform is
``(x - shift) / scale``. Fitted parameters can be applied to any
dataset with the same columns, regardless of its number of rows.

Policies:
- minmax: shift = column min, scale = column max - column min
- zscore: shift = column mean, scale = column sample standard deviation
- none: shift = 0, scale = 1; the data is returned untouched

Columns with zero (or non-finite) scale raise
DegenerateNormalizationError instead of producing infinities.
"""

from typing import Optional, Tuple, Union
import logging

import numpy as np

from somlattice.abstractions.types.som_types import NormalizationPolicy, NormalizationParams
from .constants import PARAMS_SHAPE_MSG, DEGENERATE_COLUMNS_MSG
from .conversion import convert_training_data
from .exceptions import DimensionMismatchError, DegenerateNormalizationError

logger = logging.getLogger(__name__)

PolicyLike = Union[str, NormalizationPolicy]


def _fit_params(train: np.ndarray, policy: NormalizationPolicy) -> NormalizationParams:
    """Compute shift and scale of every column under a policy."""
    n_features = train.shape[1]

    if policy is NormalizationPolicy.MINMAX:
        col_min = train.min(axis=0)
        return NormalizationParams(shift=col_min, scale=train.max(axis=0) - col_min)

    if policy is NormalizationPolicy.ZSCORE:
        if train.shape[0] < 2:
            # Sample standard deviation is undefined for a single row
            scale = np.full(n_features, np.nan)
        else:
            scale = train.std(axis=0, ddof=1)
        return NormalizationParams(shift=train.mean(axis=0), scale=scale)

    return NormalizationParams(shift=np.zeros(n_features), scale=np.ones(n_features))


def _check_degenerate(params: NormalizationParams, policy_name: str):
    bad = params.degenerate_columns()
    if bad.size:
        raise DegenerateNormalizationError(
            DEGENERATE_COLUMNS_MSG.format(bad.tolist(), policy_name), columns=bad.tolist()
        )


def _forward(x: np.ndarray, params: NormalizationParams) -> np.ndarray:
    return (x - params.shift) / params.scale


def norm_train_data(train, policy: PolicyLike) -> Tuple[np.ndarray, np.ndarray]:
    """Normalise every column of training data.

    Args:
        train: training data, one sample per row
        policy: type of normalisation; one of ``minmax``, ``zscore``, ``none``

    Returns:
        Tuple of (normalized data, (2, n_features) parameter matrix)

    Raises:
        DegenerateNormalizationError: if a column has zero range or variance
    """
    policy = NormalizationPolicy.from_value(policy)
    train = convert_training_data(train)
    if train.shape[0] == 0:
        raise DimensionMismatchError("Cannot fit normalization on an empty dataset",
                                     expected="n_samples >= 1", actual=0)

    params = _fit_params(train, policy)

    if policy is NormalizationPolicy.NONE:
        x = train
    else:
        _check_degenerate(params, policy.value)
        x = _forward(train, params)

    logger.info(f"Fitted '{policy.value}' normalization on {train.shape[0]} samples, "
                f"{train.shape[1]} features")
    return x, params.as_array()


def apply_norm_params(x, params) -> np.ndarray:
    """Normalise every column of data with previously fitted parameters.

    Args:
        x: data with the same columns as the data the parameters were fitted on
        params: (2, n_features) matrix of shift (row 0) and scale (row 1)

    Returns:
        New array with ``(x[:, i] - params[0, i]) / params[1, i]`` per column
    """
    params = np.asarray(params, dtype=np.float64)
    x = convert_training_data(x)
    if params.ndim != 2 or params.shape != (2, x.shape[1]):
        raise DimensionMismatchError(
            PARAMS_SHAPE_MSG.format(x.shape[1], params.shape),
            expected=(2, x.shape[1]), actual=params.shape
        )

    norm_params = NormalizationParams.from_array(params)
    _check_degenerate(norm_params, "fitted")
    return _forward(x, norm_params)


class Normalizer:
    """Fit-once, apply-many column normalizer.

    Example:
        normalizer = Normalizer("zscore")
        train_norm = normalizer.fit_transform(train)
        test_norm = normalizer.transform(test)
    """

    def __init__(self, policy: PolicyLike = NormalizationPolicy.ZSCORE):
        self.policy = NormalizationPolicy.from_value(policy)
        self._params: Optional[NormalizationParams] = None

    @classmethod
    def from_config(cls, config) -> "Normalizer":
        """Create a normalizer with the ``som.normalization`` policy of a Config."""
        return cls(config.get('som.normalization', 'zscore'))

    @property
    def is_fitted(self) -> bool:
        return self._params is not None

    @property
    def params(self) -> np.ndarray:
        """Fitted (2, n_features) parameter matrix."""
        if self._params is None:
            raise ValueError("Normalizer must be fitted before accessing params")
        return self._params.as_array()

    def fit_transform(self, train) -> np.ndarray:
        """Fit parameters on training data and return it normalized."""
        x, params = norm_train_data(train, self.policy)
        self._params = NormalizationParams.from_array(params)
        return x

    def transform(self, x) -> np.ndarray:
        """Normalize new data with the fitted parameters."""
        if self._params is None:
            raise ValueError("Normalizer must be fitted before transform")
        if self.policy is NormalizationPolicy.NONE:
            return convert_training_data(x, expected_columns=self._params.n_features)
        return apply_norm_params(x, self._params.as_array())

    def __repr__(self) -> str:
        return f"Normalizer(policy={self.policy.value}, fitted={self.is_fitted})"
