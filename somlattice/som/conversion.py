"""Conversion of training data to float matrices."""

from typing import Optional
import logging

import numpy as np
import pandas as pd

from .constants import COL_NUM_MSG, NON_NUMERIC_MSG, NON_FINITE_MSG
from .exceptions import DimensionMismatchError, NonNumericDataError

logger = logging.getLogger(__name__)


def convert_training_data(data, expected_columns: Optional[int] = None) -> np.ndarray:
    """Convert training data to a 2D float64 array.

    A float64 ndarray is returned as-is; DataFrames and other array-likes
    are converted once here.

    Args:
        data: DataFrame, ndarray or nested sequence with one sample per row
        expected_columns: required number of columns, if known

    Returns:
        Array of shape (n_samples, n_features)

    Raises:
        NonNumericDataError: if a value is not numeric, NaN or infinite
        DimensionMismatchError: if the data is not 2D or has the wrong
            number of columns
    """
    try:
        if isinstance(data, pd.DataFrame):
            train = data.to_numpy(dtype=np.float64)
        else:
            train = np.asarray(data, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise NonNumericDataError(NON_NUMERIC_MSG.format(e), original_exception=e) from e

    if train.ndim != 2:
        raise DimensionMismatchError(
            f"Training data must be 2-dimensional (n_samples, n_features), got shape {train.shape}",
            expected=2, actual=train.ndim
        )

    if expected_columns is not None and train.shape[1] != expected_columns:
        raise DimensionMismatchError(
            COL_NUM_MSG.format("training data", expected_columns, train.shape[1]),
            expected=expected_columns, actual=train.shape[1]
        )

    n_invalid = int(np.count_nonzero(~np.isfinite(train)))
    if n_invalid:
        raise NonNumericDataError(NON_FINITE_MSG.format(n_invalid))

    logger.debug(f"Converted training data to float64 matrix {train.shape}")
    return train
