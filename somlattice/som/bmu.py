"""Best matching unit search over a SOM codebook."""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from somlattice.infrastructure.logging import get_logger, log_operation
from .constants import (
    CODES_SHAPE_MSG, SAMPLE_SHAPE_MSG, COL_NUM_MSG, DEFAULT_BMU_CHUNK_SIZE
)
from .exceptions import DimensionMismatchError

logger = get_logger(__name__)


def _as_codes(codes) -> np.ndarray:
    codes = np.asarray(codes, dtype=np.float64)
    if codes.ndim != 2 or codes.shape[0] == 0:
        raise DimensionMismatchError(
            CODES_SHAPE_MSG.format(codes.shape), expected=(None, None), actual=codes.shape
        )
    return codes


def _sample_distances(codes: np.ndarray, sample) -> np.ndarray:
    sample = np.asarray(sample, dtype=np.float64)
    if sample.ndim != 1 or sample.shape[0] != codes.shape[1]:
        raise DimensionMismatchError(
            SAMPLE_SHAPE_MSG.format(codes.shape[1], sample.shape),
            expected=codes.shape[1], actual=sample.shape
        )
    return cdist(sample[np.newaxis, :], codes, metric='euclidean')[0]


def find_bmu(codes, sample) -> int:
    """Find the best matching unit for a sample.

    Ties resolve to the lowest neuron index.

    Args:
        codes: 2D-array of codebook vectors, one vector per row
        sample: one row of a dataset / training set

    Returns:
        Index of the codebook row closest to sample in Euclidean distance

    Raises:
        DimensionMismatchError: if sample length differs from the codebook width
    """
    distances = _sample_distances(_as_codes(codes), sample)
    return int(np.argmin(distances))


def find_bmu_distance(codes, sample) -> Tuple[int, float]:
    """Find the best matching unit and its distance to the sample."""
    distances = _sample_distances(_as_codes(codes), sample)
    bmu = int(np.argmin(distances))
    return bmu, float(distances[bmu])


def _bmu_chunk(codes: np.ndarray, chunk: np.ndarray) -> np.ndarray:
    """Winner index of every row in a chunk of samples."""
    return np.argmin(cdist(chunk, codes, metric='euclidean'), axis=1)


@log_operation("visual")
def visual(codes, x, chunk_size: Optional[int] = None, max_workers: int = 1) -> np.ndarray:
    """Return the index of the winner neuron for each sample in x (row-wise).

    Rows are processed independently in vectorized chunks. With
    ``max_workers > 1`` the chunks are evaluated on a thread pool; the
    result does not depend on chunking or worker count.

    Args:
        codes: codebook, one vector per neuron
        x: data with one sample per row
        chunk_size: samples per vectorized chunk
        max_workers: number of threads evaluating chunks

    Returns:
        int64 array of length n_samples with winner indices

    Raises:
        DimensionMismatchError: if x does not have as many columns as codes
    """
    codes = _as_codes(codes)
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 2 or x.shape[1] != codes.shape[1]:
        actual = x.shape[1] if x.ndim == 2 else x.shape
        raise DimensionMismatchError(
            COL_NUM_MSG.format("data", codes.shape[1], actual),
            expected=codes.shape[1], actual=actual
        )

    n_samples = x.shape[0]
    if n_samples == 0:
        return np.empty(0, dtype=np.int64)

    chunk_size = int(chunk_size or DEFAULT_BMU_CHUNK_SIZE)
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if max_workers < 1:
        raise ValueError(f"max_workers must be positive, got {max_workers}")

    chunks = [x[start:start + chunk_size] for start in range(0, n_samples, chunk_size)]
    logger.debug(f"Searching BMUs for {n_samples} samples in {len(chunks)} chunk(s) "
                 f"against {codes.shape[0]} neurons")

    if max_workers == 1 or len(chunks) == 1:
        results = [_bmu_chunk(codes, chunk) for chunk in chunks]
    else:
        # map() keeps chunk order
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(lambda chunk: _bmu_chunk(codes, chunk), chunks))

    return np.concatenate(results).astype(np.int64, copy=False)
