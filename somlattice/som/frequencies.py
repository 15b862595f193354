"""Per-neuron population and class frequency tables of a trained SOM."""

from typing import Hashable, List, Optional, Union

import numpy as np
import pandas as pd

from somlattice.infrastructure.logging import get_logger
from .bmu import visual
from .constants import (
    POPULATION_COLUMN, TABLE_COLUMNS, COL_NUM_MSG, LENGTH_MSG, WINNER_RANGE_MSG,
    RESERVED_LABEL_MSG, DUPLICATE_LABEL_MSG
)
from .conversion import convert_training_data
from .exceptions import DimensionMismatchError, NeuronIndexError, ClassLabelError
from .topology import SOMTopology

logger = get_logger(__name__)

TopologyLike = Union[SOMTopology, int]


def _as_winners(num_codes: int, vis) -> np.ndarray:
    vis = np.asarray(vis)
    if vis.ndim != 1:
        raise DimensionMismatchError(
            f"Winner indices must be a vector, got shape {vis.shape}", expected=1, actual=vis.ndim
        )
    if vis.size and not np.issubdtype(vis.dtype, np.integer):
        raise NeuronIndexError(f"Winner indices must be integers, got dtype {vis.dtype}")
    vis = vis.astype(np.int64, copy=False)

    out_of_range = vis[(vis < 0) | (vis >= num_codes)]
    if out_of_range.size:
        raise NeuronIndexError(WINNER_RANGE_MSG.format(num_codes, np.unique(out_of_range).tolist()))
    return vis


def _resolve_topology(topology: TopologyLike) -> SOMTopology:
    # A bare neuron count is laid out as a single row of neurons
    if isinstance(topology, SOMTopology):
        return topology
    return SOMTopology.rectangular(topology, 1)


def _label_columns(class_labels: np.ndarray) -> List[str]:
    """Column names of the class frequencies, one per sorted label."""
    names = [str(label) for label in class_labels]

    reserved = [name for name in names if name in TABLE_COLUMNS]
    if reserved:
        raise ClassLabelError(RESERVED_LABEL_MSG.format(reserved, list(TABLE_COLUMNS)), labels=reserved)

    if len(set(names)) != len(names):
        duplicated = sorted({name for name in names if names.count(name) > 1})
        raise ClassLabelError(DUPLICATE_LABEL_MSG.format(duplicated), labels=duplicated)
    return names


def make_population(num_codes: int, vis) -> np.ndarray:
    """Return a vector of neuron populations.

    Args:
        num_codes: total number of neurons
        vis: index of the winner neuron for each sample

    Returns:
        int64 array of length num_codes with the number of samples per neuron
    """
    vis = _as_winners(num_codes, vis)
    return np.bincount(vis, minlength=num_codes).astype(np.int64)


def make_class_freqs(topology: TopologyLike, vis, classes) -> pd.DataFrame:
    """Return a DataFrame with class frequencies for all neurons.

    Columns are ``index``, ``X``, ``Y``, ``Population`` and one column per
    class label in sorted label order. Frequencies of a populated neuron
    sum to 1; an empty neuron has all frequencies 0.0.

    Args:
        topology: lattice of the trained SOM, or the number of neurons
        vis: index of the winner neuron for each sample
        classes: class label of each sample

    Raises:
        DimensionMismatchError: if vis and classes differ in length
        NeuronIndexError: if a winner index is not a neuron of the lattice
        ClassLabelError: if a label is named like a table column
            (``index``, ``X``, ``Y``, ``Population``) or two labels share
            a column name
    """
    topology = _resolve_topology(topology)
    num_codes = topology.num_codes

    classes = np.asarray(classes)
    vis = _as_winners(num_codes, vis)
    if classes.ndim != 1 or classes.shape[0] != vis.shape[0]:
        raise DimensionMismatchError(
            LENGTH_MSG.format("class labels", vis.shape[0], classes.shape),
            expected=vis.shape[0], actual=classes.shape
        )

    class_labels, class_codes = np.unique(classes, return_inverse=True)
    class_codes = class_codes.reshape(-1)
    label_columns = _label_columns(class_labels)

    population = np.bincount(vis, minlength=num_codes)
    counts = np.zeros((num_codes, class_labels.shape[0]), dtype=np.float64)
    np.add.at(counts, (vis, class_codes), 1.0)

    freqs = np.divide(
        counts, population[:, np.newaxis],
        out=np.zeros_like(counts),
        where=population[:, np.newaxis] > 0
    )

    table = topology.indices()
    table[POPULATION_COLUMN] = population.astype(np.int64)
    freq_columns = pd.DataFrame(freqs, columns=label_columns)
    cfs = pd.concat([table, freq_columns], axis=1)

    logger.info(f"Class frequencies for {len(class_labels)} classes over {num_codes} neurons "
                f"({int(np.count_nonzero(population))} populated)")
    return cfs


def class_frequencies(codes, topology: TopologyLike, data, classes: Hashable,
                      chunk_size: Optional[int] = None, max_workers: int = 1) -> pd.DataFrame:
    """Return a DataFrame with class frequencies for all neurons.

    Data must have the same number of feature columns as the codebook
    plus one column with class labels, named by ``classes``.

    Args:
        codes: codebook of a trained SOM
        topology: lattice of the trained SOM, or the number of neurons
        data: DataFrame (or 2D array) with row-wise samples and class labels
        classes: name of the class column; an int selects a column position
            of an array or of a DataFrame without such a column name
        chunk_size: samples per vectorized BMU chunk
        max_workers: threads used for the BMU search

    Raises:
        DimensionMismatchError: if data does not have one column more than codes
    """
    codes = np.asarray(codes, dtype=np.float64)
    topology = _resolve_topology(topology)
    if codes.ndim != 2 or codes.shape[0] != topology.num_codes:
        raise DimensionMismatchError(
            f"Codebook shape {codes.shape} does not match {topology.num_codes} neurons of the lattice",
            expected=topology.num_codes, actual=codes.shape
        )
    if not isinstance(data, pd.DataFrame):
        data = pd.DataFrame(np.asarray(data, dtype=object))

    n_features = codes.shape[1]
    if data.shape[1] != n_features + 1:
        raise DimensionMismatchError(
            COL_NUM_MSG.format("data", f"{n_features} features + 1 class column",
                               f"{data.shape[1] - 1} features + 1 class column"),
            expected=n_features, actual=data.shape[1] - 1
        )

    if classes in data.columns:
        class_column = classes
    elif isinstance(classes, (int, np.integer)) and not isinstance(classes, bool):
        class_column = data.columns[classes]
    else:
        raise KeyError(f"Class column {classes!r} not found in data")

    x = convert_training_data(data.drop(columns=[class_column]), expected_columns=n_features)
    labels = data[class_column].to_numpy()

    vis = visual(codes, x, chunk_size=chunk_size, max_workers=max_workers)
    return make_class_freqs(topology, vis, labels)
