"""SOM-specific exceptions for precondition failures."""

from typing import Any, Optional, Sequence


class SOMError(Exception):
    """Base SOM core error."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class DimensionMismatchError(SOMError, ValueError):
    """Raised when array dimensions disagree with the codebook or parameters."""
    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DegenerateNormalizationError(SOMError, ZeroDivisionError):
    """Raised when a feature column has zero range or variance."""
    def __init__(self, message: str, columns: Sequence[int] = ()):
        super().__init__(message)
        self.columns = list(columns)


class InvalidTopologyError(SOMError, ValueError):
    """Raised for non-positive or non-integer grid dimensions."""
    pass


class NonNumericDataError(SOMError, TypeError):
    """Raised when data cannot be represented as a finite float matrix."""
    pass


class NeuronIndexError(SOMError, IndexError):
    """Raised when a winner index does not name a neuron of the lattice."""
    pass


class ClassLabelError(SOMError, ValueError):
    """Raised when class labels cannot name distinct frequency table columns."""
    def __init__(self, message: str, labels: Sequence[str] = ()):
        super().__init__(message)
        self.labels = list(labels)
