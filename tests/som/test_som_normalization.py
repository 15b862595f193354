"""Tests for column normalization policies."""

import numpy as np
import pandas as pd
import pytest

from somlattice.abstractions.types import NormalizationPolicy, NormalizationParams
from somlattice.som import (
    norm_train_data, apply_norm_params, Normalizer,
    DegenerateNormalizationError, DimensionMismatchError, NonNumericDataError
)


class TestNormTrainData:
    """Test fitting and applying normalization in one step."""

    def test_zscore_moments(self, sample_data):
        """Columns have mean 0 and sample standard deviation 1."""
        x, params = norm_train_data(sample_data, 'zscore')
        assert np.allclose(x.mean(axis=0), 0.0, atol=1e-10)
        assert np.allclose(x.std(axis=0, ddof=1), 1.0)
        assert params.shape == (2, 5)
        assert np.allclose(params[0], sample_data.mean(axis=0))
        assert np.allclose(params[1], sample_data.std(axis=0, ddof=1))

    def test_minmax_bounds(self, sample_data):
        x, params = norm_train_data(sample_data, 'minmax')
        assert np.allclose(x.min(axis=0), 0.0)
        assert np.allclose(x.max(axis=0), 1.0)
        assert np.allclose(params[0], sample_data.min(axis=0))
        assert np.allclose(params[1], sample_data.max(axis=0) - sample_data.min(axis=0))

    def test_none_returns_input(self, sample_data):
        """The 'none' policy passes float data through untouched."""
        x, params = norm_train_data(sample_data, 'none')
        assert x is sample_data
        assert np.array_equal(params, np.vstack([np.zeros(5), np.ones(5)]))

    def test_none_converts_frames(self):
        frame = pd.DataFrame({'a': [1, 2], 'b': [3, 4]})
        x, _ = norm_train_data(frame, 'none')
        assert isinstance(x, np.ndarray)
        assert np.array_equal(x, [[1.0, 3.0], [2.0, 4.0]])

    def test_does_not_modify_input(self, sample_data):
        original = sample_data.copy()
        norm_train_data(sample_data, 'zscore')
        assert np.array_equal(sample_data, original)

    def test_enum_policy(self, sample_data):
        x_enum, _ = norm_train_data(sample_data, NormalizationPolicy.MINMAX)
        x_str, _ = norm_train_data(sample_data, 'MinMax')
        assert np.allclose(x_enum, x_str)

    def test_unknown_policy(self, sample_data):
        with pytest.raises(ValueError):
            norm_train_data(sample_data, 'robust')

    @pytest.mark.parametrize("policy", ['minmax', 'zscore'])
    def test_constant_column(self, policy):
        """A column with zero range or variance is reported, not divided by."""
        data = np.array([[1.0, 2.0], [1.0, 3.0], [1.0, 4.0]])
        with pytest.raises(DegenerateNormalizationError) as exc_info:
            norm_train_data(data, policy)
        assert exc_info.value.columns == [0]

    def test_constant_column_allowed_without_normalization(self):
        data = np.array([[1.0, 2.0], [1.0, 3.0]])
        x, _ = norm_train_data(data, 'none')
        assert np.array_equal(x, data)

    def test_zscore_single_row(self):
        with pytest.raises(DegenerateNormalizationError):
            norm_train_data(np.array([[1.0, 2.0]]), 'zscore')

    def test_empty_dataset(self):
        with pytest.raises(DimensionMismatchError):
            norm_train_data(np.empty((0, 3)), 'minmax')

    def test_non_numeric(self):
        with pytest.raises(NonNumericDataError):
            norm_train_data([[1.0, 'x'], [2.0, 'y']], 'zscore')


class TestApplyNormParams:
    """Test re-applying fitted parameters to new data."""

    def test_reproduces_training_transform(self, sample_data):
        for policy in ('minmax', 'zscore', 'none'):
            x, params = norm_train_data(sample_data, policy)
            assert np.allclose(apply_norm_params(sample_data, params), x)

    def test_any_number_of_rows(self, sample_data):
        _, params = norm_train_data(sample_data, 'zscore')
        single = apply_norm_params(sample_data[:1], params)
        assert single.shape == (1, 5)
        assert np.allclose(single, (sample_data[:1] - params[0]) / params[1])

    def test_returns_new_array(self, sample_data):
        _, params = norm_train_data(sample_data, 'none')
        assert apply_norm_params(sample_data, params) is not sample_data

    def test_parameter_shape_mismatch(self, sample_data):
        with pytest.raises(DimensionMismatchError):
            apply_norm_params(sample_data, np.ones((2, 4)))
        with pytest.raises(DimensionMismatchError):
            apply_norm_params(sample_data, np.ones(5))

    def test_zero_scale(self):
        params = np.array([[0.0, 0.0], [1.0, 0.0]])
        with pytest.raises(DegenerateNormalizationError):
            apply_norm_params(np.ones((3, 2)), params)


class TestNormalizer:
    """Test the fit-once, apply-many normalizer."""

    def test_fit_then_transform(self, sample_data):
        normalizer = Normalizer('minmax')
        train = normalizer.fit_transform(sample_data[:150])
        test = normalizer.transform(sample_data[150:])

        assert normalizer.is_fitted
        assert np.allclose(train.min(axis=0), 0.0)
        expected = (sample_data[150:] - normalizer.params[0]) / normalizer.params[1]
        assert np.allclose(test, expected)

    def test_unfitted(self, sample_data):
        normalizer = Normalizer()
        assert not normalizer.is_fitted
        with pytest.raises(ValueError):
            normalizer.transform(sample_data)
        with pytest.raises(ValueError):
            _ = normalizer.params

    def test_none_policy_checks_columns(self, sample_data):
        normalizer = Normalizer('none')
        normalizer.fit_transform(sample_data)
        assert normalizer.transform(sample_data) is sample_data
        with pytest.raises(DimensionMismatchError):
            normalizer.transform(sample_data[:, :3])

    def test_from_config(self, config):
        normalizer = Normalizer.from_config(config)
        assert normalizer.policy is NormalizationPolicy.ZSCORE

    def test_repr(self):
        assert repr(Normalizer('none')) == "Normalizer(policy=none, fitted=False)"


class TestNormalizationParams:
    """Test the shift/scale parameter container."""

    def test_array_layout(self):
        params = NormalizationParams(shift=np.array([1.0, 2.0]), scale=np.array([3.0, 4.0]))
        assert params.n_features == 2
        assert np.array_equal(params.as_array(), [[1.0, 2.0], [3.0, 4.0]])

    def test_degenerate_columns(self):
        params = NormalizationParams.from_array([[0.0, 0.0, 0.0], [1.0, 0.0, np.inf]])
        assert params.degenerate_columns().tolist() == [1, 2]
