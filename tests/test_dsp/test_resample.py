"""Tests for dsp.resample module."""

import numpy as np
import pytest

from sigmat import ContractViolation, Matrix
from sigmat.dsp import downsample, upsample


def test_upsample_column():
    y = upsample(Matrix("[1; 2; 3]"), 3)
    assert y.shape == (9, 1)
    np.testing.assert_array_equal(y.to_numpy().ravel(), [1, 0, 0, 2, 0, 0, 3, 0, 0])


def test_upsample_row_vector_adds_rows():
    """A row vector holds one-sample columns, so new rows are added below it."""
    y = upsample(Matrix("[1 2 3]"), 2)
    assert y.shape == (2, 3)
    np.testing.assert_array_equal(y.to_numpy(), [[1, 2, 3], [0, 0, 0]])

    assert upsample([1, 2], 3).shape == (3, 2)


def test_upsample_matrix_per_column():
    x = Matrix("[1 4; 2 5]")
    y = upsample(x, 2)
    assert y.shape == (4, 2)
    np.testing.assert_array_equal(y.to_numpy(), [[1, 4], [0, 0], [2, 5], [0, 0]])


def test_downsample():
    x = Matrix("[1; 2; 3; 4; 5; 6; 7]")
    y = downsample(x, 3)
    assert y.shape == (2, 1)
    np.testing.assert_array_equal(y.to_numpy().ravel(), [1, 4])

    wide = downsample(Matrix("[1 2; 3 4; 5 6; 7 8]"), 2)
    np.testing.assert_array_equal(wide.to_numpy(), [[1, 2], [5, 6]])


def test_downsample_inverts_upsample(rng):
    x = Matrix.from_array(rng.standard_normal((5, 2)))
    for factor in (1, 2, 4):
        assert downsample(upsample(x, factor), factor) == x


def test_factor_one_is_identity():
    x = Matrix("[1 2; 3 4]")
    assert upsample(x, 1) == x
    assert downsample(x, 1) == x


def test_dtype_preserved():
    x = Matrix("[1; 2; 3]", dtype=np.int16)
    assert upsample(x, 2).dtype == np.int16
    assert downsample(x, 2).dtype == np.int16


@pytest.mark.parametrize("factor", [0, -2, 1.5, True])
def test_invalid_factor(factor):
    with pytest.raises(ContractViolation):
        upsample(Matrix("[1 2]"), factor)
    with pytest.raises(ContractViolation):
        downsample(Matrix("[1 2]"), factor)


def test_downsample_to_nothing_rejected():
    with pytest.raises(ContractViolation):
        downsample(Matrix("[1; 2]"), 3)


def test_downsample_row_vector_rejected():
    """A single row cannot lose samples."""
    with pytest.raises(ContractViolation):
        downsample(Matrix("[1 2 3 4]"), 2)
    assert downsample(Matrix("[1 2 3 4]"), 1) == Matrix("[1 2 3 4]")


def test_upsample_then_downsample_row_vector():
    x = Matrix("[4 5 6]")
    assert downsample(upsample(x, 3), 3) == x


def test_empty_input_rejected():
    with pytest.raises(ContractViolation):
        upsample(Matrix(), 2)
