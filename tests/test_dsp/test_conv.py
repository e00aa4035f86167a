"""Tests for dsp.conv module."""

import numpy as np
import pytest

from sigmat import ContractViolation, Matrix
from sigmat.dsp import conv, convmtx


def test_conv_row_vectors():
    y = conv([1, 2, 3], [1, 1])
    assert y.shape == (1, 4)
    np.testing.assert_array_equal(y.to_numpy(), [[1, 3, 5, 3]])


def test_conv_matches_numpy(rng):
    p = rng.standard_normal(7)
    q = rng.standard_normal(4)
    y = conv(Matrix.from_array(p), Matrix.from_array(q))
    assert y.size == p.size + q.size - 1
    np.testing.assert_allclose(list(y), np.convolve(p, q), atol=1e-12)


def test_conv_is_commutative_in_values(rng):
    p = Matrix.from_array(rng.standard_normal(5))
    q = Matrix.from_array(rng.standard_normal(3))
    np.testing.assert_allclose(list(conv(p, q)), list(conv(q, p)), atol=1e-12)


def test_conv_with_scalar_scales():
    x = Matrix("[1 2; 3 4]")
    np.testing.assert_array_equal(conv(x, Matrix("[2]")).to_numpy(), [[2, 4], [6, 8]])
    np.testing.assert_array_equal(conv(3.0, Matrix("[1 2 3]")).to_numpy(), [[3, 6, 9]])


def test_conv_orientation_follows_filtered_operand():
    """When q is a vector, p is filtered and keeps its orientation."""
    col = Matrix("[1; 2; 3]")
    row = Matrix("[1 1]")
    y = conv(col, row)
    assert y.shape == (4, 1)
    np.testing.assert_array_equal(y.to_numpy().ravel(), [1, 3, 5, 3])


def test_conv_matrix_with_vector_is_per_column():
    x = Matrix("[1 0; 2 1; 3 0]")
    y = conv(x, Matrix("[1 -1]"))
    assert y.shape == (4, 2)
    np.testing.assert_array_equal(y.to_numpy()[:, 0], np.convolve([1, 2, 3], [1, -1]))
    np.testing.assert_array_equal(y.to_numpy()[:, 1], np.convolve([0, 1, 0], [1, -1]))

    # p vector, q matrix: q is the filtered operand.
    z = conv(Matrix("[1 -1]"), x)
    assert z == y


def test_conv_of_two_matrices_rejected():
    with pytest.raises(ContractViolation):
        conv(Matrix(2, 2, 1.0), Matrix(3, 3, 1.0))


def test_conv_empty_rejected():
    with pytest.raises(ContractViolation):
        conv(Matrix(), Matrix("[1 2]"))


def test_convmtx_column(rng):
    """convmtx(h, n) @ x equals conv(h, x) for a column x of length n."""
    h = Matrix.from_array(rng.standard_normal((3, 1)))
    x = Matrix.from_array(rng.standard_normal((5, 1)))

    c = convmtx(h, 5)
    assert c.shape == (7, 5)
    np.testing.assert_allclose((c @ x).to_numpy(), conv(h, x).to_numpy(), atol=1e-12)


def test_convmtx_row(rng):
    """For a row h, x @ convmtx(h, n) equals conv(h, x) for a row x."""
    h = Matrix.from_array(rng.standard_normal(4))
    x = Matrix.from_array(rng.standard_normal(6))

    c = convmtx(h, 6)
    assert c.shape == (6, 9)
    np.testing.assert_allclose((x @ c).to_numpy(), conv(h, x).to_numpy(), atol=1e-12)


def test_convmtx_structure():
    c = convmtx(Matrix("[1; 2]"), 3)
    expected = [
        [1, 0, 0],
        [2, 1, 0],
        [0, 2, 1],
        [0, 0, 2],
    ]
    np.testing.assert_array_equal(c.to_numpy(), expected)
    assert convmtx(Matrix("[1 2]"), 3) == c.T


def test_convmtx_rejects_non_vector():
    with pytest.raises(ContractViolation, match="not a vector"):
        convmtx(Matrix(2, 2), 3)
    with pytest.raises(ContractViolation):
        convmtx(Matrix("[1 2]"), 0)
