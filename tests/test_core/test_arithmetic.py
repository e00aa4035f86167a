"""Tests for element-wise arithmetic, equality and shape-mismatch handling."""

import numpy as np
import pytest

from sigmat import (
    ContractViolation,
    Matrix,
    ShapeMismatchError,
    ShapeMismatchWarning,
    strict_context,
)


@pytest.fixture
def a():
    return Matrix("[1 2 3; 4 5 6]")


@pytest.fixture
def b():
    return Matrix("[6 5 4; 3 2 1]")


def test_add_sub_mul_div(a, b):
    np.testing.assert_array_equal((a + b).to_numpy(), np.full((2, 3), 7.0))
    np.testing.assert_array_equal((a - b).to_numpy(), [[-5, -3, -1], [1, 3, 5]])
    np.testing.assert_array_equal((a * b).to_numpy(), [[6, 10, 12], [12, 10, 6]])
    np.testing.assert_allclose((a / b).to_numpy(), a.to_numpy() / b.to_numpy())


def test_identities(a):
    zero = Matrix(2, 3)
    one = Matrix(2, 3, 1.0)
    assert a + zero == a
    assert a - a == zero
    assert a * one == a
    assert a / one == a
    assert a + 0 == a
    assert a * 1 == a


@pytest.mark.parametrize("dtype", [np.float64, np.int32, np.int64])
def test_add_then_sub_restores_operand(rng, dtype):
    """(A + B) - B == A, with integer-valued data so float sums are exact."""
    a_np = rng.integers(-1000, 1000, size=(4, 5))
    b_np = rng.integers(-1000, 1000, size=(4, 5))
    a = Matrix.from_array(a_np, dtype=dtype)
    b = Matrix.from_array(b_np, dtype=dtype)
    assert (a + b) - b == a


def test_add_then_sub_random_reals(rng):
    a = Matrix.from_array(rng.standard_normal((3, 3)))
    b = Matrix.from_array(rng.standard_normal((3, 3)))
    np.testing.assert_allclose(((a + b) - b).to_numpy(), a.to_numpy(), atol=1e-12)


@pytest.mark.parametrize("dtype", [np.float64, np.float32, np.int16, np.int64])
def test_self_division_gives_ones(rng, dtype):
    """A / A is all ones when A has no zero element."""
    magnitudes = rng.integers(1, 100, size=(3, 4))
    signs = rng.choice([-1, 1], size=(3, 4))
    a = Matrix.from_array(magnitudes * signs, dtype=dtype)
    assert a / a == Matrix(3, 4, 1, dtype=dtype)

    if np.dtype(dtype).kind == "f":
        reals = Matrix.from_array(rng.uniform(0.1, 10.0, size=(3, 4)), dtype=dtype)
        assert reals / reals == Matrix(3, 4, 1, dtype=dtype)


def test_results_are_new_matrices(a, b):
    before = a.to_numpy()
    c = a + b
    assert c is not a
    np.testing.assert_array_equal(a.to_numpy(), before)


def test_scalar_on_either_side(a):
    np.testing.assert_array_equal((a + 1).to_numpy(), a.to_numpy() + 1)
    np.testing.assert_array_equal((1 + a).to_numpy(), a.to_numpy() + 1)
    np.testing.assert_array_equal((a * 2).to_numpy(), a.to_numpy() * 2)
    np.testing.assert_array_equal((2 * a).to_numpy(), a.to_numpy() * 2)


def test_numpy_scalar_on_the_left(a):
    """NumPy scalars (what indexing returns) dispatch to the reflected operators."""
    doubled = np.float64(2) * a
    assert isinstance(doubled, Matrix)
    assert doubled == a * 2

    shifted = a[0, 0] + a
    assert isinstance(shifted, Matrix)
    assert shifted.shape == (2, 3)
    np.testing.assert_array_equal(shifted.to_numpy(), a.to_numpy() + 1)

    flipped = np.int32(10) - a
    assert isinstance(flipped, Matrix)
    np.testing.assert_array_equal(flipped.to_numpy(), 10 - a.to_numpy())

    ints = Matrix("[2 4; 6 8]", dtype=np.int32)
    np.testing.assert_array_equal((np.int64(24) / ints).to_numpy(), [[12, 6], [4, 3]])


def test_scalar_subtraction_and_division_are_ordered(a):
    """M - s and s - M (likewise /) are different operations."""
    np.testing.assert_array_equal((a - 1).to_numpy(), a.to_numpy() - 1)
    np.testing.assert_array_equal((10 - a).to_numpy(), 10 - a.to_numpy())
    np.testing.assert_allclose((a / 2).to_numpy(), a.to_numpy() / 2)
    np.testing.assert_allclose((12 / a).to_numpy(), 12 / a.to_numpy())


def test_result_uses_matrix_dtype():
    ints = Matrix("[1 2 3]", dtype=np.int32)
    floats = Matrix("[0.5 0.5 0.5]")

    assert (ints + floats).dtype == np.int32
    np.testing.assert_array_equal(list(ints + floats), [1, 2, 3])
    assert (floats + ints).dtype == np.float64
    assert (ints + 1.9).dtype == np.int32
    np.testing.assert_array_equal(list(ints + 1.9), [2, 3, 4])


def test_integer_division_truncates_toward_zero():
    m = Matrix("[7 -7 7 -7]", dtype=np.int32)
    d = Matrix("[2 2 -2 -2]", dtype=np.int32)
    np.testing.assert_array_equal(list(m / d), [3, -3, -3, 3])
    np.testing.assert_array_equal(list(m / 3), [2, -2, 2, -2])
    np.testing.assert_array_equal(list(Matrix("[9 4]", dtype=np.uint16) / 2), [4, 2])


def test_integer_division_by_zero():
    m = Matrix("[1 2]", dtype=np.int64)
    with pytest.raises(ContractViolation, match="division by zero"):
        m / 0
    with pytest.raises(ContractViolation):
        m / Matrix("[1 0]", dtype=np.int64)


def test_float_division_by_zero_follows_ieee():
    m = Matrix("[1 -1 0]")
    result = (m / 0).to_numpy()
    assert np.isposinf(result[0, 0])
    assert np.isneginf(result[0, 1])
    assert np.isnan(result[0, 2])


def test_integer_overflow_wraps():
    m = Matrix(1, 1, 127, dtype=np.int8)
    assert (m + 1)[0] == -128


def test_complex_arithmetic():
    z = Matrix("[(1,2) (3,-1)]", dtype=np.complex128)
    np.testing.assert_array_equal(list(z * z), [(1 + 2j) ** 2, (3 - 1j) ** 2])
    np.testing.assert_array_equal(list(z + 1j), [1 + 3j, 3 + 0j])


def test_complex_scalar_into_real_matrix_rejected(a):
    with pytest.raises(ContractViolation):
        a + 1j


def test_shape_mismatch_gives_zero_result(a):
    other = Matrix(3, 2, 1.0)
    for op in (lambda: a + other, lambda: a - other, lambda: a * other, lambda: a / other):
        with pytest.warns(ShapeMismatchWarning):
            result = op()
        assert result.shape == a.shape
        assert all(v == 0 for v in result)


def test_shape_mismatch_raises_in_strict_mode(a):
    other = Matrix(3, 2, 1.0)
    with strict_context():
        with pytest.raises(ShapeMismatchError) as excinfo:
            a + other
    assert excinfo.value.left_shape == (2, 3)
    assert excinfo.value.right_shape == (3, 2)


def test_inplace_operators(a, b):
    original = a
    a += b
    assert a is original
    np.testing.assert_array_equal(a.to_numpy(), np.full((2, 3), 7.0))
    a -= 7
    assert a == Matrix(2, 3)


def test_inplace_mismatch_is_noop(a):
    before = a.to_numpy()
    with pytest.warns(ShapeMismatchWarning):
        a += Matrix(1, 5, 1.0)
    with pytest.warns(ShapeMismatchWarning):
        a -= Matrix(1, 5, 1.0)
    np.testing.assert_array_equal(a.to_numpy(), before)


def test_equality():
    assert Matrix("[1 2; 3 4]") == Matrix("[1 2; 3 4]")
    assert Matrix("[1 2; 3 4]") != Matrix("[1 2; 3 5]")
    assert Matrix() == Matrix()


def test_equality_requires_same_shape():
    """Same storage, different shapes: not equal."""
    row = Matrix("[1 2 3 4]")
    square = Matrix("[1 3; 2 4]")
    assert list(row) == list(square)
    assert row != square


def test_equality_with_other_types(a):
    assert a != "not a matrix"
    assert not (a == 1)


def test_matrix_is_unhashable(a):
    with pytest.raises(TypeError):
        hash(a)
