"""Linear convolution and convolution matrices."""

from typing import Any

import numpy as np

from sigmat.core.matrix import Matrix
from sigmat.diagnostics import require_message
from sigmat.errors import ContractViolation

from .filters import filter as _filter
from .utils import as_matrix, check_factor, check_not_empty, flat_values


def _unit_impulse(dtype: np.dtype) -> Matrix:
    return Matrix(1, 1, 1, dtype=dtype)


def conv(p: Any, q: Any) -> Matrix:
    """Full linear convolution of ``p`` and ``q``.

    If either operand is 1x1 the result is the other operand scaled by it.
    Otherwise a vector operand is used as FIR coefficients (``q`` is tried
    first, then ``p``) and the other operand is filtered with
    ``extra_length = len(coefficients) - 1``, giving ``len(p) + len(q) - 1``
    samples in the orientation of the filtered operand. A general matrix
    operand is convolved column by column.

    Args:
        p: First operand (Matrix or array-like).
        q: Second operand (Matrix or array-like).

    Returns:
        The convolution, with the element type of the filtered operand.

    Raises:
        ContractViolation: If both operands are non-vector matrices, or if
            either is empty.

    Example:
        >>> conv([1, 2, 3], [1, 1]).to_numpy()
        array([[1, 3, 5, 3]])
    """
    p = as_matrix(p)
    q = as_matrix(q)
    check_not_empty(p, "p")
    check_not_empty(q, "q")

    if q.is_scalar:
        return p * q[0]
    if p.is_scalar:
        return q * p[0]

    if q.is_vector:
        return _filter(q, _unit_impulse(q.dtype), p, q.size - 1)
    if p.is_vector:
        return _filter(p, _unit_impulse(p.dtype), q, p.size - 1)

    raise ContractViolation(
        f"convolution of two {p.rows}x{p.cols} and {q.rows}x{q.cols} matrices is not supported"
    )


def convmtx(h: Any, length: int) -> Matrix:
    """Convolution matrix of the impulse response ``h``.

    For a column vector ``h`` of length m the result is the
    ``(m + length - 1) x length`` banded matrix whose column j is ``h``
    shifted down by j, so ``convmtx(h, n) @ x == conv(h, x)`` for a column
    ``x`` of length n. For a row vector ``h`` it is the
    ``length x (m + length - 1)`` transpose layout, with
    ``x @ convmtx(h, n) == conv(h, x)`` for a row ``x``.

    Args:
        h: Impulse response (row or column vector).
        length: Length of the signals the matrix will be applied to (>= 1).

    Returns:
        The convolution matrix, with the element type of ``h``.

    Raises:
        ContractViolation: If ``h`` is not a vector or ``length`` < 1.
    """
    h = as_matrix(h)
    require_message(h.is_vector, "the input argument is not a vector")
    length = check_factor(length, "length")

    values = flat_values(h)
    m = values.shape[0]
    band = np.zeros((m + length - 1, length), dtype=h.dtype)
    for shift in range(length):
        band[shift : shift + m, shift] = values

    if h.rows == 1:
        band = band.T
    return Matrix.from_array(band, dtype=h.dtype)
