"""Direct-form difference-equation filtering.

Implements

    y[n] = b[0]*x[n] + b[1]*x[n-1] + ... + b[nb]*x[n-nb]
                     - a[1]*y[n-1] - ... - a[na]*y[n-na]

with zero history (samples before the start are zero). ``a[0]`` is taken to
be 1 and is never read: normalise the coefficients before calling.

Integer signals accumulate into the integer output type one tap at a time,
truncating after every multiply-add, so ``filter([0.5, 0.5], [1], [1, 1])``
on int32 data gives ``[0, 0]`` rather than the rounded sum.
"""

from typing import Any

import numpy as np

from sigmat.core.dtypes import cast_array
from sigmat.core.matrix import Matrix
from sigmat.diagnostics import require_message
from sigmat.logging import get_logger

from .utils import as_matrix, check_not_empty, flat_values, is_column_vector, is_row_vector

logger = get_logger(__name__)


def _work_dtype(*dtypes: np.dtype) -> np.dtype:
    work = np.result_type(*dtypes)
    if work.kind in "iu":
        return np.dtype(np.int64)
    return work


def _truncating_recursion(
    b: np.ndarray, a: np.ndarray, x: np.ndarray, length: int, dtype: np.dtype
) -> np.ndarray:
    """Integer recursion that truncates to ``dtype`` after every tap."""
    padded = np.zeros(length, dtype=dtype)
    padded[: x.shape[0]] = x

    y = np.zeros(length, dtype=dtype)
    # Feed-forward taps only read the input, so each one runs over all samples.
    for k, coef in enumerate(b[:length]):
        shifted = np.zeros(length, dtype=dtype)
        shifted[k:] = padded[: length - k]
        with np.errstate(over="ignore", invalid="ignore"):
            y = cast_array(y + shifted * coef, dtype)

    feedback = a[1:]
    if feedback.size == 0:
        return y
    for n in range(1, length):
        acc = y[n]
        for k, coef in enumerate(feedback[:n], start=1):
            with np.errstate(over="ignore", invalid="ignore"):
                acc = cast_array(np.asarray([acc - y[n - k] * coef]), dtype)[0]
        y[n] = acc
    return y


def _difference_equation(
    b: np.ndarray, a: np.ndarray, x: np.ndarray, length: int, dtype: np.dtype
) -> np.ndarray:
    """Run the recursion on one 1-D signal, producing ``length`` samples."""
    if dtype.kind in "iu":
        return _truncating_recursion(b, a, x, length, dtype)

    work = _work_dtype(b.dtype, a.dtype, x.dtype)

    padded = np.zeros(length, dtype=work)
    padded[: x.shape[0]] = x
    # Feed-forward part is a plain truncated convolution.
    forward = np.convolve(padded, b.astype(work))[:length]

    feedback = a[1:].astype(work)
    if feedback.size == 0:
        return cast_array(forward, dtype)

    y = np.zeros(length, dtype=dtype)
    for n in range(length):
        k = min(feedback.size, n)
        acc = forward[n]
        if k:
            acc = acc - np.dot(feedback[:k], y[n - 1 :: -1][:k])
        y[n] = cast_array(np.asarray([acc]), dtype)[0]
    return y


def filter(b: Any, a: Any, x: Any, extra_length: int = 0) -> Matrix:
    """Filter ``x`` with numerator ``b`` and denominator ``a``.

    The output has ``extra_length`` more samples than the input; the input
    is zero-padded to produce them, which gives the full convolution tail
    when ``extra_length = len(b) - 1``.

    A general matrix is filtered column by column. A column vector or a
    row vector is filtered along its single dimension and keeps its
    orientation. A 1x1 input is treated as a length-1 column.

    Args:
        b: Moving-average (numerator) coefficients, read in linear order.
        a: Autoregressive (denominator) coefficients; ``a[0]`` is ignored.
        x: Input data (Matrix or array-like).
        extra_length: Number of zero-input samples appended to the output.

    Returns:
        Filtered matrix with the element type of ``x``.

    Raises:
        ContractViolation: If an operand is empty, ``extra_length`` is
            negative, or complex coefficients are applied to real data.
    """
    b = as_matrix(b)
    a = as_matrix(a)
    x = as_matrix(x)

    check_not_empty(b, "b")
    check_not_empty(a, "a")
    check_not_empty(x, "x")
    require_message(extra_length >= 0, f"extra_length must be >= 0, got {extra_length}")
    require_message(
        x.dtype.kind == "c" or (b.dtype.kind != "c" and a.dtype.kind != "c"),
        "complex coefficients need complex input data",
    )

    b_coef = flat_values(b)
    a_coef = flat_values(a)
    if a_coef[0] != 1:
        logger.warning("filter: a[0] = %s is not 1 and is ignored; divide it out first", a_coef[0])

    grid = x.to_numpy()

    if is_row_vector(x):
        length = x.cols + extra_length
        y = _difference_equation(b_coef, a_coef, grid[0, :], length, x.dtype)
        return Matrix.from_array(y.reshape(1, length), dtype=x.dtype)

    length = x.rows + extra_length
    if is_column_vector(x) or x.is_scalar:
        y = _difference_equation(b_coef, a_coef, grid[:, 0], length, x.dtype)
        return Matrix.from_array(y.reshape(length, 1), dtype=x.dtype)

    out = np.zeros((length, x.cols), dtype=x.dtype)
    for col in range(x.cols):
        out[:, col] = _difference_equation(b_coef, a_coef, grid[:, col], length, x.dtype)
    logger.debug("filter: %d columns of %d samples", x.cols, length)
    return Matrix.from_array(out, dtype=x.dtype)


lfilter = filter
