"""Integer-factor up- and down-sampling.

Both functions work along the rows of a matrix: each column is a separate
signal. A row vector is therefore a set of one-sample signals; upsampling it
by u gives a u x N matrix with the samples in row 0.
"""

from typing import Any

import numpy as np

from sigmat.core.matrix import Matrix
from sigmat.diagnostics import require_message

from .utils import as_matrix, check_factor, check_not_empty


def upsample(x: Any, factor: int) -> Matrix:
    """Insert ``factor - 1`` zero rows after every row.

    Sample ``r`` of each column lands on row ``r * factor``; the rows in
    between are zero.

    Args:
        x: Input matrix or array-like.
        factor: Upsampling rate (>= 1).

    Returns:
        Matrix with ``factor * rows(x)`` rows and the same columns.
    """
    x = as_matrix(x)
    factor = check_factor(factor, "factor")
    check_not_empty(x, "x")

    out = np.zeros((factor * x.rows, x.cols), dtype=x.dtype)
    out[::factor, :] = x.to_numpy()
    return Matrix.from_array(out, dtype=x.dtype)


def downsample(x: Any, factor: int) -> Matrix:
    """Keep every ``factor``-th row, starting with the first.

    Args:
        x: Input matrix or array-like.
        factor: Downsampling rate (>= 1).

    Returns:
        Matrix with ``rows(x) // factor`` rows and the same columns.

    Raises:
        ContractViolation: If the result would have no rows, which includes
            any row vector with ``factor > 1``.
    """
    x = as_matrix(x)
    factor = check_factor(factor, "factor")
    check_not_empty(x, "x")

    kept = x.rows // factor
    require_message(kept >= 1, f"downsampling {x.rows} rows by {factor} leaves nothing")
    out = x.to_numpy()[: kept * factor : factor, :]
    return Matrix.from_array(out, dtype=x.dtype)
