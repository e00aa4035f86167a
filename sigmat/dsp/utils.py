"""Helpers shared by the signal-processing functions."""

from typing import Any

import numpy as np

from sigmat.core.dtypes import DTypeLike
from sigmat.core.matrix import Matrix
from sigmat.diagnostics import require_message


def as_matrix(value: Any, dtype: DTypeLike = None) -> Matrix:
    """Return ``value`` as a Matrix.

    Matrices are passed through unchanged (converted if ``dtype`` differs).
    Array-likes go through :meth:`Matrix.from_array`, so a flat sequence such
    as ``[1, 0, 0]`` becomes a row vector.

    Args:
        value: Matrix or array-like.
        dtype: Optional element type.

    Returns:
        A Matrix (not necessarily a copy).
    """
    if isinstance(value, Matrix):
        if dtype is not None and np.dtype(dtype) != value.dtype:
            return value.astype(dtype)
        return value
    return Matrix.from_array(value, dtype=dtype)


def is_row_vector(m: Matrix) -> bool:
    return m.rows == 1 and m.cols > 1


def is_column_vector(m: Matrix) -> bool:
    return m.cols == 1 and m.rows > 1


def flat_values(m: Matrix) -> np.ndarray:
    """Elements of ``m`` in linear (column-major) order as a 1-D array."""
    return m.to_numpy().ravel(order="F")


def check_not_empty(m: Matrix, name: str) -> None:
    require_message(not m.is_empty, f"{name} must not be empty")


def check_factor(value: Any, name: str) -> int:
    """Validate a positive integer rate such as an up/down-sampling factor."""
    require_message(
        isinstance(value, (int, np.integer)) and not isinstance(value, bool),
        f"{name} must be an integer, got {type(value).__name__}",
    )
    require_message(value >= 1, f"{name} must be >= 1, got {value}")
    return int(value)
