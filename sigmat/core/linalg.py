"""Matrix product and transpose.

These work on the column-major storage directly instead of going through
element accessors.
"""

from __future__ import annotations

import numpy as np

from sigmat.diagnostics import require_message

from . import matrix as _matrix
from .dtypes import cast_array


def matmul(left: "_matrix.Matrix", right: "_matrix.Matrix") -> "_matrix.Matrix":
    """
    Matrix product ``left @ right``.

    The result has the element type of ``left``.

    Raises
    ------
    ContractViolation
        If either operand is empty or the inner dimensions differ.
    """
    require_message(not left.is_empty and not right.is_empty, "matmul of an empty matrix")
    require_message(
        left.cols == right.rows,
        f"matmul: inner dimensions differ ({left.rows}x{left.cols} @ {right.rows}x{right.cols})",
    )
    dtype = left.dtype
    a = left.data.reshape(left.shape, order="F")
    b = cast_array(right.data, dtype).reshape(right.shape, order="F")
    product = np.matmul(a, b).astype(dtype, copy=False)
    return _matrix.Matrix._from_grid(product)


def transpose(m: "_matrix.Matrix") -> "_matrix.Matrix":
    """Return the transpose of ``m`` (the empty matrix stays empty)."""
    if m.is_empty:
        return _matrix.Matrix(dtype=m.dtype)
    return _matrix.Matrix._from_grid(m.data.reshape(m.shape, order="F").T)
