"""Toeplitz matrix construction."""

from typing import Any, Optional

import numpy as np

from sigmat.core.matrix import Matrix
from sigmat.diagnostics import require_message
from sigmat.logging import get_logger

from .utils import as_matrix, check_not_empty, flat_values

logger = get_logger(__name__)


def toeplitz(col: Any, row: Optional[Any] = None) -> Matrix:
    """Build a Toeplitz matrix with entries ``col[|j - i|]``.

    With only ``col`` (length n) the result is the symmetric n x n Toeplitz
    matrix. With ``row`` as well, the result is ``len(col) x len(row)`` and
    still takes every entry from ``col``; ``row`` only sets the width. The
    asymmetric form (upper triangle from ``row``) is not provided.

    Args:
        col: Generating vector (first column).
        row: Optional vector whose length sets the number of columns.

    Returns:
        The Toeplitz matrix, with the element type of ``col``.

    Raises:
        ContractViolation: If ``col`` is empty or ``row`` is longer than
            ``col``.
    """
    col = as_matrix(col)
    check_not_empty(col, "col")
    values = flat_values(col)
    n_rows = values.shape[0]

    if row is None:
        n_cols = n_rows
    else:
        row = as_matrix(row)
        check_not_empty(row, "row")
        n_cols = row.size
        require_message(
            n_cols <= n_rows,
            f"toeplitz: row length {n_cols} exceeds column length {n_rows}",
        )
        logger.debug("toeplitz: row argument only sets the width (%d)", n_cols)

    i = np.arange(n_rows).reshape(-1, 1)
    j = np.arange(n_cols).reshape(1, -1)
    return Matrix.from_array(values[np.abs(j - i)], dtype=col.dtype)
