"""Dense two-dimensional matrix type.

A :class:`Matrix` stores ``rows * cols`` elements of one NumPy dtype in an
:class:`~sigmat.core.buffer.ElementBuffer`, in column-major order: element
``(r, c)`` lives at linear index ``r + c * rows``. A matrix with a single row
or a single column (and more than one element) is a *vector*; a 1x1 matrix is
a *scalar*.

Every requested dimension below 2 is stored as exactly 1. The only
zero-extent state is the empty matrix (``rows == cols == 0``).

Copies are always deep. :meth:`Matrix.move` hands the storage to a new
instance and leaves the source empty.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, Optional, Tuple, Union

import numpy as np

from sigmat.diagnostics import require_message
from sigmat.logging import get_logger

from . import arithmetic, linalg
from .buffer import ElementBuffer
from .dtypes import DEFAULT_DTYPE, DTypeLike, cast_array, coerce_scalar, normalize_dtype

logger = get_logger(__name__)

Index = Union[int, Tuple[int, int]]


def _normalize_dim(value: Any, name: str) -> int:
    """Validate a requested extent; anything below 2 becomes 1."""
    try:
        n = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None
    require_message(n >= 0, f"{name} must be non-negative, got {n}")
    return 1 if n < 2 else n


class Matrix:
    """
    Dense column-major matrix of integer, float or complex elements.

    Construction
    ------------
    ``Matrix()``
        The empty matrix.
    ``Matrix(rows, cols)`` / ``Matrix(rows, cols, initial)``
        Zero-filled (or ``initial``-filled) matrix.
    ``Matrix((rows, cols))`` / ``Matrix((rows, cols), initial)``
        Same, from a shape tuple.
    ``Matrix(other)``
        Deep copy of another matrix.
    ``Matrix("[1 2; 3 4]")``
        Parsed from a textual literal (see :mod:`sigmat.io.grammar`). A
        malformed literal leaves the matrix empty, or raises
        :class:`~sigmat.errors.ParseError` in strict mode.

    All forms accept a keyword ``dtype`` (default ``float64``; copies keep
    the source dtype unless one is given).

    Examples
    --------
    >>> m = Matrix(2, 3, 1.5)
    >>> m.shape
    (2, 3)
    >>> m[1, 2] = 4.0
    >>> m[5]
    4.0
    """

    __slots__ = ("_rows", "_cols", "_buffer")
    __hash__ = None  # type: ignore[assignment]
    # NumPy scalars on the left defer to the reflected operators.
    __array_ufunc__ = None

    def __init__(
        self,
        rows: Any = None,
        cols: Any = None,
        initial: Any = None,
        *,
        dtype: DTypeLike = None,
    ) -> None:
        self._rows = 0
        self._cols = 0

        if isinstance(rows, Matrix):
            require_message(cols is None and initial is None, "copy construction takes a single matrix")
            source = rows if dtype is None else rows.astype(dtype)
            self._buffer = source._buffer.copy()
            self._rows, self._cols = source._rows, source._cols
            return

        self._buffer = ElementBuffer(dtype)

        if rows is None:
            require_message(cols is None and initial is None, "missing row count")
            return

        if isinstance(rows, str):
            require_message(cols is None and initial is None, "string construction takes a single literal")
            from sigmat.io.grammar import parse_literal_or_empty

            parse_literal_or_empty(self, rows)
            return

        if isinstance(rows, tuple):
            require_message(len(rows) == 2, f"shape must be a (rows, cols) tuple, got {rows!r}")
            require_message(initial is None, "shape construction takes at most one initial value")
            rows, cols, initial = rows[0], rows[1], cols

        require_message(cols is not None, "missing column count")
        self._allocate(rows, cols)
        if initial is not None:
            self.set_all(initial)

    # ------------------------------------------------------------------
    # Internal construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def _wrap(cls, rows: int, cols: int, data: np.ndarray) -> "Matrix":
        """Build a matrix around ``data`` (1-D, column-major, owned)."""
        m = cls.__new__(cls)
        m._rows = rows
        m._cols = cols
        m._buffer = ElementBuffer(data.dtype)
        m._buffer.assign(data)
        return m

    @classmethod
    def _from_grid(cls, grid: np.ndarray, dtype: Optional[np.dtype] = None) -> "Matrix":
        """Build a matrix from a 2-D array, copying it into column-major order."""
        rows, cols = grid.shape
        if rows == 0 or cols == 0:
            return cls(dtype=dtype if dtype is not None else grid.dtype)
        data = np.ravel(grid, order="F")
        if dtype is not None:
            data = cast_array(data, dtype)
        return cls._wrap(rows, cols, np.array(data, copy=True))

    def _reset(self, rows: int, cols: int, data: Optional[np.ndarray]) -> None:
        """Adopt new extents and storage; ``data=None`` makes the matrix empty."""
        if data is None or data.shape[0] == 0:
            self._rows = self._cols = 0
            self._buffer.deallocate()
            return
        self._rows, self._cols = rows, cols
        self._buffer.assign(data)

    def _allocate(self, rows: Any, cols: Any) -> None:
        self._rows = _normalize_dim(rows, "rows")
        self._cols = _normalize_dim(cols, "cols")
        self._buffer.allocate(self._rows * self._cols)

    def _grid(self) -> np.ndarray:
        """A (rows, cols) view onto the storage."""
        return self._buffer.data.reshape((self._rows, self._cols), order="F")

    @property
    def data(self) -> np.ndarray:
        """The raw column-major storage (length ``size``), shared, not copied."""
        return self._buffer.data

    # ------------------------------------------------------------------
    # NumPy interop
    # ------------------------------------------------------------------

    @classmethod
    def from_array(cls, array: Any, dtype: DTypeLike = None) -> "Matrix":
        """
        Build a matrix from an array-like.

        0-D input gives a scalar matrix, 1-D input a row vector and 2-D input
        keeps its shape. Arrays with a zero extent give the empty matrix.
        """
        arr = np.asarray(array)
        require_message(arr.ndim <= 2, f"expected at most 2 dimensions, got {arr.ndim}")
        if dtype is None:
            dtype = arr.dtype if arr.dtype.kind in "iufc" else DEFAULT_DTYPE
        dt = normalize_dtype(dtype)
        if arr.ndim == 0:
            arr = arr.reshape(1, 1)
        elif arr.ndim == 1:
            arr = arr.reshape(1, -1)
        if arr.dtype.kind not in "iufc":
            arr = arr.astype(dt)
        return cls._from_grid(arr, dt)

    def to_numpy(self) -> np.ndarray:
        """Return a (rows, cols) NumPy copy of the elements."""
        if self.is_empty:
            return np.zeros((0, 0), dtype=self.dtype)
        return self._grid().copy()

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        """Total number of elements (rows * cols)."""
        return self._buffer.element_count

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    @property
    def is_empty(self) -> bool:
        return self._buffer.element_count == 0

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    @property
    def is_vector(self) -> bool:
        """True if the matrix has exactly one row or one column, and more than one element."""
        return (self._rows == 1 and self._cols > 1) or (self._rows > 1 and self._cols == 1)

    @property
    def is_scalar(self) -> bool:
        return self._rows == 1 and self._cols == 1

    def resize(self, rows: int, cols: int) -> bool:
        """
        Reallocate to ``rows x cols``. Previous contents are discarded and
        the new elements are zero.

        Returns
        -------
        bool
            Always True.
        """
        self._allocate(rows, cols)
        return True

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _linear_index(self, key: Index) -> int:
        if isinstance(key, tuple):
            require_message(len(key) == 2, f"expected (row, col), got {key!r}")
            row, col = operator.index(key[0]), operator.index(key[1])
            require_message(
                0 <= row < self._rows and 0 <= col < self._cols,
                "one or more indices is/are out of range.",
            )
            return row + col * self._rows
        require_message(
            not isinstance(key, slice),
            "slices are not supported; use row(), col(), left(), right() or mid()",
        )
        index = operator.index(key)
        require_message(0 <= index < self.size, "the element index is out of range.")
        return index

    def __getitem__(self, key: Index) -> Any:
        return self._buffer[self._linear_index(key)]

    def __setitem__(self, key: Index, value: Any) -> None:
        self._buffer[self._linear_index(key)] = coerce_scalar(value, self.dtype)

    def get(self, row: int, col: Optional[int] = None) -> Any:
        """Return element ``(row, col)``, or the linear element ``row`` if ``col`` is None."""
        if col is None:
            return self[row]
        return self[row, col]

    def set_all(self, value: Any) -> None:
        """Set every element to ``value``."""
        self._buffer.data[:] = coerce_scalar(value, self.dtype)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements in storage (column-major) order."""
        return iter(self._buffer.data.copy())

    # ------------------------------------------------------------------
    # Rows and columns
    # ------------------------------------------------------------------

    def row(self, index: int) -> "Matrix":
        """
        Return row ``index`` as a new 1 x cols matrix.

        An out-of-range index is not an error: the result is an all-zero
        row of the right length.
        """
        out = Matrix(1, self._cols, dtype=self.dtype)
        if 0 <= index < self._rows:
            out._buffer.data[:] = self._grid()[index, :]
        else:
            logger.debug("row(%d) out of range for %s; returning zeros", index, self.shape)
        return out

    def col(self, index: int) -> "Matrix":
        """
        Return column ``index`` as a new rows x 1 matrix.

        An out-of-range index is not an error: the result is an all-zero
        column of the right length.
        """
        out = Matrix(self._rows, 1, dtype=self.dtype)
        if 0 <= index < self._cols:
            out._buffer.data[:] = self._grid()[:, index]
        else:
            logger.debug("col(%d) out of range for %s; returning zeros", index, self.shape)
        return out

    def set_row(self, index: int, source: "Matrix") -> bool:
        """
        Overwrite row ``index`` with the first ``cols`` elements of ``source``.

        Returns False (and changes nothing) if the index is out of range or
        ``source`` holds fewer than ``cols`` elements.
        """
        if not (0 <= index < self._rows) or source.size < self._cols:
            logger.debug("set_row(%d) rejected: target %s, source size %d", index, self.shape, source.size)
            return False
        self._grid()[index, :] = cast_array(source.data[: self._cols], self.dtype)
        return True

    def set_col(self, index: int, source: "Matrix") -> bool:
        """
        Overwrite column ``index`` with the first ``rows`` elements of ``source``.

        Returns False (and changes nothing) if the index is out of range or
        ``source`` holds fewer than ``rows`` elements.
        """
        if not (0 <= index < self._cols) or source.size < self._rows:
            logger.debug("set_col(%d) rejected: target %s, source size %d", index, self.shape, source.size)
            return False
        self._grid()[:, index] = cast_array(source.data[: self._rows], self.dtype)
        return True

    def swap_rows(self, row_a: int, row_b: int) -> None:
        require_message(
            0 <= row_a < self._rows and 0 <= row_b < self._rows,
            f"row indices ({row_a}, {row_b}) out of range for {self._rows} rows",
        )
        grid = self._grid()
        grid[[row_a, row_b], :] = grid[[row_b, row_a], :]

    def swap_cols(self, col_a: int, col_b: int) -> None:
        require_message(
            0 <= col_a < self._cols and 0 <= col_b < self._cols,
            f"column indices ({col_a}, {col_b}) out of range for {self._cols} columns",
        )
        grid = self._grid()
        grid[:, [col_a, col_b]] = grid[:, [col_b, col_a]]

    def shrink(self, row: int, col: int) -> "Matrix":
        """
        Return the minor obtained by deleting ``row`` and ``col``.

        A matrix with a single row or column is returned unchanged (as a
        copy).
        """
        if self._rows <= 1 or self._cols <= 1:
            return self.copy()
        require_message(
            0 <= row < self._rows and 0 <= col < self._cols,
            "the input arguments exceed matrix size.",
        )
        grid = np.delete(np.delete(self._grid(), row, axis=0), col, axis=1)
        return Matrix._from_grid(grid)

    # ------------------------------------------------------------------
    # Vector slicing
    # ------------------------------------------------------------------

    def _slice_like(self, data: np.ndarray) -> "Matrix":
        n = data.shape[0]
        if self._rows == 1 and self._cols > 1:
            return Matrix._wrap(1, n, data.copy())
        return Matrix._wrap(n, 1, data.copy())

    def _require_vector(self, name: str) -> None:
        require_message(
            self.is_vector or self.is_scalar,
            f"{name}() is not implemented for a {self._rows}x{self._cols} matrix",
        )

    def left(self, count: int) -> "Matrix":
        """Return the first ``count`` elements, keeping the vector orientation."""
        self._require_vector("left")
        require_message(1 <= count <= self.size, f"left({count}) out of range for {self.size} elements")
        return self._slice_like(self._buffer.data[:count])

    def right(self, count: int) -> "Matrix":
        """Return the last ``count`` elements, keeping the vector orientation."""
        self._require_vector("right")
        require_message(1 <= count <= self.size, f"right({count}) out of range for {self.size} elements")
        if count == self.size:
            return self.copy()
        return self._slice_like(self._buffer.data[self.size - count :])

    def mid(self, begin: int, end: int) -> "Matrix":
        """Return elements ``begin`` through ``end`` inclusive."""
        self._require_vector("mid")
        require_message(
            0 <= begin < end < self.size,
            f"mid({begin}, {end}) needs begin < end < {self.size}",
        )
        return self._slice_like(self._buffer.data[begin : end + 1])

    # ------------------------------------------------------------------
    # Copy, move, conversion
    # ------------------------------------------------------------------

    def copy(self) -> "Matrix":
        """Return a deep copy."""
        return Matrix(self)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return self.copy()

    def move(self) -> "Matrix":
        """
        Transfer the storage to a new matrix and leave this one empty.

        Returns
        -------
        Matrix
            The new owner of the elements.
        """
        target = Matrix(dtype=self.dtype)
        target._buffer.take(self._buffer)
        target._rows, target._cols = self._rows, self._cols
        self._rows = self._cols = 0
        return target

    def assign(self, source: "Matrix") -> "Matrix":
        """Replace this matrix's shape, dtype and contents with a deep copy of ``source``."""
        if source is not self:
            self._buffer = source._buffer.copy()
            self._rows, self._cols = source._rows, source._cols
        return self

    def parse(self, text: str) -> bool:
        """
        Re-shape and fill this matrix from a textual literal.

        Returns False and leaves the matrix untouched if the literal is
        malformed.
        """
        from sigmat.io.grammar import parse_into

        return parse_into(self, text)

    def astype(self, dtype: DTypeLike) -> "Matrix":
        """
        Return a converted copy with element type ``dtype``.

        Real to complex sets the imaginary parts to zero, complex to complex
        casts each component, integer targets truncate and wrap like a C
        cast. Complex to real is not defined.
        """
        dt = normalize_dtype(dtype)
        if self.is_empty:
            return Matrix(dtype=dt)
        return Matrix._wrap(self._rows, self._cols, cast_array(self._buffer.data, dt))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.equal(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return not arithmetic.equal(self, other)

    def __add__(self, other: Any) -> "Matrix":
        return arithmetic.add(self, other)

    def __radd__(self, other: Any) -> "Matrix":
        return arithmetic.add(other, self)

    def __sub__(self, other: Any) -> "Matrix":
        return arithmetic.sub(self, other)

    def __rsub__(self, other: Any) -> "Matrix":
        return arithmetic.sub(other, self)

    def __mul__(self, other: Any) -> "Matrix":
        return arithmetic.mul(self, other)

    def __rmul__(self, other: Any) -> "Matrix":
        return arithmetic.mul(other, self)

    def __truediv__(self, other: Any) -> "Matrix":
        return arithmetic.div(self, other)

    def __rtruediv__(self, other: Any) -> "Matrix":
        return arithmetic.div(other, self)

    def __iadd__(self, other: Any) -> "Matrix":
        return arithmetic.iadd(self, other)

    def __isub__(self, other: Any) -> "Matrix":
        return arithmetic.isub(self, other)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return linalg.matmul(self, other)

    @property
    def T(self) -> "Matrix":
        return linalg.transpose(self)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        """Printable literal with 6 significant digits; see :func:`~sigmat.io.format_matrix`."""
        from sigmat.io.grammar import format_matrix

        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(shape={self.shape}, dtype={self.dtype})"
