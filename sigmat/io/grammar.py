"""Textual matrix literals.

Grammar
-------
A literal is an optional ``[ ... ]`` wrapper around rows separated by ``;``
or line breaks; each row is a list of whitespace-separated scalar tokens::

    [1 2 3; 4 5 6]
    [1 2 3
     4 5 6]

Every row must hold the same number of tokens. A token that does not read as
the target element type becomes 0 instead of failing the parse. Integer types
take the leading integer prefix (``"2.5"`` reads as 2), complex types accept
``(re,im)``, ``(re)`` or a bare real.

8-bit integer types (int8/uint8) read each token as a single character and
subtract 0x30, so ``"7"`` is 7 but ``"12"`` is 1. This keeps existing text
corpora readable; write such data one digit per token.

The printed form wraps the matrix in ``[`` ``]``, separates columns with one
space and rows with a newline followed by a space.
"""

from __future__ import annotations

import re
from typing import Any, Callable, List, Optional, TextIO

import numpy as np

from sigmat.core.dtypes import DTypeLike, cast_array, is_complex, is_narrow_integer, normalize_dtype
from sigmat.core.matrix import Matrix
from sigmat.diagnostics import is_strict_enabled
from sigmat.errors import ParseError
from sigmat.logging import get_logger

logger = get_logger(__name__)

NARROW_INTEGER_OFFSET = 0x30

_REAL = r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)"
_INT_PREFIX = re.compile(r"[+-]?\d+")
_REAL_PREFIX = re.compile(_REAL, re.IGNORECASE)
_COMPLEX_PAREN = re.compile(
    rf"\(\s*({_REAL})\s*(?:,\s*({_REAL})\s*)?\)", re.IGNORECASE
)


def _preprocess(text: str) -> str:
    """Strip brackets, turn line breaks into ``;`` and normalise spacing."""
    s = text.strip()
    if s.startswith("["):
        s = s[1:]
    if s.endswith("]"):
        s = s[:-1]
    s = s.replace("\r\n", "\n").replace("\r", "\n").replace("\n", ";")
    s = re.sub(r"[ \t\f\v]+", " ", s)
    s = re.sub(r" *; *", ";", s)
    s = re.sub(r";{2,}", ";", s)
    return s.strip(" ;")


def tokenize(text: str) -> Optional[List[List[str]]]:
    """
    Split a literal into rows of tokens.

    Returns
    -------
    list of list of str or None
        The token grid (empty for an empty literal), or None if the rows do
        not all have the same number of tokens.
    """
    body = _preprocess(text)
    if not body:
        return []
    rows = [row.split(" ") for row in body.split(";")]
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        return None
    return rows


def _read_narrow_integer(token: str) -> int:
    return ord(token[0]) - NARROW_INTEGER_OFFSET if token else 0


def _integer_reader(dtype: np.dtype) -> Callable[[str], int]:
    info = np.iinfo(dtype)

    def read(token: str) -> int:
        match = _INT_PREFIX.match(token)
        if match is None:
            return 0
        value = int(match.group(0))
        # A value the element type cannot hold does not read at all.
        return value if info.min <= value <= info.max else 0

    return read


def _read_real(token: str) -> float:
    match = _REAL_PREFIX.match(token)
    return float(match.group(0)) if match else 0.0


def _read_complex(token: str) -> complex:
    match = _COMPLEX_PAREN.match(token)
    if match:
        real = float(match.group(1))
        imag = float(match.group(2)) if match.group(2) else 0.0
        return complex(real, imag)
    return complex(_read_real(token), 0.0)


def _token_reader(dtype: np.dtype) -> Callable[[str], Any]:
    if is_narrow_integer(dtype):
        return _read_narrow_integer
    if dtype.kind in "iu":
        return _integer_reader(dtype)
    if is_complex(dtype):
        return _read_complex
    return _read_real


def _work_dtype(dtype: np.dtype) -> np.dtype:
    if dtype.kind in "iu":
        return np.dtype(np.int64) if dtype.kind == "i" or dtype.itemsize < 8 else dtype
    if is_complex(dtype):
        return np.dtype(np.complex128)
    return np.dtype(np.float64)


def parse_into(matrix: Matrix, text: str) -> bool:
    """
    Re-shape and fill ``matrix`` from a textual literal.

    Parameters
    ----------
    matrix:
        Target matrix; its element type decides how tokens are read.
    text:
        The literal.

    Returns
    -------
    bool
        True on success (an empty literal makes the matrix empty). False if
        the rows have different lengths, in which case ``matrix`` is left
        unchanged.
    """
    rows = tokenize(text)
    if rows is None:
        logger.debug("matrix literal has rows of different lengths: %r", text)
        return False
    if not rows:
        matrix._reset(0, 0, None)
        return True

    read = _token_reader(matrix.dtype)
    grid = np.array([[read(token) for token in row] for row in rows], dtype=_work_dtype(matrix.dtype))
    data = cast_array(np.ravel(grid, order="F"), matrix.dtype)
    matrix._reset(grid.shape[0], grid.shape[1], np.ascontiguousarray(data))
    return True


def parse_matrix(text: str, dtype: DTypeLike = None) -> Matrix:
    """
    Parse a literal into a new matrix.

    Raises
    ------
    ParseError
        If the rows have different lengths.
    """
    matrix = Matrix(dtype=normalize_dtype(dtype))
    if not parse_into(matrix, text):
        raise ParseError(f"rows of different lengths in matrix literal {text!r}")
    return matrix


def parse_literal_or_empty(matrix: Matrix, text: str) -> None:
    """Constructor helper: parse, or leave ``matrix`` empty on failure."""
    if parse_into(matrix, text):
        return
    if is_strict_enabled():
        raise ParseError(f"rows of different lengths in matrix literal {text!r}")
    logger.warning("could not parse matrix literal %r; matrix left empty", text)


def _format_real(value: float, precision: int) -> str:
    return f"{value:.{precision}g}"


def _element_formatter(dtype: np.dtype, precision: int) -> Callable[[Any], str]:
    if dtype.kind in "iu":
        return lambda v: str(int(v))
    if is_complex(dtype):
        return lambda v: f"({_format_real(float(v.real), precision)},{_format_real(float(v.imag), precision)})"
    return lambda v: _format_real(float(v), precision)


def format_matrix(matrix: Matrix, precision: int = 6) -> str:
    """
    Render ``matrix`` in the printable literal form.

    Parameters
    ----------
    matrix:
        Matrix to render.
    precision:
        Significant digits for float and complex elements. The default of 6
        loses precision: parsing the text back is exact only for values with
        at most 6 significant digits. Use 17 for a lossless float64 round trip.

    Returns
    -------
    str
        e.g. ``"[1 2\\n 3 4]"``; the empty matrix renders as ``"[]"``.
    """
    if matrix.is_empty:
        return "[]"
    fmt = _element_formatter(matrix.dtype, precision)
    grid = matrix.to_numpy()
    lines = [" ".join(fmt(v) for v in row) for row in grid]
    return "[" + "\n ".join(lines) + "]"


def read_matrix(stream: TextIO, dtype: DTypeLike = None) -> Matrix:
    """Read the remainder of a text stream as one matrix literal."""
    return parse_matrix(stream.read(), dtype=dtype)


def write_matrix(stream: TextIO, matrix: Matrix, precision: int = 6) -> None:
    """Write the printable form of ``matrix`` to a text stream.

    Like :func:`format_matrix`, the default precision is lossy for floats.
    """
    stream.write(format_matrix(matrix, precision=precision))
