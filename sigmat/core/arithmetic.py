"""Element-wise arithmetic and comparison for Matrix.

Matrix-matrix operations need identical shapes. On a mismatch they do not
fail: the result is a zero-filled matrix shaped like the left operand (and
``+=`` / ``-=`` leave the left operand unchanged). Each such fallback emits a
:class:`~sigmat.errors.ShapeMismatchWarning`; under strict mode it raises
:class:`~sigmat.errors.ShapeMismatchError` instead.

Results always carry the element type of the matrix operand (the left one
when both are matrices); the other operand is converted to it first, so
integer results wrap and integer division truncates toward zero, as in C.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from sigmat.diagnostics import report_shape_mismatch, require_message

from . import matrix as _matrix
from .dtypes import cast_array, coerce_scalar

BinaryKernel = Callable[[np.ndarray, np.ndarray, np.dtype], np.ndarray]


def _is_matrix(obj: Any) -> bool:
    return isinstance(obj, _matrix.Matrix)


def _add(a: np.ndarray, b: np.ndarray, dtype: np.dtype) -> np.ndarray:
    return np.add(a, b, dtype=dtype)


def _sub(a: np.ndarray, b: np.ndarray, dtype: np.dtype) -> np.ndarray:
    return np.subtract(a, b, dtype=dtype)


def _mul(a: np.ndarray, b: np.ndarray, dtype: np.dtype) -> np.ndarray:
    return np.multiply(a, b, dtype=dtype)


def _div(a: np.ndarray, b: np.ndarray, dtype: np.dtype) -> np.ndarray:
    if dtype.kind not in "iu":
        return np.true_divide(a, b, dtype=dtype)

    require_message(not np.any(b == 0), "integer division by zero")
    if dtype.kind == "u":
        return np.floor_divide(a, b, dtype=dtype)
    # Truncate toward zero: floor division rounds toward -inf.
    wide_a = a.astype(np.int64)
    wide_b = b.astype(np.int64)
    quotient = np.floor_divide(wide_a, wide_b)
    inexact = (quotient * wide_b != wide_a) & ((wide_a < 0) != (wide_b < 0))
    quotient = quotient + inexact
    return cast_array(quotient, dtype)


_KERNELS = {"add": _add, "sub": _sub, "mul": _mul, "div": _div}


def check_same_shape(left: "_matrix.Matrix", right: "_matrix.Matrix") -> bool:
    """Return True if two matrices have identical shapes."""
    return left.shape == right.shape


def _zeros_like(m: "_matrix.Matrix") -> "_matrix.Matrix":
    if m.is_empty:
        return _matrix.Matrix(dtype=m.dtype)
    return _matrix.Matrix._wrap(m.rows, m.cols, np.zeros(m.size, dtype=m.dtype))


def _apply(name: str, left: Any, right: Any) -> "_matrix.Matrix":
    kernel = _KERNELS[name]

    if _is_matrix(left) and _is_matrix(right):
        if not check_same_shape(left, right):
            report_shape_mismatch(name, left.shape, right.shape, fallback="a zero-filled result")
            return _zeros_like(left)
        dtype = left.dtype
        a, b = left.data, cast_array(right.data, dtype)
        target = left
    elif _is_matrix(left):
        dtype = left.dtype
        a, b = left.data, np.full(left.size, coerce_scalar(right, dtype), dtype=dtype)
        target = left
    elif _is_matrix(right):
        dtype = right.dtype
        a, b = np.full(right.size, coerce_scalar(left, dtype), dtype=dtype), right.data
        target = right
    else:
        raise TypeError("at least one operand must be a Matrix")

    if target.is_empty:
        return _matrix.Matrix(dtype=dtype)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        data = kernel(a, b, dtype)
    return _matrix.Matrix._wrap(target.rows, target.cols, np.ascontiguousarray(data))


def add(left: Any, right: Any) -> "_matrix.Matrix":
    """Element-wise ``left + right``; either operand may be a scalar."""
    return _apply("add", left, right)


def sub(left: Any, right: Any) -> "_matrix.Matrix":
    """Element-wise ``left - right``; ``scalar - M`` and ``M - scalar`` are distinct."""
    return _apply("sub", left, right)


def mul(left: Any, right: Any) -> "_matrix.Matrix":
    """Element-wise (Hadamard) product; use ``@`` for the matrix product."""
    return _apply("mul", left, right)


def div(left: Any, right: Any) -> "_matrix.Matrix":
    """Element-wise ``left / right``; integer types truncate toward zero."""
    return _apply("div", left, right)


def _apply_inplace(name: str, left: "_matrix.Matrix", right: Any) -> "_matrix.Matrix":
    dtype = left.dtype
    if _is_matrix(right):
        if not check_same_shape(left, right):
            report_shape_mismatch(name, left.shape, right.shape, fallback="the left operand unchanged")
            return left
        b = cast_array(right.data, dtype)
    else:
        b = np.full(left.size, coerce_scalar(right, dtype), dtype=dtype)

    if left.is_empty:
        return left
    with np.errstate(over="ignore", invalid="ignore"):
        left.data[:] = _KERNELS[name](left.data, b, dtype)
    return left


def iadd(left: "_matrix.Matrix", right: Any) -> "_matrix.Matrix":
    """In-place ``left += right``; a shape mismatch leaves ``left`` unchanged."""
    return _apply_inplace("add", left, right)


def isub(left: "_matrix.Matrix", right: Any) -> "_matrix.Matrix":
    """In-place ``left -= right``; a shape mismatch leaves ``left`` unchanged."""
    return _apply_inplace("sub", left, right)


def equal(left: "_matrix.Matrix", right: "_matrix.Matrix") -> bool:
    """
    Return True if both matrices have the same shape and equal elements.

    Differently shaped matrices are never equal, even if their storage
    happens to hold the same values.
    """
    if not check_same_shape(left, right):
        return False
    return bool(np.array_equal(left.data, right.data))
