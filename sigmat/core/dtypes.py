"""Element types supported by :class:`~sigmat.core.matrix.Matrix`.

Any NumPy integer, floating or complex dtype may be used. Booleans, strings
and object arrays are rejected.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from sigmat.diagnostics import require_message

DEFAULT_DTYPE = np.dtype(np.float64)

DTypeLike = Any


def normalize_dtype(dtype: DTypeLike) -> np.dtype:
    """Validate and return ``dtype`` as a numpy dtype.

    Raises:
        ContractViolation: If the dtype is not an integer, float or complex type.
    """
    dt = DEFAULT_DTYPE if dtype is None else np.dtype(dtype)
    require_message(
        dt.kind in "iufc",
        f"unsupported element type {dt}; expected an integer, float or complex dtype",
    )
    return dt


def is_narrow_integer(dtype: np.dtype) -> bool:
    """Return True for 8-bit integer element types (int8 / uint8)."""
    return dtype.kind in "iu" and dtype.itemsize == 1


def is_complex(dtype: np.dtype) -> bool:
    return dtype.kind == "c"


def coerce_scalar(value: Any, dtype: np.dtype) -> Any:
    """Convert a Python/NumPy scalar to the element type ``dtype``.

    Integer targets wrap like a C cast; a complex value cannot be stored in a
    real element type.

    Raises:
        ContractViolation: If ``value`` is complex and ``dtype`` is real, or
            if ``value`` is not a number.
    """
    require_message(
        np.isscalar(value) or (isinstance(value, np.ndarray) and value.ndim == 0),
        f"expected a scalar, got {type(value).__name__}",
    )
    arr = np.asarray(value)
    require_message(
        arr.dtype.kind in "biufc",
        f"expected a numeric scalar, got {arr.dtype}",
    )
    require_message(
        not (arr.dtype.kind == "c" and dtype.kind != "c"),
        f"cannot store complex value {value!r} in element type {dtype}",
    )
    return cast_array(arr.reshape(1), dtype)[0]


def cast_array(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Cast an array to ``dtype`` with C-style semantics.

    Floats are truncated toward zero and integers wrap when the target is a
    narrower integer type. Complex to complex narrows component-wise; real
    to complex sets the imaginary part to zero.
    """
    if values.dtype == dtype:
        return values.copy()
    require_message(
        not (values.dtype.kind == "c" and dtype.kind != "c"),
        f"no conversion from {values.dtype} to {dtype}",
    )
    if dtype.kind in "iu" and values.dtype.kind == "f":
        values = np.trunc(values)
    if dtype.kind in "iu" and values.dtype.kind in "iuf":
        # Go through int64 so that narrowing wraps instead of saturating.
        with np.errstate(invalid="ignore", over="ignore"):
            return values.astype(np.int64).astype(dtype)
    return values.astype(dtype)
