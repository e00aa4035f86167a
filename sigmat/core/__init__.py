"""Core container: element buffer, Matrix, arithmetic and linear-algebra helpers."""

from .matrix import Matrix
from .arithmetic import add, check_same_shape, div, equal, iadd, isub, mul, sub
from .buffer import ElementBuffer
from .dtypes import DEFAULT_DTYPE, cast_array, coerce_scalar, normalize_dtype
from .linalg import matmul, transpose

__all__ = [
    "Matrix",
    "ElementBuffer",
    "DEFAULT_DTYPE",
    "normalize_dtype",
    "coerce_scalar",
    "cast_array",
    "add",
    "sub",
    "mul",
    "div",
    "iadd",
    "isub",
    "equal",
    "check_same_shape",
    "matmul",
    "transpose",
]
