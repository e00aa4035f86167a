"""Owned contiguous element storage backing a Matrix."""

from __future__ import annotations

from typing import Any

import numpy as np

from sigmat.diagnostics import require_message

from .dtypes import DTypeLike, normalize_dtype


class ElementBuffer:
    """
    A contiguous, exclusively owned block of elements.

    The buffer wraps a 1-D NumPy array of a fixed dtype. It is never shared:
    :meth:`copy` duplicates the storage and :meth:`take` moves it, leaving the
    source deallocated.
    """

    __slots__ = ("_dtype", "_data")

    def __init__(self, dtype: DTypeLike = None, count: int = 0) -> None:
        self._dtype = normalize_dtype(dtype)
        self._data = np.zeros(0, dtype=self._dtype)
        if count:
            self.allocate(count)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def element_count(self) -> int:
        """Number of elements currently held."""
        return int(self._data.shape[0])

    @property
    def data(self) -> np.ndarray:
        """The raw storage array (read/write, length ``element_count``)."""
        return self._data

    def allocate(self, count: int) -> None:
        """Replace the storage with ``count`` zero-initialised elements."""
        require_message(count >= 0, f"cannot allocate {count} elements")
        self._data = np.zeros(int(count), dtype=self._dtype)

    def deallocate(self) -> None:
        """Release the storage; the element count becomes zero."""
        self._data = np.zeros(0, dtype=self._dtype)

    def assign(self, values: np.ndarray) -> None:
        """Adopt ``values`` (already of this dtype, 1-D) as the storage."""
        require_message(
            values.ndim == 1 and values.dtype == self._dtype,
            "buffer storage must be a 1-D array of the buffer dtype",
        )
        self._data = values

    def copy(self) -> "ElementBuffer":
        """Return a deep, independent copy of this buffer."""
        dup = ElementBuffer(self._dtype)
        dup._data = self._data.copy()
        return dup

    def take(self, other: "ElementBuffer") -> None:
        """Move ``other``'s storage into this buffer and deallocate ``other``."""
        self._dtype = other._dtype
        self._data = other._data
        other._data = np.zeros(0, dtype=other._dtype)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[index] = value

    def __len__(self) -> int:
        return self.element_count

    def __repr__(self) -> str:
        return f"ElementBuffer(count={self.element_count}, dtype={self._dtype})"
