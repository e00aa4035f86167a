"""Strict-checking mode for sigmat.

By default, soft data-policy mismatches (element-wise arithmetic on matrices
of different shapes, malformed matrix literals in constructors) return a
documented fallback value and emit a :class:`~sigmat.errors.ShapeMismatchWarning`.
With strict mode on they raise instead.

The initial state comes from the ``SIGMAT_STRICT`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_STRICT_ENV_VAR = "SIGMAT_STRICT"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str) -> bool:
    """Read a boolean switch such as ``SIGMAT_STRICT=yes`` from the environment."""
    return os.getenv(name, "").strip().lower() in _TRUTHY


_strict_enabled: bool = _env_flag(_STRICT_ENV_VAR)


def is_strict_enabled() -> bool:
    """Return whether soft mismatches currently raise."""
    return _strict_enabled


def set_strict_enabled(enabled: bool) -> bool:
    """
    Globally enable or disable strict checking.

    Parameters
    ----------
    enabled:
        Whether soft mismatches should raise.

    Returns
    -------
    bool
        The previous setting, so callers can restore it.
    """
    global _strict_enabled
    previous, _strict_enabled = _strict_enabled, bool(enabled)
    return previous


@contextmanager
def strict_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with strict checking switched on (or off).

    Example
    -------
    >>> with strict_context():
    ...     a + b  # raises ShapeMismatchError if shapes differ
    """
    previous = set_strict_enabled(enabled)
    try:
        yield
    finally:
        set_strict_enabled(previous)
