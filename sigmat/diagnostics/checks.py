"""Precondition checks and soft-mismatch reporting."""

from __future__ import annotations

import warnings
from typing import Optional, Tuple

from sigmat.errors import ContractViolation, ShapeMismatchError, ShapeMismatchWarning
from sigmat.logging import get_logger

from .strict_mode import is_strict_enabled

logger = get_logger(__name__)


def require(condition: bool) -> None:
    """
    Raise ContractViolation if ``condition`` is false.

    Parameters
    ----------
    condition:
        The precondition being checked.

    Raises
    ------
    ContractViolation
        If the precondition does not hold.
    """
    if not condition:
        raise ContractViolation("precondition failed")


def require_message(condition: bool, message: str) -> None:
    """
    Raise ContractViolation carrying ``message`` if ``condition`` is false.

    Parameters
    ----------
    condition:
        The precondition being checked.
    message:
        Human-readable description of the violated contract.

    Raises
    ------
    ContractViolation
        If the precondition does not hold.
    """
    if not condition:
        raise ContractViolation(message)


def report_shape_mismatch(
    operation: str,
    left_shape: Tuple[int, int],
    right_shape: Tuple[int, int],
    fallback: Optional[str] = None,
) -> None:
    """
    Report that a soft operation received operands of different shapes.

    In strict mode this raises; otherwise it logs and emits a
    ShapeMismatchWarning, and the caller returns its fallback value.

    Parameters
    ----------
    operation:
        Name of the operation, e.g. ``"add"``.
    left_shape, right_shape:
        Shapes of the two operands.
    fallback:
        Short description of the value returned instead.

    Raises
    ------
    ShapeMismatchError
        If strict mode is enabled.
    """
    if is_strict_enabled():
        raise ShapeMismatchError(operation, left_shape, right_shape)

    detail = f"; returning {fallback}" if fallback else ""
    message = f"{operation}: shape mismatch {left_shape} vs {right_shape}{detail}"
    logger.debug(message)
    warnings.warn(message, ShapeMismatchWarning, stacklevel=3)
