"""Exception and warning types raised by sigmat."""

from __future__ import annotations


class ContractViolation(AssertionError):
    """A precondition of a matrix or signal operation was broken.

    Raised for programming errors such as out-of-range indices, invalid
    slice arguments or unsupported operand shapes. It is never raised for
    recoverable data-policy mismatches.
    """


class ShapeMismatchError(ValueError):
    """Operand shapes disagree and strict checking is enabled."""

    def __init__(self, operation: str, left_shape: tuple, right_shape: tuple) -> None:
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(
            f"{operation}: shape mismatch {left_shape} vs {right_shape}"
        )


class ParseError(ValueError):
    """A textual matrix literal could not be parsed."""


class ShapeMismatchWarning(UserWarning):
    """Operand shapes disagree; a fallback result was returned instead."""
