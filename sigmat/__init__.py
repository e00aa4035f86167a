"""sigmat - a NumPy-backed dense matrix type with signal-processing routines."""

__version__ = "0.1.0"

# Core container
from .core import (
    ElementBuffer,
    Matrix,
    add,
    check_same_shape,
    div,
    equal,
    matmul,
    mul,
    sub,
    transpose,
)

# Contract checks and strict mode
from .diagnostics import (
    is_strict_enabled,
    require,
    require_message,
    set_strict_enabled,
    strict_context,
)

# Signal processing
from .dsp import conv, convmtx, downsample, filter, lfilter, toeplitz, upsample
from .errors import ContractViolation, ParseError, ShapeMismatchError, ShapeMismatchWarning

# Text literals
from .io import format_matrix, parse_into, parse_matrix, read_matrix, write_matrix
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Core
    "Matrix",
    "ElementBuffer",
    "add",
    "sub",
    "mul",
    "div",
    "equal",
    "check_same_shape",
    "matmul",
    "transpose",
    # Errors
    "ContractViolation",
    "ShapeMismatchError",
    "ShapeMismatchWarning",
    "ParseError",
    # Diagnostics
    "require",
    "require_message",
    "is_strict_enabled",
    "set_strict_enabled",
    "strict_context",
    # Text I/O
    "parse_matrix",
    "parse_into",
    "format_matrix",
    "read_matrix",
    "write_matrix",
    # Signal processing
    "upsample",
    "downsample",
    "filter",
    "lfilter",
    "conv",
    "convmtx",
    "toeplitz",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
