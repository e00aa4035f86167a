"""Contract checks and strict-mode configuration for sigmat."""

from .checks import report_shape_mismatch, require, require_message
from .strict_mode import is_strict_enabled, set_strict_enabled, strict_context

__all__ = [
    "require",
    "require_message",
    "report_shape_mismatch",
    "is_strict_enabled",
    "set_strict_enabled",
    "strict_context",
]
