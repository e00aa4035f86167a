"""Text I/O for matrix literals."""

from .grammar import format_matrix, parse_into, parse_matrix, read_matrix, tokenize, write_matrix

__all__ = [
    "parse_matrix",
    "parse_into",
    "tokenize",
    "format_matrix",
    "read_matrix",
    "write_matrix",
]
