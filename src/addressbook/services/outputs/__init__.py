"""Text rendering for addresses and validation reports."""

from .formatter import (
    format_address,
    format_error_list,
    format_line_detail,
    format_validation_failure,
    str_or,
    write_lines,
)

__all__ = [
    "format_address",
    "format_error_list",
    "format_line_detail",
    "format_validation_failure",
    "str_or",
    "write_lines",
]
