# numdiff/cli/__init__.py
# Command-line layer: argument parsing, option validation, summary text.
#
# ENTRY POINT:
#   diff-numerics [options] file1 file2

from .run_diff import main, parse_columns, parse_options, validate_options

__all__ = [
    "main",
    "parse_columns",
    "parse_options",
    "validate_options",
]
