# numdiff/__init__.py
# Numeric-aware line diff for whitespace-delimited tables.
#
# Canonical import:
#   from numdiff import ComparisonOptions, NumericDiff

from numdiff.version import NUMDIFF_VERSION
from numdiff.core import (
    ColumnCountMismatchError,
    ComparisonOptions,
    ComparisonResult,
    FailureKind,
    FileOpenError,
    LineCountMismatchError,
    NumdiffError,
    NumericDiff,
    OptionsError,
)

__version__ = NUMDIFF_VERSION

__all__ = [
    "NUMDIFF_VERSION",
    "ComparisonOptions",
    "ComparisonResult",
    "NumericDiff",
    "NumdiffError",
    "FileOpenError",
    "ColumnCountMismatchError",
    "LineCountMismatchError",
    "OptionsError",
    "FailureKind",
]
