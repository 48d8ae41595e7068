# numdiff/core/__init__.py
# Comparison core: tokenizer, value comparator, ANSI utility, line
# comparator and file comparison driver.

from numdiff.core import ansi
from numdiff.core.exceptions import (
    ColumnCountMismatchError,
    FailureKind,
    FileOpenError,
    LineCountMismatchError,
    NumdiffError,
    OptionsError,
)
from numdiff.core.options import ComparisonOptions, ComparisonResult, LineOutcome
from numdiff.core.text_parser import is_comment, is_numeric, tokenize
from numdiff.core.value_comparator import BIG_PERCENTAGE, percentage_difference
from numdiff.core.logging_layer import EventFilter, RunEvent, RunLog
from numdiff.core.line_comparator import LineComparator
from numdiff.core.driver import NumericDiff

__all__ = [
    # Exceptions
    "NumdiffError",
    "FileOpenError",
    "ColumnCountMismatchError",
    "LineCountMismatchError",
    "OptionsError",
    "FailureKind",
    # Configuration / results
    "ComparisonOptions",
    "ComparisonResult",
    "LineOutcome",
    # Tokenizer
    "tokenize",
    "is_comment",
    "is_numeric",
    # Value comparator
    "BIG_PERCENTAGE",
    "percentage_difference",
    # ANSI utility
    "ansi",
    # Run log
    "RunLog",
    "RunEvent",
    "EventFilter",
    # Comparison
    "LineComparator",
    "NumericDiff",
]
