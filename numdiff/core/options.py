# numdiff/core/options.py
# Frozen configuration and result types for a comparison run.
#
# ComparisonOptions is read-only to the core. Range validation is the CLI
# layer's responsibility (numdiff.cli.run_diff.validate_options); nothing in
# this module re-validates tolerance, threshold or width bounds.
#
# Standard import pattern:
#   from numdiff.core.options import ComparisonOptions, ComparisonResult

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


# ---------------------------------------------------------------------------
# DEFAULTS
# ---------------------------------------------------------------------------

DEFAULT_TOLERANCE:      float = 1e-2    # percent
DEFAULT_THRESHOLD:      float = 1e-6    # absolute near-zero cut-off
DEFAULT_COMMENT_PREFIX: str   = "#"
DEFAULT_LINE_LENGTH:    int   = 60      # visible chars per side-by-side panel


@dataclass(frozen=True)
class ComparisonOptions:
    """
    Configuration of one comparison run.

    Fields
    ------
    tolerance             : Relative percentage difference (0-100 scale) below
                            which two numeric values are equal.
    threshold             : Absolute magnitude below which a value is treated
                            as effectively zero.
    comment_prefix        : Lines whose first non-blank text starts with this
                            prefix are skipped. Empty string disables skipping.
    side_by_side          : Render aligned side-by-side panels.
    suppress_common_lines : In side-by-side mode, omit lines without a difference.
    only_equal            : Accumulate statistics only; render nothing.
    quiet                 : Summary-only reporting in the CLI layer.
    color_diff_digits     : Highlight only the differing digits of a number.
    line_length           : Max visible characters per side-by-side panel.
    columns_to_compare    : 1-based column indices to compare; empty means all.
    file1, file2          : Input paths.
    """
    tolerance:             float = DEFAULT_TOLERANCE
    threshold:             float = DEFAULT_THRESHOLD
    comment_prefix:        str   = DEFAULT_COMMENT_PREFIX
    side_by_side:          bool  = False
    suppress_common_lines: bool  = False
    only_equal:            bool  = False
    quiet:                 bool  = False
    color_diff_digits:     bool  = False
    line_length:           int   = DEFAULT_LINE_LENGTH
    columns_to_compare:    FrozenSet[int] = field(default_factory=frozenset)
    file1:                 str   = ""
    file2:                 str   = ""

    def __post_init__(self) -> None:
        # Accept any iterable of ints (set, list, tuple) and freeze it.
        if not isinstance(self.columns_to_compare, frozenset):
            object.__setattr__(
                self, "columns_to_compare", frozenset(self.columns_to_compare)
            )

    def compares_column(self, column: int) -> bool:
        """True iff the 1-based column takes part in the comparison."""
        return not self.columns_to_compare or column in self.columns_to_compare


@dataclass(frozen=True)
class LineOutcome:
    """
    Outcome of comparing one pair of lines.

    tokens1 / tokens2 / errors / widths hold one entry per surviving column
    (columns filtered out by columns_to_compare are absent). Tokens may carry
    highlight escape codes; widths never count them.
    """
    differs:              bool
    max_percentage_error: float
    tokens1:              Tuple[str, ...] = ()
    tokens2:              Tuple[str, ...] = ()
    errors:               Tuple[str, ...] = ()
    widths:               Tuple[int, ...] = ()


@dataclass(frozen=True)
class ComparisonResult:
    """
    Aggregate statistics of a full run.

    differing_line_count : Number of line pairs with at least one difference.
    max_percentage_error : Maximum percentage error over all differing lines.
    compared_line_count  : Number of line pairs compared.
    """
    differing_line_count: int   = 0
    max_percentage_error: float = 0.0
    compared_line_count:  int   = 0

    @property
    def files_equal(self) -> bool:
        return self.differing_line_count == 0

