# =============================================================================
# numdiff -- LINE COMPARATOR
# File:   numdiff/core/line_comparator.py
# =============================================================================
#
# SCOPE
# -----
# Compares one pair of corresponding lines column by column and dispatches
# the result to the Printer.
#
# PIPELINE PER LINE
# -----------------
#   1. tokenize both lines; differing token counts are fatal
#      (ColumnCountMismatchError).
#   2. drop columns not selected by columns_to_compare (1-based).
#   3. numeric pair   -> percentage_difference(); above tolerance the column
#                        differs: tokens are highlighted and the error slot
#                        holds the right-justified percentage plus "%".
#      opaque pair    -> tokens copied verbatim, never compared.
#   4. line differs iff any surviving column differs; its error is the max
#      column error.
#   5. render, unless only_equal is set:
#        side_by_side -> Printer.print_side_by_side (skipped for equal lines
#                        when suppress_common_lines is set)
#        otherwise    -> Printer.print_diff with space-joined sides.
#
# Column width = max(len(token1), len(token2)) of the raw tokens, taken
# before any highlighting.
# =============================================================================

from __future__ import annotations

from typing import List

from numdiff.core import ansi
from numdiff.core.exceptions import ColumnCountMismatchError
from numdiff.core.options import ComparisonOptions, LineOutcome
from numdiff.core.text_parser import is_numeric, tokenize
from numdiff.core.value_comparator import percentage_difference
from numdiff.render.printer import Printer


def format_percentage(diff: float, width: int) -> str:
    """
    Right-justify a percentage error to width, then append "%".

    Six significant digits, general notation: 1.5 -> "1.5%",
    1e99 -> "1e+99%".
    """
    return "{:>{width}g}%".format(diff, width=width)


class LineComparator:
    """
    Compares line pairs under one ComparisonOptions and renders them.

    Method:
      compare(line1, line2, line_number1=0, line_number2=0) -> LineOutcome
    """

    def __init__(self, options: ComparisonOptions, printer: Printer) -> None:
        self._options = options
        self._printer = printer

    def compare(
        self,
        line1: str,
        line2: str,
        line_number1: int = 0,
        line_number2: int = 0,
    ) -> LineOutcome:
        """
        Compare two lines and render them according to the options.

        Raises ColumnCountMismatchError if the lines tokenize to a different
        number of columns. Line numbers only feed that error message.
        """
        outcome = self.evaluate(line1, line2, line_number1, line_number2)
        if not self._options.only_equal:
            self._render(outcome)
        return outcome

    def evaluate(
        self,
        line1: str,
        line2: str,
        line_number1: int = 0,
        line_number2: int = 0,
    ) -> LineOutcome:
        """Compare two lines without rendering anything."""
        opts = self._options
        tokens1 = tokenize(line1)
        tokens2 = tokenize(line2)
        if len(tokens1) != len(tokens2):
            raise ColumnCountMismatchError(
                count1=len(tokens1),
                count2=len(tokens2),
                line_number1=line_number1,
                line_number2=line_number2,
            )

        all_widths = ansi.column_widths(tokens1, tokens2)
        out1: List[str] = []
        out2: List[str] = []
        errors: List[str] = []
        widths: List[int] = []
        any_diff = False
        max_diff = 0.0

        for column, (t1, t2) in enumerate(zip(tokens1, tokens2), start=1):
            if not opts.compares_column(column):
                continue

            width = all_widths[column - 1]
            widths.append(width)

            if not (is_numeric(t1) and is_numeric(t2)):
                out1.append(t1)
                out2.append(t2)
                errors.append(" " * width)
                continue

            diff = percentage_difference(
                float(t1), float(t2), opts.tolerance, opts.threshold
            )
            if abs(diff) > opts.tolerance:
                any_diff = True
                max_diff = max(max_diff, abs(diff))
                if opts.color_diff_digits:
                    t1, t2 = ansi.highlight_diff_digits(t1, t2)
                else:
                    t1, t2 = ansi.highlight(t1), ansi.highlight(t2)
                errors.append(format_percentage(diff, width))
            else:
                errors.append(" " * width)
            out1.append(t1)
            out2.append(t2)

        return LineOutcome(
            differs=any_diff,
            max_percentage_error=max_diff if any_diff else 0.0,
            tokens1=tuple(out1),
            tokens2=tuple(out2),
            errors=tuple(errors),
            widths=tuple(widths),
        )

    def _render(self, outcome: LineOutcome) -> None:
        opts = self._options
        if opts.side_by_side:
            if opts.suppress_common_lines and not outcome.differs:
                return
            self._printer.print_side_by_side(
                outcome.tokens1, outcome.tokens2, outcome.widths, opts.line_length
            )
        else:
            self._printer.print_diff(
                " ".join(outcome.tokens1),
                " ".join(outcome.tokens2),
                " ".join(outcome.errors),
            )
