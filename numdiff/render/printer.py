# numdiff/render/printer.py
# Renderer: unified-diff and side-by-side output of compared lines.
#
# The Printer writes to an injected text sink (sys.stdout by default, an
# io.StringIO in tests). It never decides whether a line should be
# suppressed; that decision is made by the line comparator.
#
# Standard import pattern:
#   from numdiff.render.printer import Printer

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO, Tuple

from numdiff.core import ansi

# Inter-panel separators in side-by-side mode. Both are seven characters
# wide so the right-hand panel stays aligned.
DIFF_SEPARATOR:  str = "   |   "
EQUAL_SEPARATOR: str = "       "


class Printer:
    """
    Formats compared lines onto a text sink.

    Methods:
      print_diff(output1, output2, errors)
      print_side_by_side(tokens1, tokens2, col_widths, line_length)
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdout

    @property
    def stream(self) -> TextIO:
        return self._stream

    def print_diff(self, output1: str, output2: str, errors: str) -> None:
        """
        Emit a unified-diff block for one line pair:

            <blank line>
            < output1
            > output2
            >>errors

        Nothing is written unless either side carries a highlight.
        """
        if not (ansi.has_highlight(output1) or ansi.has_highlight(output2)):
            return
        self._stream.write("\n")
        self._stream.write("< " + output1 + "\n")
        self._stream.write("> " + output2 + "\n")
        self._stream.write(">>" + errors + "\n")

    def print_side_by_side(
        self,
        tokens1: Sequence[str],
        tokens2: Sequence[str],
        col_widths: Sequence[int],
        line_length: int,
    ) -> None:
        """
        Emit one aligned side-by-side line.

        Each column is padded to max(configured width, visible token widths),
        so a token is never shortened to fit its column. Columns beyond
        col_widths fall back to line_length as configured width. Each panel
        is then cut to line_length visible characters.
        """
        line1, line2 = build_panels(tokens1, tokens2, col_widths, line_length)
        if ansi.has_highlight(line1) or ansi.has_highlight(line2):
            separator = DIFF_SEPARATOR
        else:
            separator = EQUAL_SEPARATOR
        line1 = ansi.visible_prefix(line1, line_length)
        line2 = ansi.visible_prefix(line2, line_length)
        self._stream.write(line1 + separator + line2 + "\n")


def build_panels(
    tokens1: Sequence[str],
    tokens2: Sequence[str],
    col_widths: Sequence[int],
    line_length: int,
) -> Tuple[str, str]:
    """Build the two full-width (untruncated) panel strings."""
    ncols = max(len(tokens1), len(tokens2))
    cells1 = []
    cells2 = []
    for i in range(ncols):
        t1 = tokens1[i] if i < len(tokens1) else ""
        t2 = tokens2[i] if i < len(tokens2) else ""
        width = col_widths[i] if i < len(col_widths) else line_length
        width = max(width, ansi.visible_length(t1), ansi.visible_length(t2))
        cells1.append(ansi.pad_right(t1, width))
        cells2.append(ansi.pad_right(t2, width))
    return " ".join(cells1), " ".join(cells2)
