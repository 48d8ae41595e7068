# =============================================================================
# numdiff -- FILE COMPARISON DRIVER
# File:   numdiff/core/driver.py
# =============================================================================
#
# SCOPE
# -----
# Reads two files in lock-step, pairs their non-comment lines, compares each
# pair with LineComparator and aggregates a ComparisonResult.
#
# STATE MACHINE
# -------------
#   READING   both streams may still have content lines. Each step fetches
#             the next non-comment line from both sides. Both exhausted at
#             once -> DONE. One exhausted -> DRAINING.
#   DRAINING  one stream is exhausted. Every remaining non-comment line of
#             the other stream must be blank (zero tokens); blank orphans
#             are logged and rendered against an empty line (not counted
#             as compared), any other orphan raises
#             LineCountMismatchError.
#   DONE      the frozen ComparisonResult is returned.
#
# FATAL CONDITIONS (propagated, never swallowed)
# ----------------------------------------------
#   FileOpenError             -- either path cannot be opened for reading
#   ColumnCountMismatchError  -- a line pair differs in token count
#   LineCountMismatchError    -- orphan content after the other file ended
#
# Both file handles are closed on every exit path.
# =============================================================================

from __future__ import annotations

import contextlib
from enum import Enum
from typing import Iterator, Optional, TextIO, Tuple

from numdiff.core import logging_layer as events
from numdiff.core.exceptions import FileOpenError, LineCountMismatchError
from numdiff.core.line_comparator import LineComparator
from numdiff.core.logging_layer import RunLog
from numdiff.core.options import ComparisonOptions, ComparisonResult
from numdiff.core.text_parser import is_comment, tokenize
from numdiff.render.printer import Printer

# (1-based physical line number, line text without trailing newline)
_NumberedLine = Tuple[int, str]


class _State(Enum):
    READING  = "READING"
    DRAINING = "DRAINING"
    DONE     = "DONE"


class _ContentLines:
    """
    Iterator over the non-comment lines of one open file.

    Comment lines are skipped transparently and recorded in the run log.
    """

    def __init__(
        self,
        handle: TextIO,
        path: str,
        comment_prefix: str,
        log: RunLog,
    ) -> None:
        self.path = path
        self._handle = handle
        self._prefix = comment_prefix
        self._log = log
        self._line_number = 0

    def __iter__(self) -> Iterator[_NumberedLine]:
        return self

    def __next__(self) -> _NumberedLine:
        for raw in self._handle:
            self._line_number += 1
            line = raw.rstrip("\r\n")
            if self._prefix and is_comment(line, self._prefix):
                self._log.log_event(
                    events.COMMENT_SKIPPED,
                    {"path": self.path, "line": self._line_number},
                )
                continue
            return self._line_number, line
        raise StopIteration


class NumericDiff:
    """
    Compares two numeric table files under one ComparisonOptions.

    The output sink is injected: pass a TextIO to capture rendered output,
    or omit it to write to sys.stdout.

    Method:
      run() -> ComparisonResult
    """

    def __init__(
        self,
        options: ComparisonOptions,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._options = options
        self._printer = Printer(stream)
        self._comparator = LineComparator(options, self._printer)
        self._log = RunLog()

    @property
    def log(self) -> RunLog:
        """Event log of the most recent run."""
        return self._log

    def run(self) -> ComparisonResult:
        """
        Execute the comparison and return the aggregate result.

        Raises FileOpenError, ColumnCountMismatchError or
        LineCountMismatchError; see module header.
        """
        self._log = RunLog()
        opts = self._options
        with contextlib.ExitStack() as stack:
            handle1 = stack.enter_context(self._open(opts.file1, "file1"))
            handle2 = stack.enter_context(self._open(opts.file2, "file2"))
            lines1 = _ContentLines(handle1, opts.file1, opts.comment_prefix, self._log)
            lines2 = _ContentLines(handle2, opts.file2, opts.comment_prefix, self._log)
            result = self._compare_streams(lines1, lines2)

        self._log.log_event(
            events.RUN_COMPLETE,
            {
                "compared_lines": result.compared_line_count,
                "differing_lines": result.differing_line_count,
                "max_percentage_error": result.max_percentage_error,
            },
        )
        return result

    # -----------------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------------

    def _open(self, path: str, role: str) -> TextIO:
        try:
            handle = open(path, "r", encoding="utf-8", errors="replace")
        except OSError as exc:
            raise FileOpenError(path, exc.strerror) from exc
        self._log.log_event(events.FILE_OPENED, {"path": path, "role": role})
        return handle

    def _compare_streams(
        self,
        lines1: _ContentLines,
        lines2: _ContentLines,
    ) -> ComparisonResult:
        compared = 0
        differing = 0
        max_error = 0.0

        state = _State.READING
        remaining: Optional[_ContentLines] = None
        orphan: Optional[_NumberedLine] = None

        while state is _State.READING:
            next1 = next(lines1, None)
            next2 = next(lines2, None)
            if next1 is None and next2 is None:
                state = _State.DONE
                break
            if next1 is None or next2 is None:
                remaining, orphan = (lines2, next2) if next1 is None else (lines1, next1)
                state = _State.DRAINING
                break

            (number1, line1), (number2, line2) = next1, next2
            outcome = self._comparator.compare(line1, line2, number1, number2)
            compared += 1
            if outcome.differs:
                differing += 1
                max_error = max(max_error, outcome.max_percentage_error)
                self._log.log_event(
                    events.LINE_DIFFERS,
                    {
                        "line1": number1,
                        "line2": number2,
                        "max_percentage_error": outcome.max_percentage_error,
                    },
                )

        if state is _State.DRAINING:
            self._drain(remaining, orphan, from_first_file=remaining is lines1)

        return ComparisonResult(
            differing_line_count=differing,
            max_percentage_error=max_error,
            compared_line_count=compared,
        )

    def _drain(
        self,
        remaining: _ContentLines,
        first: _NumberedLine,
        from_first_file: bool,
    ) -> None:
        """
        Compare blank orphan lines against an empty line so they render like
        any other line pair; any orphan with tokens is fatal.
        """
        pending: Optional[_NumberedLine] = first
        while pending is not None:
            number, line = pending
            if tokenize(line):
                raise LineCountMismatchError(remaining.path, number, line)
            self._log.log_event(
                events.ORPHAN_BLANK_LINE, {"path": remaining.path, "line": number}
            )
            if from_first_file:
                self._comparator.compare(line, "", line_number1=number)
            else:
                self._comparator.compare("", line, line_number2=number)
            pending = next(remaining, None)
