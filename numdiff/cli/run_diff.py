# numdiff/cli/run_diff.py
# Command-line entry point for the numeric diff.
#
# Standard invocation:
#   diff-numerics [options] file1 file2
#   python -m numdiff.cli.run_diff [options] file1 file2
#
# EXIT CODES:
#   0  -- Files are equal within tolerance.
#   1  -- Files differ.
#   2  -- Invalid options, or a fatal comparison error (unopenable file,
#         column count mismatch, line count mismatch). Message on stderr.
#
# This layer owns argument parsing, option range validation and the
# summary text. The comparison core never validates ranges and never writes
# error text.

import argparse
import sys
from typing import FrozenSet, List, Optional, Sequence, Tuple

from numdiff.core.driver import NumericDiff
from numdiff.core.exceptions import NumdiffError, OptionsError
from numdiff.core.options import (
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_LINE_LENGTH,
    DEFAULT_THRESHOLD,
    DEFAULT_TOLERANCE,
    ComparisonOptions,
    ComparisonResult,
)
from numdiff.version import NUMDIFF_VERSION

# ---------------------------------------------------------------------------
# Option bounds
# ---------------------------------------------------------------------------
MIN_LINE_LENGTH: int   = 10
MAX_LINE_LENGTH: int   = 200
MIN_TOLERANCE:   float = 1e-15
MAX_TOLERANCE:   float = 1e+3
MIN_THRESHOLD:   float = 0.0
MAX_THRESHOLD:   float = 1e+3

EXIT_EQUAL:  int = 0
EXIT_DIFFER: int = 1
EXIT_ERROR:  int = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diff-numerics",
        description=(
            "Compare two files of whitespace-delimited numeric tables, "
            "tolerating small relative differences."
        ),
    )
    parser.add_argument("files", nargs="*", metavar="file", help="The two files to compare.")
    parser.add_argument(
        "-y", "--side-by-side",
        action="store_true",
        help="Show files side by side.",
    )
    parser.add_argument(
        "-ys", "--suppress-common-lines",
        action="store_true",
        help="Suppress lines that are the same (implies --side-by-side).",
    )
    parser.add_argument(
        "-t", "--tolerance",
        type=float,
        default=DEFAULT_TOLERANCE,
        help="Relative tolerance in percent (default: %(default)g).",
    )
    parser.add_argument(
        "-T", "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help="Absolute value below which numbers count as zero (default: %(default)g).",
    )
    parser.add_argument(
        "-c", "--comment-string",
        default=DEFAULT_COMMENT_PREFIX,
        help="Comment line prefix; empty string disables (default: %(default)s).",
    )
    parser.add_argument(
        "-w", "--single-column-width",
        type=int,
        default=DEFAULT_LINE_LENGTH,
        help="Maximum visible line length per side (default: %(default)d).",
    )
    parser.add_argument(
        "-s", "--report-identical-files",
        action="store_true",
        help="Only report whether the files are equal.",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Print a summary only when the files differ.",
    )
    parser.add_argument(
        "-d", "--color-different-digits",
        action="store_true",
        help="Color only the differing digits.",
    )
    parser.add_argument(
        "-C", "--columns",
        default=None,
        help="Compare only these columns (comma-separated, 1-based).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Write the run event log to stderr.",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version="numeric-diff version v" + NUMDIFF_VERSION,
    )
    return parser


def parse_columns(col_arg: str) -> FrozenSet[int]:
    """
    Parse a comma-separated list of 1-based column indices.

    Raises OptionsError on a non-integer or a value below 1.
    """
    columns = set()
    for item in col_arg.split(","):
        item = item.strip()
        try:
            column = int(item)
        except ValueError:
            raise OptionsError(
                f"Error: Invalid column number '{item}'.",
                field_name="columns",
                value=item,
            ) from None
        if column < 1:
            raise OptionsError(
                f"Error: Column numbers must be at least 1 (got {column}).",
                field_name="columns",
                value=column,
            )
        columns.add(column)
    return frozenset(columns)


def validate_options(options: ComparisonOptions) -> None:
    """Raise OptionsError if any option is missing or out of range."""
    if not options.file1 or not options.file2:
        raise OptionsError("Error: Two input files must be specified.", field_name="files")

    if options.file1 == options.file2:
        raise OptionsError(
            "Error: The two input files must be different.",
            field_name="files",
            value=options.file1,
        )

    if not MIN_LINE_LENGTH <= options.line_length <= MAX_LINE_LENGTH:
        raise OptionsError(
            f"Error: Column width ({options.line_length}) must be between "
            f"{MIN_LINE_LENGTH} and {MAX_LINE_LENGTH}.",
            field_name="line_length",
            value=options.line_length,
        )

    if not MIN_TOLERANCE <= options.tolerance <= MAX_TOLERANCE:
        raise OptionsError(
            f"Error: Tolerance ({options.tolerance:g}) must be between "
            f"{MIN_TOLERANCE:g} and {MAX_TOLERANCE:g}.",
            field_name="tolerance",
            value=options.tolerance,
        )

    if not MIN_THRESHOLD <= options.threshold <= MAX_THRESHOLD:
        raise OptionsError(
            f"Error: Threshold ({options.threshold:g}) must be between "
            f"{MIN_THRESHOLD:g} and {MAX_THRESHOLD:g}.",
            field_name="threshold",
            value=options.threshold,
        )


def parse_options(argv: Optional[Sequence[str]] = None) -> Tuple[ComparisonOptions, bool]:
    """
    Parse and validate argv into ComparisonOptions.

    Returns (options, verbose). Raises OptionsError on invalid input.
    """
    args = _build_parser().parse_args(argv)

    files: List[str] = list(args.files)
    if len(files) > 2:
        raise OptionsError(
            "Unknown or extra argument: " + files[2], field_name="files", value=files[2]
        )
    files += [""] * (2 - len(files))

    columns: FrozenSet[int] = frozenset()
    if args.columns is not None:
        columns = parse_columns(args.columns)

    options = ComparisonOptions(
        tolerance=args.tolerance,
        threshold=args.threshold,
        comment_prefix=args.comment_string,
        side_by_side=args.side_by_side or args.suppress_common_lines,
        suppress_common_lines=args.suppress_common_lines,
        only_equal=args.report_identical_files,
        quiet=args.quiet,
        color_diff_digits=args.color_different_digits,
        line_length=args.single_column_width,
        columns_to_compare=columns,
        file1=files[0],
        file2=files[1],
    )
    validate_options(options)
    return options, args.verbose


def format_summary(options: ComparisonOptions, result: ComparisonResult) -> str:
    """
    Summary text for quiet / only_equal runs. Empty string when nothing is
    to be printed.
    """
    header = (
        f"Comparing {options.file1} and {options.file2}\n"
        f"Tolerance: {options.tolerance:g}, Threshold: {options.threshold:g}\n"
    )
    differ = (
        f"Files DIFFER: {result.differing_line_count} lines differ, "
        f"max percentage error: {result.max_percentage_error:g}%\n"
    )
    if options.quiet:
        return "" if result.files_equal else header + differ
    if options.only_equal:
        if result.files_equal:
            return header + "Files are EQUAL within tolerance.\n"
        return header + differ
    return ""


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the comparison. Returns the process exit code."""
    try:
        options, verbose = parse_options(argv)
    except OptionsError as exc:
        sys.stderr.write(exc.message + "\n")
        _build_parser().print_usage(sys.stderr)
        return EXIT_ERROR

    diff = NumericDiff(options, sys.stdout)
    try:
        result = diff.run()
    except NumdiffError as exc:
        sys.stderr.write(exc.message + "\n")
        return EXIT_ERROR
    finally:
        if verbose and diff.log.event_count():
            sys.stderr.write(diff.log.format_events() + "\n")

    sys.stdout.write(format_summary(options, result))
    sys.stdout.flush()
    return EXIT_EQUAL if result.files_equal else EXIT_DIFFER


if __name__ == "__main__":
    sys.exit(main())
