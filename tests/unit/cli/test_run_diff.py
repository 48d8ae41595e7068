# =============================================================================
# numdiff -- CLI TESTS
# File:   tests/unit/cli/test_run_diff.py
# =============================================================================

from pathlib import Path

import pytest

import numdiff
from numdiff.cli.run_diff import (
    EXIT_DIFFER,
    EXIT_EQUAL,
    EXIT_ERROR,
    format_summary,
    main,
    parse_columns,
    parse_options,
    validate_options,
)
from numdiff.core.exceptions import OptionsError
from numdiff.core.options import ComparisonOptions, ComparisonResult
from numdiff.version import NUMDIFF_VERSION


# =============================================================================
# SECTION 1 -- Argument parsing
# =============================================================================

class TestParseOptions:

    def test_defaults(self):
        options, verbose = parse_options(["a.dat", "b.dat"])
        assert options == ComparisonOptions(file1="a.dat", file2="b.dat")
        assert verbose is False

    def test_all_switches(self):
        options, verbose = parse_options([
            "-y", "-t", "0.5", "-T", "1e-9", "-c", "//", "-w", "80",
            "-s", "-q", "-d", "-C", "1,3", "--verbose", "a.dat", "b.dat",
        ])
        assert options.side_by_side is True
        assert options.tolerance == 0.5
        assert options.threshold == 1e-9
        assert options.comment_prefix == "//"
        assert options.line_length == 80
        assert options.only_equal is True
        assert options.quiet is True
        assert options.color_diff_digits is True
        assert options.columns_to_compare == frozenset({1, 3})
        assert verbose is True

    def test_suppress_common_lines_implies_side_by_side(self):
        options, _ = parse_options(["-ys", "a.dat", "b.dat"])
        assert options.suppress_common_lines is True
        assert options.side_by_side is True

    def test_empty_comment_string(self):
        options, _ = parse_options(["-c", "", "a.dat", "b.dat"])
        assert options.comment_prefix == ""

    def test_missing_files(self):
        with pytest.raises(OptionsError, match="Two input files must be specified"):
            parse_options(["a.dat"])

    def test_extra_file(self):
        with pytest.raises(OptionsError, match="extra argument: c.dat"):
            parse_options(["a.dat", "b.dat", "c.dat"])


class TestParseColumns:

    def test_comma_separated(self):
        assert parse_columns("1,2,4") == frozenset({1, 2, 4})

    def test_duplicates_and_spaces(self):
        assert parse_columns("2, 2 ,3") == frozenset({2, 3})

    def test_zero_rejected(self):
        with pytest.raises(OptionsError, match="at least 1"):
            parse_columns("0,1")

    def test_non_integer_rejected(self):
        with pytest.raises(OptionsError, match="Invalid column"):
            parse_columns("1,x")


# =============================================================================
# SECTION 2 -- Range validation
# =============================================================================

def _opts(**overrides):
    defaults = dict(file1="a.dat", file2="b.dat")
    defaults.update(overrides)
    return ComparisonOptions(**defaults)


class TestValidateOptions:

    def test_valid_defaults(self):
        validate_options(_opts())

    def test_same_file(self):
        with pytest.raises(OptionsError, match="must be different"):
            validate_options(_opts(file2="a.dat"))

    @pytest.mark.parametrize("width", [5, 500])
    def test_line_length_bounds(self, width):
        with pytest.raises(OptionsError, match="Column width"):
            validate_options(_opts(line_length=width))

    @pytest.mark.parametrize("tol", [1e-20, 1e5])
    def test_tolerance_bounds(self, tol):
        with pytest.raises(OptionsError, match="Tolerance"):
            validate_options(_opts(tolerance=tol))

    @pytest.mark.parametrize("thr", [-1.0, 1e5])
    def test_threshold_bounds(self, thr):
        with pytest.raises(OptionsError, match="Threshold"):
            validate_options(_opts(threshold=thr))

    def test_zero_threshold_accepted(self):
        validate_options(_opts(threshold=0.0))


# =============================================================================
# SECTION 3 -- Summary text
# =============================================================================

class TestFormatSummary:

    _DIFFER = ComparisonResult(differing_line_count=3, max_percentage_error=12.5,
                               compared_line_count=10)
    _EQUAL = ComparisonResult(compared_line_count=10)

    def test_quiet_equal_prints_nothing(self):
        assert format_summary(_opts(quiet=True), self._EQUAL) == ""

    def test_quiet_differ(self):
        assert format_summary(_opts(quiet=True), self._DIFFER) == (
            "Comparing a.dat and b.dat\n"
            "Tolerance: 0.01, Threshold: 1e-06\n"
            "Files DIFFER: 3 lines differ, max percentage error: 12.5%\n"
        )

    def test_only_equal_equal(self):
        summary = format_summary(_opts(only_equal=True), self._EQUAL)
        assert summary.startswith("Comparing a.dat and b.dat\n")
        assert summary.endswith("Files are EQUAL within tolerance.\n")

    def test_only_equal_differ(self):
        summary = format_summary(_opts(only_equal=True), self._DIFFER)
        assert "Files DIFFER: 3 lines differ" in summary

    def test_default_mode_prints_no_summary(self):
        assert format_summary(_opts(), self._DIFFER) == ""


# =============================================================================
# SECTION 4 -- main()
# =============================================================================

class TestMain:

    def test_equal_files_exit_zero(self, write_pair, capsys):
        path1, path2 = write_pair("1.0 2.0\n", "1.0 2.0\n")
        assert main([path1, path2]) == EXIT_EQUAL
        assert capsys.readouterr().out == ""

    def test_differing_files_exit_one(self, data_files, capsys):
        assert main(list(data_files)) == EXIT_DIFFER
        out = capsys.readouterr().out
        assert "< 0.5 1.2074182" in out
        assert ">>" in out

    def test_report_identical_files_summary(self, data_files, capsys):
        assert main(["-s", *data_files]) == EXIT_DIFFER
        out = capsys.readouterr().out
        assert "Files DIFFER: 2 lines differ, max percentage error: 1e+99%" in out
        assert "<" not in out

    def test_columns_option(self, data_files, capsys):
        assert main(["-C", "1,4", *data_files]) == EXIT_EQUAL

    def test_side_by_side(self, data_files, capsys):
        main(["-y", *data_files])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 5
        assert "   |   " in lines[1]
        assert "   |   " not in lines[0]

    def test_invalid_option_exit_two(self, data_files, capsys):
        assert main(["-w", "5", *data_files]) == EXIT_ERROR
        assert "Error: Column width (5)" in capsys.readouterr().err

    def test_missing_file_exit_two(self, tmp_path, capsys):
        missing1 = str(tmp_path / "a.dat")
        missing2 = str(tmp_path / "b.dat")
        assert main([missing1, missing2]) == EXIT_ERROR
        assert "could not open file" in capsys.readouterr().err

    def test_column_mismatch_exit_two(self, write_pair, capsys):
        path1, path2 = write_pair("1 2\n", "1\n")
        assert main([path1, path2]) == EXIT_ERROR
        assert "Column count mismatch" in capsys.readouterr().err

    def test_verbose_writes_run_log(self, data_files, capsys):
        main(["-s", "--verbose", *data_files])
        err = capsys.readouterr().err
        assert "FILE_OPENED" in err
        assert "RUN_COMPLETE" in err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--version"])
        assert info.value.code == 0
        assert "numeric-diff version v1.0.0" in capsys.readouterr().out

    def test_package_version_has_single_source(self):
        pyproject = Path(__file__).parents[3] / "pyproject.toml"
        text = pyproject.read_text()
        assert 'dynamic = ["version"]' in text
        assert "numdiff.version.NUMDIFF_VERSION" in text
        assert numdiff.__version__ == NUMDIFF_VERSION
