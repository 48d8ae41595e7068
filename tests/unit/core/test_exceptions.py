import pytest

from numdiff.core.exceptions import (
    ColumnCountMismatchError,
    FailureKind,
    FileOpenError,
    LineCountMismatchError,
    NumdiffError,
    OptionsError,
)


class TestNumdiffErrorBase:
    """NumdiffError base class -- construction and attributes."""

    def test_construction_stores_message(self):
        exc = NumdiffError(message="boom")
        assert exc.message == "boom"
        assert str(exc) == "boom"

    def test_defaults(self):
        exc = NumdiffError(message="boom")
        assert exc.field_name == ""
        assert exc.value is None

    def test_empty_message_raises_value_error(self):
        with pytest.raises(ValueError, match="non-empty string"):
            NumdiffError(message="")

    def test_equality_same_type_same_values(self):
        assert OptionsError("m", "f", 1) == OptionsError("m", "f", 1)

    def test_equality_different_type(self):
        assert FileOpenError("a") != OptionsError("Error: could not open file: a", "path", "a")

    def test_repr_contains_class_name(self):
        assert "OptionsError" in repr(OptionsError("m", "tolerance", 5.0))

    def test_hashable(self):
        assert len({FileOpenError("a"), FileOpenError("b")}) == 2


class TestConcreteErrors:

    @pytest.mark.parametrize("exc, kind", [
        (FileOpenError("x.dat"), FailureKind.FILE_OPEN),
        (ColumnCountMismatchError(3, 2), FailureKind.COLUMN_COUNT),
        (LineCountMismatchError("x.dat", 7, "1 2"), FailureKind.LINE_COUNT),
        (OptionsError("Error: bad"), FailureKind.INVALID_OPTIONS),
    ])
    def test_kind_and_base_class(self, exc, kind):
        assert exc.kind is kind
        assert isinstance(exc, NumdiffError)

    def test_file_open_message(self):
        assert FileOpenError("x.dat").message == "Error: could not open file: x.dat"
        assert FileOpenError("x.dat", "No such file or directory").message == (
            "Error: could not open file: x.dat (No such file or directory)"
        )

    def test_column_count_message_without_line_numbers(self):
        exc = ColumnCountMismatchError(3, 2)
        assert exc.message == "Column count mismatch: 3 vs 2 columns"

    def test_column_count_message_with_line_numbers(self):
        exc = ColumnCountMismatchError(3, 2, line_number1=10, line_number2=12)
        assert "file1 line 10, file2 line 12" in exc.message
        assert exc.value == (3, 2)

    def test_line_count_message_names_file_and_line(self):
        exc = LineCountMismatchError("b.dat", 7, "1 2")
        assert "b.dat" in exc.message
        assert "line 7" in exc.message
        assert exc.line == "1 2"

    def test_can_be_caught_as_base(self):
        with pytest.raises(NumdiffError):
            raise LineCountMismatchError("b.dat", 1, "x")
