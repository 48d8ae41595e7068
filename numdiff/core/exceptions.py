# =============================================================================
# numdiff -- ERROR TAXONOMY
# File:   numdiff/core/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Exception hierarchy for the comparison core and the CLI layer.
# All exceptions are pure value objects: no side effects, no logging,
# no I/O of any kind.
#
# EXCEPTION HIERARCHY
# -------------------
#   NumdiffError(Exception)                 -- base; never raised directly
#     FileOpenError(NumdiffError)           -- input file cannot be opened
#     ColumnCountMismatchError(NumdiffError)-- paired lines differ in token count
#     LineCountMismatchError(NumdiffError)  -- orphan content after one file ended
#     OptionsError(NumdiffError)            -- invalid CLI option (CLI layer only)
#
# Every exception carries a FailureKind so callers can branch on the kind
# of failure without matching message text.
#
# MESSAGE CONTRACT
# ----------------
# Every message is deterministic (derived only from constructor arguments),
# non-empty and names the offending file / line / option.
# =============================================================================

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class FailureKind(Enum):
    """Fatal failure categories."""
    FILE_OPEN       = "FILE_OPEN"
    COLUMN_COUNT    = "COLUMN_COUNT"
    LINE_COUNT      = "LINE_COUNT"
    INVALID_OPTIONS = "INVALID_OPTIONS"


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class NumdiffError(Exception):
    """
    Base class for all numdiff exceptions.

    Never raised directly. Use a concrete subclass.

    Attributes:
        kind:        FailureKind of the concrete subclass.
        message:     Human-readable description. Always non-empty.
        field_name:  Name of the offending option or file role, or empty
                     string if not applicable.
        value:       The offending value, or None.
    """

    kind: FailureKind

    def __init__(
        self,
        message:    str,
        field_name: str = "",
        value:      Any = None,
    ) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "NumdiffError: message must be a non-empty string"
            )
        super().__init__(message)
        self.message:    str = message
        self.field_name: str = field_name
        self.value:      Any = value

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(field_name=" + repr(self.field_name)
            + ", value=" + repr(self.value)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumdiffError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.field_name == other.field_name
            and self.value == other.value
            and self.message == other.message
        )

    __hash__ = Exception.__hash__


# =============================================================================
# CONCRETE EXCEPTIONS
# =============================================================================

class FileOpenError(NumdiffError):
    """
    Raised when an input file cannot be opened for reading.

    Message format:
        "Error: could not open file: <path>"
        "Error: could not open file: <path> (<reason>)"   if a reason is given

    The originating OSError, when there is one, is chained by the caller
    with ``raise ... from exc``.
    """

    kind = FailureKind.FILE_OPEN

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = "Error: could not open file: " + str(path)
        if reason:
            message += " (" + reason + ")"
        super().__init__(message=message, field_name="path", value=str(path))
        self.path: str = str(path)


class ColumnCountMismatchError(NumdiffError):
    """
    Raised when two paired lines tokenize to a different number of columns.

    This is a structural incompatibility between the files, not a content
    difference.

    Attributes:
        line_number1 / line_number2: 1-based physical line numbers, or 0 when
                                     the line was not read from a file.
        count1 / count2:             token counts of the two lines.
    """

    kind = FailureKind.COLUMN_COUNT

    def __init__(
        self,
        count1:       int,
        count2:       int,
        line_number1: int = 0,
        line_number2: int = 0,
    ) -> None:
        message = "Column count mismatch: {} vs {} columns".format(count1, count2)
        if line_number1 or line_number2:
            message += " (file1 line {}, file2 line {})".format(
                line_number1, line_number2
            )
        super().__init__(message=message, field_name="columns", value=(count1, count2))
        self.count1:       int = count1
        self.count2:       int = count2
        self.line_number1: int = line_number1
        self.line_number2: int = line_number2


class LineCountMismatchError(NumdiffError):
    """
    Raised when one file still has non-blank, non-comment content after the
    other file is exhausted.

    Attributes:
        path:        file that still had content.
        line_number: 1-based line number of the first orphan line.
        line:        the orphan line text.
    """

    kind = FailureKind.LINE_COUNT

    def __init__(self, path: str, line_number: int, line: str) -> None:
        message = (
            "Error: files have a different number of comparable lines: "
            "{} has extra content at line {}: {!r}".format(path, line_number, line)
        )
        super().__init__(message=message, field_name="path", value=str(path))
        self.path:        str = str(path)
        self.line_number: int = line_number
        self.line:        str = line


class OptionsError(NumdiffError):
    """
    Raised by the CLI layer for a missing, malformed or out-of-range option.

    The comparison core never raises this; it assumes validated options.
    """

    kind = FailureKind.INVALID_OPTIONS

    def __init__(self, message: str, field_name: str = "", value: Any = None) -> None:
        super().__init__(message=message, field_name=field_name, value=value)
