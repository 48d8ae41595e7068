# numdiff/core/text_parser.py
# Tokenizer: whitespace tokenization, comment detection, numeric classification.
#
# Stateless free functions. The comment prefix is always passed explicitly
# alongside the line being tested; nothing is stored at module level.
#
# Standard import pattern:
#   from numdiff.core.text_parser import tokenize, is_comment, is_numeric

from __future__ import annotations

import math
import re
from typing import List

# Real-number grammar accepted for a token. A token is numeric only if the
# whole token matches: optional leading minus, decimal mantissa with an
# optional fraction (or a bare fraction such as ".5"), optional exponent,
# or one of the IEEE specials. A leading "+" is not accepted, nor are digit
# separators such as "1_000".
_NUMERIC_RE = re.compile(
    r"""
    -?
    (?:
        (?P<mantissa>\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?
      | (?P<special>inf(?:inity)?|nan)
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)
_NONZERO_DIGIT_RE = re.compile(r"[1-9]")

_LEADING_BLANKS: str = " \t"

# Token separators: ASCII whitespace only. Unicode spaces such as U+00A0
# stay inside a token.
_ASCII_BLANKS: str = " \t\n\v\f\r"
_SEPARATOR_RE = re.compile(r"[ \t\n\v\f\r]+")


def tokenize(line: str) -> List[str]:
    """
    Split a line on runs of ASCII whitespace (space, tab, newline, vertical tab,
    form feed, carriage return).

    Leading and trailing whitespace is ignored and no empty token is ever
    produced; an empty or all-whitespace line yields an empty list.
    """
    stripped = line.strip(_ASCII_BLANKS)
    if not stripped:
        return []
    return _SEPARATOR_RE.split(stripped)


def is_comment(line: str, prefix: str) -> bool:
    """
    True iff, after skipping leading spaces and tabs, the line starts with prefix.

    All-whitespace lines are never comments. An empty prefix would match every
    non-blank line; callers treat an empty prefix as "comment skipping
    disabled" and do not call this function with one.
    """
    rest = line.lstrip(_LEADING_BLANKS)
    if not rest or rest.isspace():
        return False
    return rest.startswith(prefix)


def is_numeric(token: str) -> bool:
    """
    True iff the entire token parses as a real number representable as a
    double.

    Partial parses are rejected: "1.5e3" is numeric, "1.5e3x", "12abc" and
    "1.5e" are not. Finite literals outside the double range are rejected
    too: "1e400" would overflow to inf and "1e-400" would underflow to zero.
    """
    match = _NUMERIC_RE.fullmatch(token)
    if match is None:
        return False
    if match.group("special") is not None:
        return True
    value = float(token)
    if math.isinf(value):
        return False
    if value == 0.0 and _NONZERO_DIGIT_RE.search(match.group("mantissa")):
        return False
    return True
