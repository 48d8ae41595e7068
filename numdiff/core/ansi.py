# =============================================================================
# numdiff -- ANSI TEXT UTILITY
# File:   numdiff/core/ansi.py
# =============================================================================
#
# SCOPE
# -----
# Width-aware handling of text that carries ANSI SGR escape sequences
# (ESC '[' ... 'm'), and highlighting of differing numeric text.
#
# Highlighting uses exactly one escape pair:
#   HIGHLIGHT = ESC[31m   (red foreground)
#   RESET     = ESC[0m
#
# Visible width is always measured on the stripped text; escape codes never
# count toward a width.
#
# All functions are stateless and return new strings; nothing is mutated.
# =============================================================================

from __future__ import annotations

from typing import List, Sequence, Tuple

HIGHLIGHT: str = "\033[31m"
RESET:     str = "\033[0m"

_ESC:        str = "\033"
_CSI_OPEN:   str = "["
_SGR_END:    str = "m"
_EXP_MARKS:  str = "eE"


# =============================================================================
# SECTION 1 -- ESCAPE-AWARE WIDTH
# =============================================================================

def _starts_escape(text: str, i: int) -> bool:
    return text[i] == _ESC and i + 1 < len(text) and text[i + 1] == _CSI_OPEN


def strip(text: str) -> str:
    """
    Remove every escape sequence, leaving only visible characters.

    An ESC not followed by '[' is kept as an ordinary character. An escape
    sequence left open at end of text is dropped entirely.
    """
    out: List[str] = []
    in_escape = False
    for i, ch in enumerate(text):
        if in_escape:
            if ch == _SGR_END:
                in_escape = False
        elif _starts_escape(text, i):
            in_escape = True
        else:
            out.append(ch)
    return "".join(out)


def visible_length(text: str) -> int:
    """Display width of text: length after stripping escape sequences."""
    return len(strip(text))


def ensure_reset(text: str) -> str:
    """
    Append RESET if the last HIGHLIGHT comes after the last RESET (or no
    RESET exists). Idempotent.
    """
    last_highlight = text.rfind(HIGHLIGHT)
    if last_highlight == -1:
        return text
    if text.rfind(RESET) < last_highlight:
        return text + RESET
    return text


def visible_prefix(text: str, n: int) -> str:
    """
    Return the shortest prefix of text holding exactly n visible characters
    (all of them if fewer exist).

    Escape sequences are copied verbatim wherever they occur up to the point
    where the (n+1)-th visible character would start, so a trailing RESET
    right after the n-th character is kept. The result never ends inside an
    open highlight: ensure_reset() is applied.
    """
    out: List[str] = []
    visible = 0
    in_escape = False
    for i, ch in enumerate(text):
        if in_escape:
            out.append(ch)
            if ch == _SGR_END:
                in_escape = False
        elif _starts_escape(text, i):
            in_escape = True
            out.append(ch)
        elif visible < n:
            out.append(ch)
            visible += 1
        else:
            break
    return ensure_reset("".join(out))


def pad_right(text: str, width: int) -> str:
    """Pad text with spaces to the given visible width. Never truncates."""
    missing = width - visible_length(text)
    if missing > 0:
        return text + " " * missing
    return text


# =============================================================================
# SECTION 2 -- HIGHLIGHTING
# =============================================================================

def highlight(text: str) -> str:
    """Wrap the whole string in HIGHLIGHT ... RESET."""
    return HIGHLIGHT + text + RESET


def has_highlight(text: str) -> bool:
    """True iff HIGHLIGHT occurs anywhere in text."""
    return HIGHLIGHT in text


def _split_exponent(number: str) -> Tuple[str, str]:
    """Split at the first 'e'/'E'. The exponent part keeps the marker."""
    for i, ch in enumerate(number):
        if ch in _EXP_MARKS:
            return number[:i], number[i:]
    return number, ""


def highlight_diff_digits(s1: str, s2: str) -> Tuple[str, str]:
    """
    Highlight only the differing part of two numeric strings.

    Mantissas are compared left to right; everything from the first
    differing character onwards is highlighted on each side that extends
    that far. When one mantissa is a strict prefix of the other, only the
    longer side's extra tail is highlighted.

    Exponents:
      - mantissas differ        -> every non-empty exponent is highlighted,
                                   even if both exponents are identical;
      - mantissas identical     -> exponents are highlighted only if they
                                   differ from each other.

    Example: ("3.14159", "3.14259") -> shared "3.14", highlighted "159"/"259".
    """
    mant1, exp1 = _split_exponent(s1)
    mant2, exp2 = _split_exponent(s2)

    shared = min(len(mant1), len(mant2))
    diff_start = shared
    for i in range(shared):
        if mant1[i] != mant2[i]:
            diff_start = i
            break

    def _mark_tail(mantissa: str) -> str:
        if diff_start < len(mantissa):
            return mantissa[:diff_start] + highlight(mantissa[diff_start:])
        return mantissa

    out1 = _mark_tail(mant1)
    out2 = _mark_tail(mant2)

    mantissa_differs = diff_start < shared or len(mant1) != len(mant2)
    if mantissa_differs or exp1 != exp2:
        if exp1:
            out1 += highlight(exp1)
        if exp2:
            out2 += highlight(exp2)
    else:
        out1 += exp1
        out2 += exp2

    return out1, out2


# =============================================================================
# SECTION 3 -- COLUMN WIDTHS
# =============================================================================

def column_widths(tokens1: Sequence[str], tokens2: Sequence[str]) -> List[int]:
    """
    Per-column display width: max visible length of the paired tokens.

    Computed over the common prefix of the two sequences.
    """
    return [
        max(visible_length(t1), visible_length(t2))
        for t1, t2 in zip(tokens1, tokens2)
    ]
