# numdiff/core/value_comparator.py
# Value Comparator: tolerance / threshold decision for two numeric values.
#
# Pure function. Deterministic. No IO. No side effects.
#
# Decision order (must not be reordered):
#   1. both |v| < threshold            -> 0.0          (both negligible, equal)
#   2. exactly one |v| < threshold     -> BIG_PERCENTAGE
#   3. relative = |v1 - v2| / max(|v1|, |v2|) * 100
#        relative < tolerance          -> 0.0          (within tolerance)
#        otherwise                     -> relative
#
# A return value of exactly 0.0 means "no difference".

from __future__ import annotations

# Percentage difference reported when only one of the two values is
# negligible. Printed as "1e+99%".
BIG_PERCENTAGE: float = 1.0e99


def percentage_difference(
    value1: float,
    value2: float,
    tolerance: float,
    threshold: float,
) -> float:
    """
    Return the percentage difference between two values, or 0.0 if they are
    equal under the tolerance / threshold rules above.

    Symmetric in (value1, value2).
    """
    small1 = abs(value1) < threshold
    small2 = abs(value2) < threshold

    if small1 and small2:
        return 0.0
    if small1 != small2:
        return BIG_PERCENTAGE

    scale = max(abs(value1), abs(value2))
    if scale == 0.0:
        # Only reachable with threshold <= 0: both values are exactly zero.
        return 0.0

    relative = abs(value1 - value2) / scale * 100.0
    if relative < tolerance:
        return 0.0
    return relative
