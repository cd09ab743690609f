"""
Null-safe statistical reducers.

average/minimum/maximum return None on empty input; total returns 0.0
because zero precipitation is a valid physical sum.
"""

import math
import statistics
from typing import Any, Iterable, List, Optional


def is_finite_number(value: Any) -> bool:
    """True for int/float values that are neither NaN nor infinite (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def finite_values(values: Iterable[Any]) -> List[float]:
    """Keep only finite numeric values, as floats."""
    return [float(v) for v in values if is_finite_number(v)]


def first_finite(*candidates: Any) -> Optional[float]:
    """Return the first finite candidate, or None."""
    for candidate in candidates:
        if is_finite_number(candidate):
            return float(candidate)
    return None


def average(values: Iterable[Any]) -> Optional[float]:
    valid = finite_values(values)
    if not valid:
        return None
    return statistics.mean(valid)


def minimum(values: Iterable[Any]) -> Optional[float]:
    valid = finite_values(values)
    if not valid:
        return None
    return min(valid)


def maximum(values: Iterable[Any]) -> Optional[float]:
    valid = finite_values(values)
    if not valid:
        return None
    return max(valid)


def total(values: Iterable[Any]) -> float:
    return math.fsum(finite_values(values))
