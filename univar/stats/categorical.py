"""
Categorical estimator set.

Values are compared by exact string equality.  Tables are plain dicts built
in ascending key order, so iterating them is deterministic and reports are
reproducible regardless of input order.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from univar.errors import EmptySampleError

__all__ = ["mode", "frequency", "proportion"]


def _counts(data: Sequence[str], statistic: str) -> Counter[str]:
    if len(data) == 0:
        raise EmptySampleError(statistic)
    return Counter(data)


def frequency(data: Sequence[str]) -> dict[str, int]:
    """Occurrence count per distinct value, ascending key order."""
    counts = _counts(data, "frequency")
    return {key: counts[key] for key in sorted(counts)}


def proportion(data: Sequence[str]) -> dict[str, float]:
    """Share of the sample per distinct value, ascending key order.

    The denominator is the sample size, so the shares sum to 1.
    """
    total = len(data)
    counts = _counts(data, "proportion")
    return {key: counts[key] / total for key in sorted(counts)}


def mode(data: Sequence[str]) -> str:
    """Most frequent value.  Ties go to the smallest key."""
    counts = _counts(data, "mode")
    best = None
    best_count = 0
    for key in sorted(counts):
        if counts[key] > best_count:
            best, best_count = key, counts[key]
    return best
