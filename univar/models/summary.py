"""
Computed statistics, one container per sample kind.

The report assembler reads these and nothing else, so every value that ends
up in a report is computed before assembly starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = ["NumericSummary", "CategoricalSummary", "Summary"]


@dataclass(frozen=True)
class NumericSummary:
    """Statistics of a :class:`~univar.models.sample.NumericSample`."""

    count: int
    mean: float
    median: float
    mode: float
    variance: float
    standard_deviation: float
    coefficient_of_variation: float
    """Percent, i.e. ``stddev / mean * 100``."""

    skewness: float
    kurtosis: float
    """Excess kurtosis (normal distribution → 0)."""

    q1: float
    q3: float
    outliers: tuple[float, ...] = ()
    """Values outside the IQR fences, ascending, duplicates kept."""


@dataclass(frozen=True)
class CategoricalSummary:
    """Statistics of a :class:`~univar.models.sample.CategoricalSample`.

    Both tables iterate in ascending key order.
    """

    count: int
    mode: str
    frequencies: dict[str, int]
    proportions: dict[str, float]


Summary = Union[NumericSummary, CategoricalSummary]
