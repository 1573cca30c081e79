"""
Numeric estimator set.

Every function accepts any sequence of floats (a
:class:`~univar.models.sample.NumericSample`, a list, a numpy array), never
mutates it, and fails fast:

* an empty input raises :class:`~univar.errors.EmptySampleError`
* a ratio with a zero denominator raises :class:`~univar.errors.DomainError`

Dispersion and shape statistics use the population formulas (divide by N).

Quartiles
---------
One formula only: the ``(n + 1)·p / 100`` rank on the sorted sample,
integer part clamped to ``[1, n - 1]``, linear interpolation with the
fractional part.  The simpler ``sorted[n // 4]`` / ``sorted[3n // 4]`` index
rule is deprecated and deliberately not provided.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from univar.errors import DomainError, EmptySampleError
from univar.models.sample import NumericSample

__all__ = [
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "coefficient_of_variation",
    "quartile",
    "find_outliers",
    "skewness",
    "kurtosis",
]


def _as_array(data: Sequence[float], statistic: str) -> np.ndarray:
    arr = np.array(data, dtype=float)
    if arr.size == 0:
        raise EmptySampleError(statistic)
    return arr


def _sorted(data: Sequence[float], statistic: str) -> np.ndarray:
    # always a new array; the caller's data keeps its order
    if isinstance(data, NumericSample):
        if len(data) == 0:
            raise EmptySampleError(statistic)
        return data.sorted_values()
    return np.sort(_as_array(data, statistic))


def _is_constant(arr: np.ndarray) -> bool:
    # compares the values, not their deviations from the rounded mean
    return bool(arr.min() == arr.max())


def _is_zero_mean(arr: np.ndarray, m: float) -> bool:
    # zero up to the rounding error of summing arr
    tolerance = arr.size * np.finfo(float).eps * float(np.abs(arr).max())
    return abs(m) <= tolerance


# ---------------------------------------------------------------------------
# Central tendency
# ---------------------------------------------------------------------------

def mean(data: Sequence[float]) -> float:
    """Arithmetic average."""
    return float(np.mean(_as_array(data, "mean")))


def median(data: Sequence[float]) -> float:
    """Middle value of the sorted sample; mean of the two middles for even N."""
    arr = _sorted(data, "median")
    n = arr.size
    mid = n // 2
    if n % 2 == 0:
        return float((arr[mid - 1] + arr[mid]) / 2)
    return float(arr[mid])


def mode(data: Sequence[float]) -> float:
    """Most frequent value.  Ties go to the smallest value."""
    arr = _as_array(data, "mode")
    # np.unique sorts ascending and argmax picks the first maximum
    values, counts = np.unique(arr, return_counts=True)
    return float(values[int(np.argmax(counts))])


# ---------------------------------------------------------------------------
# Dispersion
# ---------------------------------------------------------------------------

def variance(data: Sequence[float]) -> float:
    """Population variance: mean squared deviation from the mean."""
    arr = _as_array(data, "variance")
    if _is_constant(arr):
        return 0.0
    return float(np.mean((arr - arr.mean()) ** 2))


def standard_deviation(data: Sequence[float]) -> float:
    """Square root of :func:`variance`."""
    return math.sqrt(variance(data))


def coefficient_of_variation(data: Sequence[float]) -> float:
    """``standard_deviation / mean * 100``.

    Raises
    ------
    DomainError
        If the mean is zero, allowing for rounding in the sum.
    """
    arr = _as_array(data, "coefficient of variation")
    m = float(arr.mean())
    if _is_zero_mean(arr, m):
        raise DomainError("coefficient of variation", "mean is zero")
    return standard_deviation(arr) / m * 100


# ---------------------------------------------------------------------------
# Order statistics
# ---------------------------------------------------------------------------

def quartile(data: Sequence[float], percentile: float) -> float:
    """Interpolated quantile using the ``(n + 1)`` rank rule.

    Parameters
    ----------
    data : Sequence[float]
        Sample, in any order.  A sorted copy is used internally.
    percentile : float
        Between 0 and 100 inclusive.

    Notes
    -----
    ``k = percentile / 100 · (n + 1)``.  With ``i = floor(k)`` clamped to
    ``[1, n - 1]`` and ``f = k - floor(k)`` the result is
    ``x[i-1] + f · (x[i] - x[i-1])`` (1-based order statistics ``x``).
    The fraction is kept even when ``i`` is clamped, so ranks outside
    ``[1, n]`` extrapolate along the first/last segment.

    At p=50 the rank is ``(n + 1) / 2`` and never clamped for ``n >= 2``,
    so the result coincides with :func:`median`.  Q1/Q3 differ from
    ``numpy.percentile``'s default (rank ``(n - 1)·p + 1``) on small
    samples: ``[1, 2, 3, 4]`` gives Q1 = 1.25 here, 1.75 there.
    """
    if not 0 <= percentile <= 100:
        raise ValueError(f"Percentile must be between 0 and 100, got {percentile}")
    arr = _sorted(data, "quartile")
    n = arr.size
    if n == 1:
        return float(arr[0])

    k = percentile / 100.0 * (n + 1)
    index = math.floor(k)
    fraction = k - index
    index = min(max(index, 1), n - 1)
    lower, upper = arr[index - 1], arr[index]
    return float(lower + fraction * (upper - lower))


def find_outliers(
    data: Sequence[float],
    factor: float = 1.5,
    *,
    lower_percentile: float = 25.0,
    upper_percentile: float = 75.0,
) -> list[float]:
    """Values strictly outside ``[Q1 - factor·IQR, Q3 + factor·IQR]``.

    Returned ascending, duplicates included.
    """
    arr = _sorted(data, "outliers")
    q1 = quartile(arr, lower_percentile)
    q3 = quartile(arr, upper_percentile)
    iqr = q3 - q1
    lower_bound = q1 - factor * iqr
    upper_bound = q3 + factor * iqr
    mask = (arr < lower_bound) | (arr > upper_bound)
    return [float(v) for v in arr[mask]]


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------

def _standardized_moment(data: Sequence[float], order: int, statistic: str) -> float:
    arr = _as_array(data, statistic)
    if _is_constant(arr):
        raise DomainError(statistic, "standard deviation is zero")
    m = float(arr.mean())
    s = math.sqrt(float(np.mean((arr - m) ** 2)))
    if s == 0:
        raise DomainError(statistic, "standard deviation is zero")
    return float(np.mean(((arr - m) / s) ** order))


def skewness(data: Sequence[float]) -> float:
    """Population skewness, the third standardized moment."""
    return _standardized_moment(data, 3, "skewness")


def kurtosis(data: Sequence[float]) -> float:
    """Excess kurtosis: fourth standardized moment minus 3."""
    return _standardized_moment(data, 4, "kurtosis") - 3.0
