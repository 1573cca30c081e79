"""
Run the estimator set that matches a sample.

:func:`summarize` dispatches on the sample variant, so the verdict is
checked once (in :func:`~univar.profiler.classifier.resolve_sample`) and
never again.
"""

from __future__ import annotations

import logging
from functools import singledispatch

from univar.config import UnivarConfig
from univar.models.sample import CategoricalSample, NumericSample
from univar.models.summary import CategoricalSummary, NumericSummary
from univar.stats import categorical, numeric

__all__ = ["summarize"]

logger = logging.getLogger(__name__)


@singledispatch
def summarize(sample, cfg: UnivarConfig = UnivarConfig()):
    """Compute every statistic of *sample*."""
    raise TypeError(f"Cannot summarize {type(sample).__name__}")


@summarize.register
def _(sample: NumericSample, cfg: UnivarConfig = UnivarConfig()) -> NumericSummary:
    logger.debug("Computing numeric statistics over %d values", len(sample))
    return NumericSummary(
        count=len(sample),
        mean=numeric.mean(sample),
        median=numeric.median(sample),
        mode=numeric.mode(sample),
        variance=numeric.variance(sample),
        standard_deviation=numeric.standard_deviation(sample),
        coefficient_of_variation=numeric.coefficient_of_variation(sample),
        skewness=numeric.skewness(sample),
        kurtosis=numeric.kurtosis(sample),
        q1=numeric.quartile(sample, cfg.lower_quartile),
        q3=numeric.quartile(sample, cfg.upper_quartile),
        outliers=tuple(
            numeric.find_outliers(
                sample,
                cfg.outlier_factor,
                lower_percentile=cfg.lower_quartile,
                upper_percentile=cfg.upper_quartile,
            )
        ),
    )


@summarize.register
def _(sample: CategoricalSample, cfg: UnivarConfig = UnivarConfig()) -> CategoricalSummary:
    logger.debug("Computing categorical statistics over %d values", len(sample))
    return CategoricalSummary(
        count=len(sample),
        mode=categorical.mode(sample),
        frequencies=categorical.frequency(sample),
        proportions=categorical.proportion(sample),
    )
