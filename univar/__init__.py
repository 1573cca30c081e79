"""
univar — univariate descriptive statistics for delimited text files.

Reads a comma-separated file of scalar values, decides whether it holds
numbers or categories, computes a fixed battery of statistics and renders
a plain-text report.

Quick start::

    from univar import analyze
    report = analyze("values.csv")
    print(report.render())
"""

from univar.config import ExtractionMode, UnivarConfig
from univar.pipeline import analyze, run

__all__ = ["ExtractionMode", "UnivarConfig", "analyze", "run"]
__version__ = "0.1.0"
