"""Core data-model classes used throughout univar."""

from univar.models.data_type import DataType
from univar.models.report import Report, ReportLine
from univar.models.sample import CategoricalSample, NumericSample, Sample
from univar.models.summary import CategoricalSummary, NumericSummary, Summary

__all__ = [
    "DataType",
    "NumericSample",
    "CategoricalSample",
    "Sample",
    "NumericSummary",
    "CategoricalSummary",
    "Summary",
    "ReportLine",
    "Report",
]
