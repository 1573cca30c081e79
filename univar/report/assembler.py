"""
Report assembler — summary in, ordered lines out.

Pure serialization: every number is already computed in the summary, and
nothing here touches a file or a stream.

Numeric layout::

    Quantitative Data Analysis
    N / Mean / Median / Mode / Variance / Standard Deviation /
    Coefficient of Variation (%) / Skewness / Kurtosis /
    Quartiles (Q1, Q3) / Outliers

Categorical layout::

    Qualitative Data Analysis
    N / Mode / Frequencies: (one line per key) / Proportions: (same order)
"""

from __future__ import annotations

from functools import singledispatch

from univar.config import UnivarConfig
from univar.models.data_type import DataType
from univar.models.report import Report, ReportLine
from univar.models.summary import CategoricalSummary, NumericSummary

__all__ = ["assemble", "format_number"]


def format_number(value: float, spec: str = "g") -> str:
    """Render one float the same way everywhere in a report."""
    return format(value, spec)


@singledispatch
def assemble(summary, cfg: UnivarConfig = UnivarConfig()) -> Report:
    """Build the :class:`Report` for *summary*."""
    raise TypeError(f"No report layout for {type(summary).__name__}")


@assemble.register
def _(summary: NumericSummary, cfg: UnivarConfig = UnivarConfig()) -> Report:
    def fmt(v: float) -> str:
        return format_number(v, cfg.number_format)

    entries = (
        ReportLine(f"{DataType.QUANTITATIVE.title} Analysis"),
        ReportLine("N", str(summary.count)),
        ReportLine("Mean", fmt(summary.mean)),
        ReportLine("Median", fmt(summary.median)),
        ReportLine("Mode", fmt(summary.mode)),
        ReportLine("Variance", fmt(summary.variance)),
        ReportLine("Standard Deviation", fmt(summary.standard_deviation)),
        ReportLine("Coefficient of Variation", f"{fmt(summary.coefficient_of_variation)}%"),
        ReportLine("Skewness", fmt(summary.skewness)),
        ReportLine("Kurtosis", fmt(summary.kurtosis)),
        ReportLine("Quartiles (Q1, Q3)", f"{fmt(summary.q1)}, {fmt(summary.q3)}"),
        ReportLine("Outliers", " ".join(fmt(v) for v in summary.outliers)),
    )
    return Report(DataType.QUANTITATIVE, entries)


@assemble.register
def _(summary: CategoricalSummary, cfg: UnivarConfig = UnivarConfig()) -> Report:
    entries = [
        ReportLine(f"{DataType.QUALITATIVE.title} Analysis"),
        ReportLine("N", str(summary.count)),
        ReportLine("Mode", summary.mode),
        ReportLine("Frequencies:"),
    ]
    entries.extend(ReportLine(key, str(count)) for key, count in summary.frequencies.items())
    entries.append(ReportLine("Proportions:"))
    entries.extend(
        ReportLine(key, format_number(share, cfg.number_format))
        for key, share in summary.proportions.items()
    )
    return Report(DataType.QUALITATIVE, tuple(entries))
