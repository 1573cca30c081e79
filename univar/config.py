"""
univar configuration — every tunable knob in one place.

Override any default by keyword, e.g.
``UnivarConfig(extraction=ExtractionMode.ROW, ...)``.

Where each knob is used
-----------------------
- delimiter / encoding       → line/field splitter in the source reader
- extraction                 → cell vs. row routing in ``classifier.extract``
- lower/upper_quartile       → Q1/Q3 of the report and the outlier fence
- outlier_factor             → the 1.5 × IQR robust-range rule
- number_format              → float rendering in the report assembler
- report_filename            → default file sink target
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["ExtractionMode", "UnivarConfig"]


class ExtractionMode(str, Enum):
    """How cells are routed into the numeric and categorical samples.

    - CELL → every cell decided on its own (a text file may still feed
      numbers into the numeric sample)
    - ROW  → a row is numeric only when every one of its cells parses;
      otherwise the whole row is categorical
    """
    CELL = "cell"
    ROW = "row"


@dataclass(frozen=True)
class UnivarConfig:
    """Immutable configuration for all univar subsystems."""

    # ── Source reading ───────────────────────────────────────────────
    delimiter: str = ","
    """Cell separator.  Fixed: no quoting or escaping is recognised."""

    encoding: str = "utf-8"
    """Text encoding of the input file."""

    extraction: ExtractionMode = ExtractionMode.CELL
    """Cell routing policy for ``extract``."""

    # ── Order statistics / outliers ──────────────────────────────────
    lower_quartile: float = 25.0
    """Percentile reported as Q1 and used for the lower outlier fence."""

    upper_quartile: float = 75.0
    """Percentile reported as Q3 and used for the upper outlier fence."""

    outlier_factor: float = 1.5
    """IQR multiplier of the fences ``[Q1 - f·IQR, Q3 + f·IQR]``."""

    # ── Report ───────────────────────────────────────────────────────
    number_format: str = "g"
    """``format()`` spec for floats.  ``g`` gives six significant digits."""

    report_filename: str = "report.txt"
    """Default destination of the file sink."""
