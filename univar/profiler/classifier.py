"""
Classifier — type detection and sample extraction.

Two passes over the source, deliberately asymmetric:

* :func:`classify` looks at the **first row only** and decides the overall
  :class:`~univar.models.data_type.DataType`.  Later rows are never checked
  for consistency.
* :func:`extract` reads **every cell** and routes it to the numeric or the
  categorical sample.  In ``CELL`` mode a "qualitative" file can still feed
  numbers into the numeric sample; ``ROW`` mode keeps each row whole.

:func:`resolve_sample` then picks the one sample the verdict asks for, so
downstream code never re-checks the type.

Neither pass raises on an unreadable source: ``classify`` answers
``UNKNOWN`` and ``extract`` returns two empty samples.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from univar.config import ExtractionMode, UnivarConfig
from univar.errors import SourceUnreadableError, UnresolvedTypeError
from univar.models.data_type import DataType
from univar.models.sample import CategoricalSample, NumericSample, Sample
from univar.profiler.source_reader import iter_rows, read_first_row

__all__ = ["parse_cell", "classify", "extract", "resolve_sample"]

logger = logging.getLogger(__name__)


def parse_cell(cell: str) -> float | None:
    """Parse *cell* as a finite float, ``None`` if it is not one.

    Surrounding whitespace is ignored.  ``nan`` / ``inf`` spellings and
    Python-only literals such as ``1_000`` are treated as text.
    """
    if "_" in cell:
        return None
    try:
        value = float(cell)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return value


def classify(path: str | Path, cfg: UnivarConfig = UnivarConfig()) -> DataType:
    """Decide the data type of *path* from its first row."""
    try:
        first = read_first_row(path, delimiter=cfg.delimiter, encoding=cfg.encoding)
    except SourceUnreadableError as exc:
        logger.warning("%s", exc)
        return DataType.UNKNOWN

    for cell in first:
        if parse_cell(cell) is None:
            logger.debug("First row cell %r is not numeric → QUALITATIVE", cell)
            return DataType.QUALITATIVE
    return DataType.QUANTITATIVE


def extract(
    path: str | Path,
    cfg: UnivarConfig = UnivarConfig(),
) -> tuple[NumericSample, CategoricalSample]:
    """Split every cell of *path* into a numeric and a categorical sample.

    Order inside each sample is row-major, then column-major.
    """
    numeric: list[float] = []
    categorical: list[str] = []
    try:
        for row in iter_rows(path, delimiter=cfg.delimiter, encoding=cfg.encoding):
            parsed = [parse_cell(cell) for cell in row]
            if cfg.extraction is ExtractionMode.ROW:
                if all(v is not None for v in parsed):
                    numeric.extend(parsed)
                else:
                    categorical.extend(row)
                continue
            for cell, value in zip(row, parsed):
                if value is None:
                    categorical.append(cell)
                else:
                    numeric.append(value)
    except SourceUnreadableError as exc:
        logger.warning("%s", exc)
        return NumericSample(), CategoricalSample()

    logger.debug(
        "Extracted %d numeric and %d categorical cells from %s (%s mode)",
        len(numeric), len(categorical), path, cfg.extraction.value,
    )
    return NumericSample.of(numeric), CategoricalSample.of(categorical)


def resolve_sample(
    verdict: DataType,
    numeric: NumericSample,
    categorical: CategoricalSample,
    *,
    path: str | Path = "<input>",
) -> Sample:
    """Return the sample matching *verdict*.

    Raises
    ------
    UnresolvedTypeError
        If *verdict* is ``UNKNOWN``.
    """
    if not verdict.is_resolved():
        raise UnresolvedTypeError(path)
    if verdict is DataType.QUANTITATIVE:
        return numeric
    return categorical
