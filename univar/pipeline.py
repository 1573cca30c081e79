"""
univar — end-to-end pipeline: classify → extract → summarize → assemble → sink.

One linear pass per input, no retries and no partial re-entry.  Any error
other than an unparseable cell aborts the run before a sink is touched, so a
fatal error never leaves a half-written report behind.

Usage::

    from univar.pipeline import analyze, run
    from univar.report.sinks import ConsoleSink

    report = analyze("values.csv")
    run("values.csv", ConsoleSink())
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from univar.config import UnivarConfig
from univar.models.report import Report
from univar.profiler.classifier import classify, extract, resolve_sample
from univar.report.assembler import assemble
from univar.report.sinks import ReportSink
from univar.stats.summary import summarize

__all__ = ["analyze", "run"]

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────
# Pipeline stages
# ─────────────────────────────────────────────────────────────────────

def analyze(path: str | Path, cfg: UnivarConfig = UnivarConfig()) -> Report:
    """Build the report for *path* without emitting it.

    Raises
    ------
    UnresolvedTypeError
        The source could not be classified.
    EmptySampleError
        The selected sample has no values.
    DomainError
        A ratio statistic is undefined for this sample.
    """
    t0 = time.perf_counter()

    verdict = classify(path, cfg)
    logger.info("Classified %s as %s", path, verdict.name)

    numeric, categorical = extract(path, cfg)
    logger.info(
        "Extracted %d numeric / %d categorical values",
        len(numeric), len(categorical),
    )

    sample = resolve_sample(verdict, numeric, categorical, path=path)
    summary = summarize(sample, cfg)
    report = assemble(summary, cfg)

    logger.debug("Analysis of %s finished in %.3fs", path, time.perf_counter() - t0)
    return report


def run(
    path: str | Path,
    sink: ReportSink,
    cfg: UnivarConfig = UnivarConfig(),
) -> Report:
    """Analyze *path* and hand the finished report to *sink*."""
    report = analyze(path, cfg)
    sink.write(report)
    return report
