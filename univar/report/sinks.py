"""
Report sinks — where a rendered report ends up.

A report is either written to a file (``report.txt`` by default) or
printed to the console.  The caller picks one sink and
owns it for exactly one write.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Protocol, TextIO

from univar.errors import SinkUnwritableError
from univar.models.report import Report

__all__ = ["ReportSink", "FileSink", "ConsoleSink"]

logger = logging.getLogger(__name__)


class ReportSink(Protocol):
    """Protocol all sinks satisfy."""

    def write(self, report: Report) -> None:
        ...


class FileSink:
    """Write the report to a text file, replacing any previous content.

    Parameters
    ----------
    path : str | Path
        Destination file.  Its parent directory must exist.
    encoding : str
        File encoding.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def write(self, report: Report) -> None:
        text = report.render()
        try:
            with self.path.open("w", encoding=self.encoding, newline="\n") as f:
                f.write(text)
        except OSError as exc:
            raise SinkUnwritableError(self.path, str(exc)) from exc
        logger.info("Wrote %d report lines to %s", len(report), self.path)

    def __repr__(self) -> str:
        return f"FileSink({str(self.path)!r})"


class ConsoleSink:
    """Write the report to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def write(self, report: Report) -> None:
        # looked up at write time, not at construction
        stream = self.stream if self.stream is not None else sys.stdout
        try:
            stream.write(report.render())
            stream.flush()
        except (OSError, ValueError) as exc:
            raise SinkUnwritableError("console", str(exc)) from exc

    def __repr__(self) -> str:
        return "ConsoleSink()"
