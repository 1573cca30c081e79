"""
Report — the terminal artefact of a run.

An ordered, immutable sequence of labelled lines.  Rendering is the only
operation; where the text goes is decided by a sink.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from univar.models.data_type import DataType

__all__ = ["ReportLine", "Report"]


@dataclass(frozen=True, slots=True)
class ReportLine:
    """One ``label: value`` line.  ``value=None`` renders the bare label."""

    label: str
    value: str | None = None

    def render(self) -> str:
        if self.value is None:
            return self.label
        if not self.value:
            return f"{self.label}:"
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class Report:
    data_type: DataType
    entries: tuple[ReportLine, ...]

    def lines(self) -> list[str]:
        return [entry.render() for entry in self.entries]

    def render(self) -> str:
        """Full text, every line newline-terminated."""
        return "".join(f"{line}\n" for line in self.lines())

    def __iter__(self) -> Iterator[ReportLine]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
