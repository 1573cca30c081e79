"""
Data-type verdict produced by the classifier.
"""

from __future__ import annotations

from enum import Enum


class DataType(Enum):
    """Overall kind of an input file.

    Decided from the first row only:
    - QUANTITATIVE → every cell of the first row parses as a number
    - QUALITATIVE  → at least one cell of the first row does not
    - UNKNOWN      → the source could not be read at all
    """
    QUANTITATIVE = 0
    QUALITATIVE = 1
    UNKNOWN = 2

    def is_resolved(self) -> bool:
        """Return *True* when the verdict can drive an analysis."""
        return self is not DataType.UNKNOWN

    @property
    def title(self) -> str:
        """Human label used as the report heading."""
        return f"{self.name.capitalize()} Data"
