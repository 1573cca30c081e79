"""
Samples — the in-memory value sequences the estimators consume.

A file is split into a :class:`NumericSample` and a
:class:`CategoricalSample` by the classifier; the verdict then picks exactly
one of them as the :data:`Sample` that flows through the rest of the
pipeline.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

import numpy as np

__all__ = ["NumericSample", "CategoricalSample", "Sample"]


@dataclass(frozen=True, slots=True)
class NumericSample:
    """Ordered, read-only sequence of floats.

    Order is the row-major, column-major order of the source cells.
    """

    values: tuple[float, ...] = ()

    @classmethod
    def of(cls, values: Iterable[float]) -> NumericSample:
        return cls(tuple(float(v) for v in values))

    def sorted_values(self) -> np.ndarray:
        """Return a new ascending array; the sample itself is untouched."""
        return np.sort(np.asarray(self.values, dtype=float))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __getitem__(self, idx: int) -> float:
        return self.values[idx]


@dataclass(frozen=True, slots=True)
class CategoricalSample:
    """Ordered, read-only sequence of text values."""

    values: tuple[str, ...] = ()

    @classmethod
    def of(cls, values: Iterable[str]) -> CategoricalSample:
        return cls(tuple(str(v) for v in values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __getitem__(self, idx: int) -> str:
        return self.values[idx]


Sample = Union[NumericSample, CategoricalSample]
"""Tagged union resolved once by the classifier."""
