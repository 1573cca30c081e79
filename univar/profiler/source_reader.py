"""
Source reader — the thin line/field splitter in front of the classifier.

Each call yields one list of text cells per line.  Cells are split on a
single fixed delimiter; there is no quoting, escaping or header handling, so
a header row is just another row of data.

Splitting rules:

* an empty line yields no cells
* a trailing delimiter does not produce a trailing empty cell
* an empty field between two delimiters *is* a cell (``""``)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from univar.errors import SourceUnreadableError

__all__ = ["split_cells", "iter_rows", "read_first_row"]

logger = logging.getLogger(__name__)


def split_cells(line: str, delimiter: str = ",") -> list[str]:
    """Split one line into cells."""
    line = line.rstrip("\r\n")
    if not line:
        return []
    cells = line.split(delimiter)
    if cells[-1] == "":
        cells.pop()
    return cells


def iter_rows(
    path: str | Path,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> Iterator[list[str]]:
    """Yield the cells of every line in *path*.

    Raises
    ------
    SourceUnreadableError
        If the file cannot be opened or is not valid *encoding* text.
    """
    path = Path(path)
    logger.debug("Reading rows from %s", path)
    try:
        with path.open("r", encoding=encoding, newline="") as f:
            for line in f:
                yield split_cells(line, delimiter)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnreadableError(path, str(exc)) from exc


def read_first_row(
    path: str | Path,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[str]:
    """Return the cells of the first line, ``[]`` for an empty file."""
    rows = iter_rows(path, delimiter=delimiter, encoding=encoding)
    try:
        return next(rows, [])
    finally:
        rows.close()
