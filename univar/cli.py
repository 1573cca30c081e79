"""
univar CLI — descriptive statistics report for a delimited text file.

Usage::

    univar values.csv                       # writes report.txt
    univar values.csv --output stats.txt
    univar values.csv --console             # prints the report instead
    univar values.csv --extraction row      # keep rows whole when splitting

Exit status is 0 on success, 1 when the input cannot be read or analysed or
the report cannot be written, and 2 on a command-line usage error.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from univar.config import ExtractionMode, UnivarConfig
from univar.errors import UnivarError
from univar.pipeline import run
from univar.report.sinks import ConsoleSink, FileSink

console = Console()
err_console = Console(stderr=True)

_DEFAULTS = UnivarConfig()


def _setup_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("univar").setLevel(level)


@click.command()
@click.version_option(package_name="univar")
@click.argument("input_file", metavar="INPUT", type=click.Path(path_type=Path))
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=_DEFAULTS.report_filename, show_default=True,
    help="Report file.",
)
@click.option("--console", "to_console", is_flag=True, help="Print the report to stdout instead of writing a file.")
@click.option(
    "--extraction",
    type=click.Choice([m.value for m in ExtractionMode]),
    default=_DEFAULTS.extraction.value, show_default=True,
    help="Route cells one by one (cell) or keep each row whole (row).",
)
@click.option("--verbose", "-v", is_flag=True, help="Debug logging.")
def main(
    input_file: Path,
    output: Path,
    to_console: bool,
    extraction: str,
    verbose: bool,
) -> None:
    """Classify INPUT as numeric or categorical and report its statistics."""
    _setup_logging(verbose, quiet=to_console)

    cfg = UnivarConfig(extraction=ExtractionMode(extraction), report_filename=str(output))
    sink = ConsoleSink() if to_console else FileSink(output, encoding=cfg.encoding)

    try:
        run(input_file, sink, cfg)
    except UnivarError as exc:
        err_console.print(f"[red]Error:[/] {escape(str(exc))}", soft_wrap=True)
        sys.exit(1)

    if not to_console:
        console.print(f"Report generated: {escape(str(output))}", soft_wrap=True, highlight=False)


if __name__ == "__main__":
    main()
