"""Tests for univar.config."""

from univar.config import ExtractionMode, UnivarConfig


def test_defaults():
    cfg = UnivarConfig()
    assert cfg.delimiter == ","
    assert cfg.extraction is ExtractionMode.CELL
    assert cfg.lower_quartile == 25.0
    assert cfg.upper_quartile == 75.0
    assert cfg.outlier_factor == 1.5
    assert cfg.report_filename == "report.txt"


def test_immutable():
    cfg = UnivarConfig()
    try:
        cfg.outlier_factor = 3.0  # type: ignore[misc]
        assert False, "Should have raised FrozenInstanceError"
    except AttributeError:
        pass


def test_custom_values():
    cfg = UnivarConfig(extraction=ExtractionMode.ROW, outlier_factor=3.0)
    assert cfg.extraction is ExtractionMode.ROW
    assert cfg.outlier_factor == 3.0
    # Ensure other defaults are unchanged
    assert cfg.number_format == "g"


def test_extraction_mode_from_string():
    assert ExtractionMode("row") is ExtractionMode.ROW
    assert ExtractionMode("cell") is ExtractionMode.CELL
