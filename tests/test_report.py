"""Tests for univar.report."""

import io

import pytest

from univar.config import UnivarConfig
from univar.errors import SinkUnwritableError
from univar.models import CategoricalSummary, DataType, NumericSummary, Report, ReportLine
from univar.report.assembler import assemble, format_number
from univar.report.sinks import ConsoleSink, FileSink


def _numeric_summary(**overrides) -> NumericSummary:
    fields = dict(
        count=5,
        mean=3.0,
        median=3.0,
        mode=1.0,
        variance=2.0,
        standard_deviation=1.5,
        coefficient_of_variation=50.0,
        skewness=0.0,
        kurtosis=-1.3,
        q1=1.5,
        q3=4.5,
        outliers=(),
    )
    fields.update(overrides)
    return NumericSummary(**fields)


def _categorical_summary() -> CategoricalSummary:
    return CategoricalSummary(
        count=4,
        mode="a",
        frequencies={"a": 3, "b": 1},
        proportions={"a": 0.75, "b": 0.25},
    )


# ── ReportLine / Report ──────────────────────────────────────────────

class TestReportModel:
    def test_line_with_value(self):
        assert ReportLine("Mean", "3").render() == "Mean: 3"

    def test_bare_label(self):
        assert ReportLine("Frequencies:").render() == "Frequencies:"

    def test_empty_value(self):
        assert ReportLine("Outliers", "").render() == "Outliers:"

    def test_render_terminates_every_line(self):
        report = Report(DataType.QUALITATIVE, (ReportLine("a"), ReportLine("b", "1")))
        assert report.render() == "a\nb: 1\n"
        assert len(report) == 2


# ── assembler ────────────────────────────────────────────────────────

class TestAssembler:
    def test_numeric_layout(self):
        report = assemble(_numeric_summary())
        assert report.data_type is DataType.QUANTITATIVE
        assert report.lines() == [
            "Quantitative Data Analysis",
            "N: 5",
            "Mean: 3",
            "Median: 3",
            "Mode: 1",
            "Variance: 2",
            "Standard Deviation: 1.5",
            "Coefficient of Variation: 50%",
            "Skewness: 0",
            "Kurtosis: -1.3",
            "Quartiles (Q1, Q3): 1.5, 4.5",
            "Outliers:",
        ]

    def test_outliers_space_separated(self):
        report = assemble(_numeric_summary(outliers=(-40.0, 100.0, 100.0)))
        assert report.lines()[-1] == "Outliers: -40 100 100"

    def test_categorical_layout(self):
        report = assemble(_categorical_summary())
        assert report.data_type is DataType.QUALITATIVE
        assert report.lines() == [
            "Qualitative Data Analysis",
            "N: 4",
            "Mode: a",
            "Frequencies:",
            "a: 3",
            "b: 1",
            "Proportions:",
            "a: 0.75",
            "b: 0.25",
        ]

    def test_number_format_from_config(self):
        cfg = UnivarConfig(number_format=".2f")
        report = assemble(_numeric_summary(mean=3.14159), cfg)
        assert "Mean: 3.14" in report.lines()

    def test_format_number_default(self):
        assert format_number(2.0) == "2"
        assert format_number(1 / 3) == "0.333333"
        assert format_number(1234567.0) == "1.23457e+06"

    def test_unknown_summary(self):
        with pytest.raises(TypeError):
            assemble({"mean": 1.0})


# ── sinks ────────────────────────────────────────────────────────────

class TestSinks:
    def test_file_sink(self, tmp_path):
        target = tmp_path / "report.txt"
        report = assemble(_categorical_summary())
        FileSink(target).write(report)
        assert target.read_text(encoding="utf-8") == report.render()

    def test_file_sink_overwrites(self, tmp_path):
        target = tmp_path / "report.txt"
        target.write_text("stale\n" * 50)
        report = assemble(_categorical_summary())
        FileSink(target).write(report)
        assert target.read_text(encoding="utf-8") == report.render()

    def test_file_sink_unwritable(self, tmp_path):
        sink = FileSink(tmp_path / "no_such_dir" / "report.txt")
        with pytest.raises(SinkUnwritableError):
            sink.write(assemble(_categorical_summary()))

    def test_console_sink_stream(self):
        buf = io.StringIO()
        report = assemble(_numeric_summary())
        ConsoleSink(buf).write(report)
        assert buf.getvalue() == report.render()

    def test_console_sink_stdout(self, capsys):
        report = assemble(_categorical_summary())
        ConsoleSink().write(report)
        assert capsys.readouterr().out == report.render()

    def test_console_sink_closed_stream(self):
        buf = io.StringIO()
        buf.close()
        with pytest.raises(SinkUnwritableError):
            ConsoleSink(buf).write(assemble(_categorical_summary()))
