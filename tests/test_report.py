"""Tests for core.report."""

from datetime import datetime
from unittest.mock import patch

import pytest

from core.file_handler import FileHandlerError
from core.report import render_report, write_report
from core.stats_engine import AnalysisConfig, recompute

_WHEN = datetime(2024, 3, 1, 9, 30)


class TestRenderReport:
    def test_counts_and_letters(self):
        stats = recompute("Hello. World!", AnalysisConfig())
        report = render_report(stats, AnalysisConfig(), generated_at=_WHEN)
        assert report.startswith("# Text Statistics\n")
        assert "_Generated 2024-03-01 09:30_" in report
        assert "- **Characters:** 13" in report
        assert "- **Words:** 2" in report
        assert "- **Sentences:** 2" in report
        assert "| L | 3 | 30.00% |" in report
        assert "Character limit" not in report

    def test_exclude_spaces_label(self):
        config = AnalysisConfig(exclude_spaces=True)
        report = render_report(recompute("a b", config), config, generated_at=_WHEN)
        assert "- **Characters (excluding spaces):** 2" in report

    def test_limit_status(self):
        config = AnalysisConfig(char_limit=3)
        report = render_report(recompute("abcdef", config), config, generated_at=_WHEN)
        assert "- **Character limit:** 3 (exceeded)" in report

    def test_no_letters(self):
        report = render_report(recompute("123", AnalysisConfig()), AnalysisConfig(), _WHEN)
        assert "No letters found." in report


class TestWriteReport:
    def test_writes_utf8(self, tmp_path):
        out = tmp_path / "nested" / "stats.md"
        stats = recompute("Hi.", AnalysisConfig())
        write_report(stats, AnalysisConfig(), out)
        assert out.read_text(encoding="utf-8").startswith("# Text Statistics")

    def test_wraps_os_errors(self, tmp_path):
        stats = recompute("Hi.", AnalysisConfig())
        with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
            with pytest.raises(FileHandlerError, match="Cannot write report"):
                write_report(stats, AnalysisConfig(), tmp_path / "stats.md")
