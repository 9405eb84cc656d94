"""
Tests for the explicit export step.
"""

import json
from datetime import datetime

import pytest

from proplogic import process
from proplogic.export import (
    ExportError,
    export_filename,
    export_json,
    export_result,
    format_console_report,
    format_export,
    result_digest,
)

FIXED_NOW = datetime(2026, 10, 19, 12, 30, 5)


class TestExportResult:
    """Test the timestamped text export."""

    def test_filename(self):
        assert export_filename(FIXED_NOW) == "export_20261019_123005.txt"
        assert export_filename(FIXED_NOW, prefix="run_") == "run_20261019_123005.txt"

    def test_writes_three_sections(self, tmp_path):
        result = process("¬(P↔Q)")
        path = export_result(result, tmp_path, now=FIXED_NOW)
        assert path == tmp_path / "export_20261019_123005.txt"
        text = path.read_text(encoding="utf-8")
        assert text == format_export(result)
        assert text.startswith("LaTeX proposition:\n\\(\\neg (P\\leftrightarrow Q)\\)\n\n")
        assert "Step analysis:\n(P↔Q)\n(¬(P↔Q))\n\n" in text
        assert "Detailed LaTeX table:\n\\begin{tabular}" in text

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "exports"
        path = export_result(process("P"), target, now=FIXED_NOW)
        assert path.parent == target
        assert path.exists()

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(ExportError) as exc_info:
            export_result(process("P"), blocker / "sub", now=FIXED_NOW)
        assert isinstance(exc_info.value, OSError)
        assert exc_info.value.path == blocker / "sub"

    def test_same_second_does_not_overwrite(self, tmp_path):
        first = export_result(process("P∧Q"), tmp_path, now=FIXED_NOW)
        second = export_result(process("P∨Q"), tmp_path, now=FIXED_NOW)
        third = export_result(process("P→Q"), tmp_path, now=FIXED_NOW)
        assert first.name == "export_20261019_123005.txt"
        assert second.name == "export_20261019_123005_1.txt"
        assert third.name == "export_20261019_123005_2.txt"
        assert first.read_text(encoding="utf-8") == format_export(process("P∧Q"))
        assert second.read_text(encoding="utf-8") == format_export(process("P∨Q"))

    def test_counter_suffix(self):
        assert export_filename(FIXED_NOW, counter=3) == "export_20261019_123005_3.txt"

    def test_process_does_not_write(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        process("P∧Q")
        assert list(tmp_path.iterdir()) == []


class TestExportJson:
    def test_digest_is_stable(self, tmp_path):
        result = process("P∨Q")
        path = export_json(result, tmp_path / "out.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["sha256"] == result_digest(result)
        assert data["sha256"] == result_digest(process("P∨Q"))
        assert len(data["sha256"]) == 64
        assert data["formula"] == "P∨Q"

    def test_digest_changes_with_formula(self):
        assert result_digest(process("P∨Q")) != result_digest(process("P∧Q"))


def test_console_report():
    report = format_console_report(process("P→Q"))
    lines = report.splitlines()
    assert lines[0] == "Formula: P→Q"
    assert "--- Step analysis ---" in lines
    assert "--- LaTeX detailed table ---" in lines
