# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for transient report cleanup."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from swiftformat_review.report_store import FileReportDeleter, default_report_path, transient_report


def test_default_report_path_lives_in_temp_dir() -> None:
    assert default_report_path() == Path(tempfile.gettempdir()) / "swiftformatReport.json"


def test_transient_report_deletes_file_on_success(tmp_path: Path) -> None:
    report = tmp_path / "report.json"

    with transient_report(report) as path:
        path.write_text("[]", encoding="utf-8")

    assert not report.exists()


def test_transient_report_deletes_file_when_body_raises(tmp_path: Path) -> None:
    report = tmp_path / "report.json"

    with pytest.raises(RuntimeError), transient_report(report) as path:
        path.write_text("[]", encoding="utf-8")
        raise RuntimeError("boom")

    assert not report.exists()


def test_transient_report_ignores_missing_file(tmp_path: Path) -> None:
    report = tmp_path / "never-written.json"

    with transient_report(report, FileReportDeleter()):
        pass

    assert not report.exists()
