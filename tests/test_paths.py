# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for violation path normalisation."""

from __future__ import annotations

from pathlib import Path

import pytest

from swiftformat_review.models import Violation
from swiftformat_review.paths import FixedPathProvider, WorkingDirectoryProvider, normalize_paths, relativize


def test_relativize_strips_directory_and_separator() -> None:
    assert relativize("/root/project/Sources/A.swift", "/root/project") == "Sources/A.swift"


def test_relativize_leaves_unrelated_relative_paths() -> None:
    assert relativize("Sources/A.swift", "/root/project") == "Sources/A.swift"


def test_relativize_strips_only_one_separator() -> None:
    assert relativize("/root/project//A.swift", "/root/project") == "/A.swift"


def test_relativize_with_empty_directory_strips_leading_separator() -> None:
    assert relativize("/A.swift", "") == "A.swift"


def test_normalize_paths_returns_updated_copies() -> None:
    original = Violation(file="/root/project/Sources/A.swift", line=4, reason="x", rule_id="r")

    [normalized] = normalize_paths([original], FixedPathProvider("/root/project").current_path)

    assert normalized.file == "Sources/A.swift"
    assert original.file == "/root/project/Sources/A.swift"


def test_working_directory_provider_reports_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert Path(WorkingDirectoryProvider().current_path).resolve() == tmp_path.resolve()
