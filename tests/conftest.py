# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from swiftformat_review.reporting import RecordingSurface


@dataclass(slots=True)
class Invocation:
    """One recorded executor call."""

    command: list[str]
    arguments: list[str]
    environment: dict[str, str]
    output_file: Path


@dataclass(slots=True)
class FakeExecutor:
    """Record invocations and write a canned report."""

    report: str | None = "[]"
    invocations: list[Invocation] = field(default_factory=list)

    def execute(
        self,
        command: Sequence[str],
        arguments: Sequence[str],
        environment: Mapping[str, str],
        output_file: Path,
    ) -> None:
        self.invocations.append(Invocation(list(command), list(arguments), dict(environment), output_file))
        if self.report is not None:
            output_file.write_text(self.report, encoding="utf-8")


@dataclass(slots=True)
class RecordingDeleter:
    """Delete reports while remembering which paths were requested."""

    deleted: list[Path] = field(default_factory=list)

    def delete_report(self, path: Path) -> None:
        self.deleted.append(path)
        path.unlink()


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def deleter() -> RecordingDeleter:
    return RecordingDeleter()


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    return tmp_path / "swiftformatReport.json"
