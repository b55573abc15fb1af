# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for subprocess helpers and the shell executor."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from swiftformat_review.process import (
    CommandOptions,
    ShellExecutor,
    build_input_environment,
    run_command,
)


def test_build_input_environment_indexes_from_zero() -> None:
    environment = build_input_environment(["a.swift", "Sources/b.swift"])

    assert environment == {
        "SCRIPT_INPUT_FILE_COUNT": "2",
        "SCRIPT_INPUT_FILE_0": "a.swift",
        "SCRIPT_INPUT_FILE_1": "Sources/b.swift",
    }


def test_run_command_captures_output() -> None:
    completed = run_command(
        [sys.executable, "-c", "print('hello')"],
        options=CommandOptions(capture_output=True),
    )

    assert completed.returncode == 0
    assert completed.stdout.strip() == "hello"


def test_run_command_leaves_exit_status_to_caller() -> None:
    completed = run_command([sys.executable, "-c", "raise SystemExit(3)"], options=CommandOptions(capture_output=True))

    assert completed.returncode == 3


def test_run_command_raises_when_timeout_elapses() -> None:
    with pytest.raises(subprocess.TimeoutExpired):
        run_command(
            [sys.executable, "-c", "import time; time.sleep(5)"],
            options=CommandOptions(capture_output=True, timeout=0.2),
        )


def test_run_command_rejects_empty_args() -> None:
    with pytest.raises(ValueError):
        run_command([])


def test_run_command_reports_missing_executable() -> None:
    with pytest.raises(FileNotFoundError):
        run_command(["definitely-not-a-real-swiftformat-binary"])


def test_shell_executor_writes_stdout_and_passes_environment(tmp_path: Path) -> None:
    output = tmp_path / "nested" / "report.json"
    script = "import os; print(os.environ['SCRIPT_INPUT_FILE_COUNT'] + ':' + os.environ['SCRIPT_INPUT_FILE_0'])"

    ShellExecutor().execute([sys.executable], ["-c", script], build_input_environment(["A.swift"]), output)

    assert output.read_text(encoding="utf-8").strip() == "1:A.swift"


def test_shell_executor_keeps_output_of_failing_tool(tmp_path: Path) -> None:
    output = tmp_path / "report.json"
    script = "print('[]'); raise SystemExit(1)"

    ShellExecutor().execute([sys.executable], ["-c", script], {}, output)

    assert output.read_text(encoding="utf-8").strip() == "[]"


def test_shell_executor_swallows_missing_executable(tmp_path: Path) -> None:
    output = tmp_path / "report.json"

    ShellExecutor().execute(["definitely-not-a-real-swiftformat-binary"], ["--lint"], {}, output)

    assert not output.exists()


def test_shell_executor_abandons_tool_after_timeout(tmp_path: Path) -> None:
    output = tmp_path / "report.json"

    ShellExecutor(timeout=0.5).execute([sys.executable], ["-c", "import time; time.sleep(5)"], {}, output)

    assert not output.exists()


def test_shell_executor_swallows_unwritable_report(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")
    output = blocker / "report.json"

    ShellExecutor().execute([sys.executable], ["-c", "print('[]')"], {}, output)

    assert not output.exists()
