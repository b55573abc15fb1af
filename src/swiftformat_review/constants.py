# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across swiftformat_review modules."""

from __future__ import annotations

from typing import Final

SWIFT_EXTENSION: Final[str] = ".swift"
SWIFTFORMAT_EXECUTABLE: Final[str] = "swiftformat"
SWIFT_RUN_COMMAND: Final[tuple[str, ...]] = ("swift", "run", SWIFTFORMAT_EXECUTABLE)
PACKAGE_MANIFEST: Final[str] = "Package.swift"
REPORT_FILE_NAME: Final[str] = "swiftformatReport.json"

# swiftformat reads ``--scriptinput`` files the same way Xcode build phases
# expose them, which sidesteps ARG_MAX for large change sets.
SCRIPT_INPUT_FILE_COUNT: Final[str] = "SCRIPT_INPUT_FILE_COUNT"
SCRIPT_INPUT_FILE_PREFIX: Final[str] = "SCRIPT_INPUT_FILE_"

LINT_ARGUMENTS: Final[tuple[str, ...]] = ("--lint", "--lenient", "--reporter", "json")
QUIET_FLAG: Final[str] = "--quiet"
CONFIG_FLAG: Final[str] = "--config"
PATH_FLAG: Final[str] = "--path"
SCRIPT_INPUT_FLAG: Final[str] = "--scriptinput"
CURRENT_DIRECTORY_ARGUMENT: Final[str] = "."

MARKDOWN_HEADER: Final[str] = "### SwiftFormat found issues"
MARKDOWN_TABLE_HEADER: Final[str] = "| Severity | File | Reason |"
MARKDOWN_TABLE_DIVIDER: Final[str] = "| -------- | ---- | ------ |"
