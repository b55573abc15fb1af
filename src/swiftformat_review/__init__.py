# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run SwiftFormat in lint mode and report its findings into a code review."""

from __future__ import annotations

from importlib import metadata

from .models import (
    AllFiles,
    BinaryPath,
    ExplicitFiles,
    FormatStyle,
    ModifiedAndCreatedFiles,
    SwiftPackagePath,
    ToolInvocationPath,
    Violation,
)
from .orchestrator import FormatOptions, run_swiftformat
from .severity import Severity

__all__ = [
    "AllFiles",
    "BinaryPath",
    "ExplicitFiles",
    "FormatOptions",
    "FormatStyle",
    "ModifiedAndCreatedFiles",
    "Severity",
    "SwiftPackagePath",
    "ToolInvocationPath",
    "Violation",
    "__version__",
    "run_swiftformat",
]

try:
    __version__ = metadata.version("swiftformat-review")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
