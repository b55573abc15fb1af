# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the swiftformat command for the current project."""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path
from typing import Final

from .constants import PACKAGE_MANIFEST, SWIFT_RUN_COMMAND, SWIFTFORMAT_EXECUTABLE
from .models import ToolInvocationPath

ManifestReader = Callable[[Path], str | None]

SWIFTFORMAT_DEPENDENCY_PATTERN: Final[re.Pattern[str]] = re.compile(r"\.package\(.*SwiftFormat.*")


def read_manifest(path: Path) -> str | None:
    """Return the manifest text at ``path`` or ``None`` when it cannot be read."""

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def declares_swiftformat_dependency(manifest: str) -> bool:
    """Return ``True`` when a ``Package.swift`` body depends on SwiftFormat."""

    return SWIFTFORMAT_DEPENDENCY_PATTERN.search(manifest) is not None


def default_tool_command(
    manifest_path: Path = Path(PACKAGE_MANIFEST),
    *,
    reader: ManifestReader = read_manifest,
) -> list[str]:
    """Return the command used when no explicit swiftformat path is configured.

    A package that declares SwiftFormat as a dependency builds and runs it via
    ``swift run``; otherwise the ``swiftformat`` binary on ``PATH`` is used.

    Args:
        manifest_path: Location of the Swift package manifest.
        reader: Callable returning the manifest text, or ``None`` when absent.

    Returns:
        list[str]: Argv prefix that launches swiftformat.
    """

    manifest = reader(manifest_path)
    if manifest is not None and declares_swiftformat_dependency(manifest):
        return list(SWIFT_RUN_COMMAND)
    return [SWIFTFORMAT_EXECUTABLE]


def resolve_tool_command(
    override: ToolInvocationPath | None,
    manifest_path: Path = Path(PACKAGE_MANIFEST),
    *,
    reader: ManifestReader = read_manifest,
) -> list[str]:
    """Return the argv prefix for ``override`` or fall back to :func:`default_tool_command`."""

    if override is not None:
        return override.command
    return default_tool_command(manifest_path, reader=reader)


__all__ = [
    "ManifestReader",
    "SWIFTFORMAT_DEPENDENCY_PATTERN",
    "declares_swiftformat_dependency",
    "default_tool_command",
    "read_manifest",
    "resolve_tool_command",
]
