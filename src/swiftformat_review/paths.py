# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rewrite swiftformat's absolute paths into project-relative ones."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .models import Violation


class CurrentPathProvider(Protocol):
    """Supply the directory violation paths are made relative to."""

    @property
    def current_path(self) -> str:
        """Return the current project directory."""
        ...


class WorkingDirectoryProvider:
    """Report the process working directory."""

    @property
    def current_path(self) -> str:
        return os.getcwd()


@dataclass(frozen=True, slots=True)
class FixedPathProvider:
    """Report a fixed directory."""

    current_path: str


def relativize(path: str, current_directory: str) -> str:
    """Strip ``current_directory`` and then one leading ``/`` from ``path``.

    Args:
        path: Path emitted by swiftformat, usually absolute.
        current_directory: Project directory swiftformat ran in.

    Returns:
        str: ``path`` relative to ``current_directory``, or ``path`` minus a single
        leading separator when it lies elsewhere.
    """

    stripped = path.removeprefix(current_directory) if current_directory else path
    return stripped.removeprefix("/")


def normalize_paths(violations: Iterable[Violation], current_directory: str) -> list[Violation]:
    """Return copies of ``violations`` with project-relative ``file`` values."""

    return [
        violation.model_copy(update={"file": relativize(violation.file, current_directory)})
        for violation in violations
    ]


__all__ = [
    "CurrentPathProvider",
    "FixedPathProvider",
    "WorkingDirectoryProvider",
    "normalize_paths",
    "relativize",
]
