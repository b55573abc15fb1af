# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the files handed to swiftformat for each :data:`FormatStyle`."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePosixPath

from .changes import ChangeSet
from .constants import SWIFT_EXTENSION
from .models import AllFiles, ExplicitFiles, FormatStyle, ModifiedAndCreatedFiles


def is_swift_file(path: str) -> bool:
    """Return ``True`` when ``path`` carries the Swift source extension."""

    return PurePosixPath(path).suffix == SWIFT_EXTENSION


def filter_swift_files(paths: Iterable[str]) -> list[str]:
    """Keep only Swift sources from ``paths`` preserving their order."""

    return [path for path in paths if is_swift_file(path)]


def select_files(style: FormatStyle, change_set: ChangeSet | None = None) -> list[str] | None:
    """Return the explicit file list to lint for ``style``.

    Args:
        style: Selection mode requested by the caller.
        change_set: Created and modified files of the reviewed revision. Only
            consulted for :class:`ModifiedAndCreatedFiles`.

    Returns:
        list[str] | None: ``None`` for :class:`AllFiles`, where swiftformat scans a
        directory itself. Otherwise the Swift files to lint, possibly empty.

    Raises:
        ValueError: If a change set is required but missing.
    """

    match style:
        case AllFiles():
            return None
        case ModifiedAndCreatedFiles(directory=directory):
            if change_set is None:
                raise ValueError("modified-and-created selection requires a change set")
            candidates = [*change_set.created_files, *change_set.modified_files]
            if directory:
                candidates = [path for path in candidates if path.startswith(directory)]
            return filter_swift_files(candidates)
        case ExplicitFiles(files=files):
            return filter_swift_files(files)
    raise TypeError(f"unsupported format style: {style!r}")


__all__ = ["filter_swift_files", "is_swift_file", "select_files"]
