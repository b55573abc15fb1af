# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lifetime management for the transient SwiftFormat report file."""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Protocol

from .constants import REPORT_FILE_NAME

LOGGER = logging.getLogger(__name__)


def default_report_path() -> Path:
    """Return the well-known report location inside the system temp directory."""

    return Path(tempfile.gettempdir()) / REPORT_FILE_NAME


class ReportDeleter(Protocol):
    """Remove a report file once it has been consumed."""

    def delete_report(self, path: Path) -> None:
        """Delete the report stored at ``path``."""
        ...


class FileReportDeleter:
    """Delete report files from the local filesystem."""

    def delete_report(self, path: Path) -> None:
        path.unlink()


@contextmanager
def transient_report(path: Path, deleter: ReportDeleter | None = None) -> Iterator[Path]:
    """Yield ``path`` and delete it when the block exits, however it exits.

    Cleanup is best-effort: a missing or undeletable file is ignored.

    Args:
        path: Location the tool writes its report to.
        deleter: Strategy used to remove the report. Defaults to
            :class:`FileReportDeleter`.

    Yields:
        Path: The report path, unchanged.
    """

    active_deleter = deleter or FileReportDeleter()
    try:
        yield path
    finally:
        try:
            active_deleter.delete_report(path)
        except OSError as exc:
            LOGGER.debug("report cleanup skipped for %s: %s", path, exc)


__all__ = ["FileReportDeleter", "ReportDeleter", "default_report_path", "transient_report"]
