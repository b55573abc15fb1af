# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decode SwiftFormat JSON reports into :class:`Violation` records."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Final

from pydantic import TypeAdapter, ValidationError

from .models import Violation

LOGGER = logging.getLogger(__name__)

FailureSink = Callable[[str], None]

_REPORT_ADAPTER: Final[TypeAdapter[list[Violation]]] = TypeAdapter(list[Violation])


def parse_report(report: str, fail: FailureSink) -> list[Violation]:
    """Decode ``report`` and return its violations.

    An empty report means swiftformat found nothing (or produced nothing) and
    yields an empty list. Any other undecodable content is passed to ``fail``
    together with the decoding error; the function itself never raises.

    Args:
        report: Raw JSON text produced by ``swiftformat --reporter json``.
        fail: Sink receiving a single failure message when decoding fails.

    Returns:
        list[Violation]: Decoded violations, each with the default severity.
    """

    if not report.strip():
        return []
    try:
        return _REPORT_ADAPTER.validate_json(report)
    except ValidationError as exc:
        LOGGER.debug("failed to decode swiftformat report: %s", exc)
        fail(f"Error deserializing SwiftFormat JSON response ({report}): {exc}")
        return []


def read_report(path: Path) -> str | None:
    """Return the report text at ``path`` or ``None`` when it cannot be read.

    A missing report is distinct from an empty one: swiftformat always writes
    its JSON to stdout, so no file means the tool never ran to completion.
    """

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.debug("unable to read report %s: %s", path, exc)
        return None


__all__ = ["FailureSink", "parse_report", "read_report"]
