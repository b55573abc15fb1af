# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .models import Violation


class Severity(str, Enum):
    """Severity levels assigned to SwiftFormat findings.

    SwiftFormat does not report a severity of its own, so every finding starts
    as :attr:`ERROR` and is overwritten by :func:`resolve_severity`.
    """

    ERROR = "error"
    WARNING = "warning"

    @property
    def label(self) -> str:
        """Return the capitalised label shown in review comments.

        Returns:
            str: ``"Error"`` or ``"Warning"``.
        """

        return _SEVERITY_LABELS[self]

    @classmethod
    def parse(cls, value: str | Severity) -> Severity:
        """Return the severity matching ``value`` regardless of case.

        Args:
            value: Severity instance or free-form label such as ``"Warning"``.

        Returns:
            Severity: Matching severity member.

        Raises:
            ValueError: If ``value`` does not name a known severity.
        """

        if isinstance(value, Severity):
            return value
        normalized = str(value).strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"invalid severity level '{value}' (expected one of: {choices})") from exc


_SEVERITY_LABELS: Final[dict[Severity, str]] = {
    Severity.ERROR: "Error",
    Severity.WARNING: "Warning",
}


def resolve_severity(violations: Iterable[Violation], severity: Severity = Severity.ERROR) -> list[Violation]:
    """Overwrite the severity of every violation with ``severity``.

    Args:
        violations: Violations decoded from a single SwiftFormat run.
        severity: Severity applied uniformly to all violations.

    Returns:
        list[Violation]: Copies of ``violations`` carrying ``severity``.
    """

    return [violation.model_copy(update={"severity": severity}) for violation in violations]


__all__ = ["Severity", "resolve_severity"]
