# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for severity parsing and resolution."""

from __future__ import annotations

import pytest

from swiftformat_review.models import Violation
from swiftformat_review.severity import Severity, resolve_severity


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("error", Severity.ERROR), ("Error", Severity.ERROR), (" WARNING ", Severity.WARNING)],
)
def test_parse_is_case_insensitive(raw: str, expected: Severity) -> None:
    assert Severity.parse(raw) is expected


def test_parse_rejects_unknown_levels() -> None:
    with pytest.raises(ValueError, match="invalid severity level"):
        Severity.parse("notice")


def test_labels_are_capitalised() -> None:
    assert Severity.ERROR.label == "Error"
    assert Severity.WARNING.label == "Warning"


def test_resolve_severity_overwrites_every_violation() -> None:
    violations = [
        Violation(file="a.swift", line=1, reason="x", rule_id="r"),
        Violation(file="b.swift", line=2, reason="y", rule_id="s", severity=Severity.WARNING),
    ]

    resolved = resolve_severity(violations, Severity.WARNING)

    assert [violation.severity for violation in resolved] == [Severity.WARNING, Severity.WARNING]
    assert violations[0].severity is Severity.ERROR
