# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the swiftformat_review package."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, field_validator

from .constants import SWIFTFORMAT_EXECUTABLE
from .severity import Severity


class Violation(BaseModel):
    """Describe one issue reported by ``swiftformat --lint --reporter json``.

    The report carries ``file``, ``line``, ``reason`` and ``rule_id``. It never
    carries a severity, so :attr:`severity` defaults to :attr:`Severity.ERROR`
    until the pipeline overwrites it.
    """

    model_config = ConfigDict(validate_assignment=True, strict=True)

    file: str
    line: int
    reason: str
    rule_id: str
    severity: Severity = Severity.ERROR

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: str | Severity) -> Severity:
        """Accept severity labels in any case.

        Args:
            value: Raw severity value supplied by the caller or report.

        Returns:
            Severity: Parsed severity member.
        """

        return Severity.parse(value)

    @property
    def message_text(self) -> str:
        """Return the reason followed by the rule identifier in code markup.

        Returns:
            str: Message such as ``"Remove blank line (`blankLines`)"``.
        """

        return f"{self.reason} (`{self.rule_id}`)"

    @property
    def display_location(self) -> str:
        """Return ``basename:line`` used in the aggregated table."""

        name = PurePosixPath(self.file).name if self.file else ""
        return f"{name}:{self.line}"

    def to_markdown(self) -> str:
        """Render the violation as one row of the aggregated markdown table.

        Returns:
            str: Row of the form ``"Error | File.swift:10 | reason (`rule`) |"``.
        """

        return f"{self.severity.label} | {self.display_location} | {self.message_text} |"


@dataclass(frozen=True, slots=True)
class AllFiles:
    """Lint every Swift file, optionally below ``directory`` only."""

    directory: str | None = None


@dataclass(frozen=True, slots=True)
class ModifiedAndCreatedFiles:
    """Lint only the Swift files created or modified in the current change set."""

    directory: str | None = None


@dataclass(frozen=True, slots=True)
class ExplicitFiles:
    """Lint exactly the given files (Swift files only)."""

    files: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, files: Sequence[str]) -> ExplicitFiles:
        """Build an instance from any sequence of paths."""

        return cls(files=tuple(str(entry) for entry in files))


FormatStyle: TypeAlias = AllFiles | ModifiedAndCreatedFiles | ExplicitFiles


@dataclass(frozen=True, slots=True)
class BinaryPath:
    """Invoke a swiftformat executable directly."""

    path: str = SWIFTFORMAT_EXECUTABLE

    @property
    def command(self) -> list[str]:
        """Return the argv prefix used to start the tool."""

        return [self.path]


@dataclass(frozen=True, slots=True)
class SwiftPackagePath:
    """Invoke swiftformat through ``swift run`` inside a package directory."""

    package_path: str

    @property
    def command(self) -> list[str]:
        """Return the argv prefix used to start the tool."""

        return ["swift", "run", "--package-path", self.package_path, SWIFTFORMAT_EXECUTABLE]


ToolInvocationPath: TypeAlias = BinaryPath | SwiftPackagePath


__all__ = [
    "AllFiles",
    "BinaryPath",
    "ExplicitFiles",
    "FormatStyle",
    "ModifiedAndCreatedFiles",
    "SwiftPackagePath",
    "ToolInvocationPath",
    "Violation",
]
