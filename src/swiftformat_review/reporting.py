# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render violations and post them to a review surface."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Final, Protocol, runtime_checkable

from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

from .constants import MARKDOWN_HEADER, MARKDOWN_TABLE_DIVIDER, MARKDOWN_TABLE_HEADER
from .models import Violation
from .severity import Severity

GITHUB_STEP_SUMMARY_ENV: Final[str] = "GITHUB_STEP_SUMMARY"


@runtime_checkable
class ReviewSurface(Protocol):
    """Sinks exposed by the review host (pull request, CI log, ...)."""

    def markdown(self, text: str) -> None:
        """Post one markdown block."""
        ...

    def fail(self, message: str, file: str, line: int) -> None:
        """Post a failing annotation at ``file:line``."""
        ...

    def warn(self, message: str, file: str, line: int) -> None:
        """Post a warning annotation at ``file:line``."""
        ...

    def fail_message(self, message: str) -> None:
        """Post a failure that is not tied to a location."""
        ...


def render_markdown(violations: Sequence[Violation]) -> str:
    """Return the aggregated markdown report for ``violations``.

    Args:
        violations: Violations to tabulate, one row each.

    Returns:
        str: Header followed by a ``Severity | File | Reason`` table.
    """

    lines = [MARKDOWN_HEADER, "", MARKDOWN_TABLE_HEADER, MARKDOWN_TABLE_DIVIDER]
    lines.extend(violation.to_markdown() for violation in violations)
    return "\n".join(lines)


def report_violations(violations: Sequence[Violation], *, inline: bool, surface: ReviewSurface) -> None:
    """Post ``violations`` to ``surface`` either inline or as one markdown table.

    Nothing is posted for an empty list.

    Args:
        violations: Violations carrying their final path and severity.
        inline: ``True`` to annotate each file/line, ``False`` for one table.
        surface: Destination review surface.
    """

    if not violations:
        return
    if not inline:
        surface.markdown(render_markdown(violations))
        return
    for violation in violations:
        if violation.severity is Severity.ERROR:
            surface.fail(violation.message_text, violation.file, violation.line)
        else:
            surface.warn(violation.message_text, violation.file, violation.line)


@dataclass(slots=True)
class RecordingSurface:
    """Keep every posted item in memory."""

    markdowns: list[str] = field(default_factory=list)
    failures: list[tuple[str, str, int]] = field(default_factory=list)
    warnings: list[tuple[str, str, int]] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)

    def markdown(self, text: str) -> None:
        self.markdowns.append(text)

    def fail(self, message: str, file: str, line: int) -> None:
        self.failures.append((message, file, line))

    def warn(self, message: str, file: str, line: int) -> None:
        self.warnings.append((message, file, line))

    def fail_message(self, message: str) -> None:
        self.messages.append(message)

    @property
    def posted(self) -> int:
        """Return the number of items posted across all sinks."""

        return len(self.markdowns) + len(self.failures) + len(self.warnings) + len(self.messages)


class TrackingSurface:
    """Forward to another surface while remembering unlocated failures.

    The command line uses :attr:`failed` to turn a run that could not produce
    or decode a report into a failing exit status.
    """

    def __init__(self, inner: ReviewSurface) -> None:
        self._inner = inner
        self.failed = False

    def markdown(self, text: str) -> None:
        self._inner.markdown(text)

    def fail(self, message: str, file: str, line: int) -> None:
        self._inner.fail(message, file, line)

    def warn(self, message: str, file: str, line: int) -> None:
        self._inner.warn(message, file, line)

    def fail_message(self, message: str) -> None:
        self.failed = True
        self._inner.fail_message(message)


class ConsoleReviewSurface:
    """Print review output to a Rich console."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def markdown(self, text: str) -> None:
        self._console.print(Markdown(text))

    def fail(self, message: str, file: str, line: int) -> None:
        self._annotation("error", "bold red", message, file, line)

    def warn(self, message: str, file: str, line: int) -> None:
        self._annotation("warning", "bold yellow", message, file, line)

    def fail_message(self, message: str) -> None:
        self._console.print(Text(message, style="red"))

    def _annotation(self, label: str, style: str, message: str, file: str, line: int) -> None:
        text = Text()
        text.append(f"{file}:{line}", style="bold")
        text.append(" ")
        text.append(label, style=style)
        text.append(f" {message}")
        self._console.print(text)


class GitHubActionsSurface:
    """Emit GitHub Actions workflow commands and a job summary.

    Inline annotations are printed as ``::error``/``::warning`` commands.
    Markdown is appended to the file named by ``GITHUB_STEP_SUMMARY`` and
    printed to ``stream`` when that variable is unset.
    """

    def __init__(self, stream: IO[str], *, summary_path: Path | None = None) -> None:
        self._stream = stream
        if summary_path is None and (env_path := os.environ.get(GITHUB_STEP_SUMMARY_ENV)):
            summary_path = Path(env_path)
        self._summary_path = summary_path

    def markdown(self, text: str) -> None:
        if self._summary_path is None:
            self._stream.write(f"{text}\n")
            return
        with self._summary_path.open("a", encoding="utf-8") as handle:
            handle.write(f"{text}\n")

    def fail(self, message: str, file: str, line: int) -> None:
        self._command("error", message, file=file, line=line)

    def warn(self, message: str, file: str, line: int) -> None:
        self._command("warning", message, file=file, line=line)

    def fail_message(self, message: str) -> None:
        self._command("error", message)

    def _command(self, name: str, message: str, *, file: str | None = None, line: int | None = None) -> None:
        properties: list[str] = []
        if file is not None:
            properties.append(f"file={_escape_property(file)}")
        if line is not None:
            properties.append(f"line={line}")
        rendered = f" {','.join(properties)}" if properties else ""
        self._stream.write(f"::{name}{rendered}::{_escape_data(message)}\n")


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


__all__ = [
    "ConsoleReviewSurface",
    "GitHubActionsSurface",
    "RecordingSurface",
    "ReviewSurface",
    "TrackingSurface",
    "render_markdown",
    "report_violations",
]
