# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run swiftformat end to end: select, invoke, parse, normalise, report."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .changes import ChangeSet, GitChangeSet
from .constants import (
    CONFIG_FLAG,
    CURRENT_DIRECTORY_ARGUMENT,
    LINT_ARGUMENTS,
    PACKAGE_MANIFEST,
    PATH_FLAG,
    QUIET_FLAG,
    SCRIPT_INPUT_FLAG,
)
from .models import AllFiles, FormatStyle, ModifiedAndCreatedFiles, ToolInvocationPath, Violation
from .parser import parse_report, read_report
from .paths import CurrentPathProvider, WorkingDirectoryProvider, normalize_paths
from .process import ProcessExecutor, ShellExecutor, build_input_environment
from .report_store import ReportDeleter, default_report_path, transient_report
from .reporting import ReviewSurface, report_violations
from .selection import select_files
from .severity import Severity, resolve_severity
from .tool_path import ManifestReader, read_manifest, resolve_tool_command

LOGGER = logging.getLogger(__name__)

ReportReader = Callable[[Path], str | None]


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Knobs accepted by :func:`run_swiftformat`.

    Attributes:
        style: Which files to lint. Defaults to every file below the working directory.
        inline: Post one annotation per violation instead of a markdown table.
        config_file: Optional ``.swiftformat`` configuration passed via ``--config``.
        severity: Severity assigned to every violation.
        quiet: Pass ``--quiet`` to swiftformat.
        tool_path: Explicit swiftformat location; resolved from the package manifest when omitted.
        report_path: Transient file receiving the JSON report.
    """

    style: FormatStyle = field(default_factory=AllFiles)
    inline: bool = False
    config_file: str | None = None
    severity: Severity = Severity.ERROR
    quiet: bool = True
    tool_path: ToolInvocationPath | None = None
    report_path: Path = field(default_factory=default_report_path)


def build_base_arguments(*, quiet: bool, config_file: str | None) -> list[str]:
    """Return the arguments shared by every selection mode."""

    arguments = list(LINT_ARGUMENTS)
    if quiet:
        arguments.append(QUIET_FLAG)
    if config_file:
        arguments.extend([CONFIG_FLAG, config_file])
    return arguments


def build_target_arguments(style: FormatStyle, files: Sequence[str] | None) -> tuple[list[str], dict[str, str]]:
    """Return the target arguments and environment for the selected files.

    Args:
        style: Selection mode requested by the caller.
        files: Explicit files from :func:`select_files`, ``None`` in directory mode.

    Returns:
        tuple[list[str], dict[str, str]]: Extra arguments and environment variables.
    """

    if files is None:
        directory = style.directory if isinstance(style, AllFiles) else None
        if directory:
            return [PATH_FLAG, directory], {}
        return [CURRENT_DIRECTORY_ARGUMENT], {}
    return [SCRIPT_INPUT_FLAG], build_input_environment(files)


def run_swiftformat(
    options: FormatOptions | None = None,
    *,
    surface: ReviewSurface,
    change_set: ChangeSet | None = None,
    executor: ProcessExecutor | None = None,
    path_provider: CurrentPathProvider | None = None,
    deleter: ReportDeleter | None = None,
    read_file: ReportReader = read_report,
    manifest_path: Path = Path(PACKAGE_MANIFEST),
    manifest_reader: ManifestReader = read_manifest,
) -> list[Violation]:
    """Lint Swift sources with swiftformat and report the violations to ``surface``.

    When the selection mode yields no Swift files swiftformat is not started at
    all and an empty list is returned. A report that is missing or cannot be
    decoded is posted once through ``surface.fail_message`` and treated as "no
    violations"; the caller decides whether that fails the run.

    Args:
        options: Run configuration; defaults to :class:`FormatOptions`.
        surface: Review surface receiving the report.
        change_set: Created/modified files for :class:`ModifiedAndCreatedFiles`.
            Defaults to :class:`GitChangeSet` rooted at the current path.
        executor: Process runner; defaults to :class:`ShellExecutor`.
        path_provider: Source of the directory paths are made relative to.
        deleter: Strategy removing the transient report.
        read_file: Callable returning the report text, ``None`` when unreadable.
        manifest_path: Package manifest inspected when no tool path is configured.
        manifest_reader: Callable returning the manifest text.

    Returns:
        list[Violation]: Reported violations with relative paths and the configured severity.
    """

    opts = options or FormatOptions()
    provider = path_provider or WorkingDirectoryProvider()
    tool_command = resolve_tool_command(opts.tool_path, manifest_path, reader=manifest_reader)
    arguments = build_base_arguments(quiet=opts.quiet, config_file=opts.config_file)

    if change_set is None and isinstance(opts.style, ModifiedAndCreatedFiles):
        change_set = GitChangeSet(Path(provider.current_path))
    files = select_files(opts.style, change_set)
    if files is not None and not files:
        LOGGER.debug("no swift files selected; skipping swiftformat")
        return []

    target_arguments, environment = build_target_arguments(opts.style, files)
    arguments.extend(target_arguments)

    with transient_report(opts.report_path, deleter) as report_path:
        (executor or ShellExecutor()).execute(tool_command, arguments, environment, report_path)
        report_text = read_file(report_path)
        if report_text is None:
            surface.fail_message(f"Unable to read SwiftFormat report at {report_path}")
            violations = []
        else:
            violations = parse_report(report_text, surface.fail_message)

    if not violations:
        return []

    violations = normalize_paths(violations, provider.current_path)
    violations = resolve_severity(violations, opts.severity)
    report_violations(violations, inline=opts.inline, surface=surface)
    return violations


__all__ = ["FormatOptions", "build_base_arguments", "build_target_arguments", "run_swiftformat"]
