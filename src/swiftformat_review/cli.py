# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for swiftformat-review."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .changes import GitChangeSet
from .config import ConfigError, ReviewSettings, load_settings
from .constants import PACKAGE_MANIFEST
from .logging import fail, get_console, ok, warn
from .models import AllFiles, ExplicitFiles, FormatStyle, ModifiedAndCreatedFiles
from .orchestrator import FormatOptions, run_swiftformat
from .paths import FixedPathProvider
from .process import ShellExecutor
from .report_store import default_report_path
from .reporting import ConsoleReviewSurface, GitHubActionsSurface, ReviewSurface, TrackingSurface
from .severity import Severity

app = typer.Typer(name="swiftformat-review", help="Report swiftformat lint findings for code review.")


class SurfaceKind(str, Enum):
    """Review surfaces selectable from the command line."""

    CONSOLE = "console"
    GITHUB = "github"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"swiftformat-review {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging.")] = False,
) -> None:
    """Report swiftformat lint findings for code review."""

    del version
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def lint(
    files: Annotated[list[str] | None, typer.Argument(help="Explicit files to lint.")] = None,
    changed: Annotated[bool, typer.Option("--changed", help="Lint only created and modified files.")] = False,
    directory: Annotated[str | None, typer.Option("--directory", help="Restrict linting to this directory.")] = None,
    inline: Annotated[bool | None, typer.Option("--inline/--no-inline", help="Annotate each line.")] = None,
    config_file: Annotated[str | None, typer.Option("--config", help="swiftformat configuration file.")] = None,
    severity: Annotated[str | None, typer.Option("--severity", help="Severity for all findings.")] = None,
    quiet: Annotated[bool | None, typer.Option("--quiet/--no-quiet", help="Pass --quiet to swiftformat.")] = None,
    swiftformat_path: Annotated[str | None, typer.Option("--swiftformat-path", help="swiftformat binary.")] = None,
    package_path: Annotated[
        str | None,
        typer.Option("--package-path", help="Swift package providing swiftformat via swift run."),
    ] = None,
    base_ref: Annotated[str | None, typer.Option("--base-ref", help="Git ref the change set is diffed against.")] = None,
    surface_kind: Annotated[SurfaceKind, typer.Option("--surface", help="Where findings are posted.")] = (
        SurfaceKind.CONSOLE
    ),
    root: Annotated[Path, typer.Option("--root", help="Project root directory.")] = Path("."),
    report_path: Annotated[Path | None, typer.Option("--report-path", help="Transient JSON report path.")] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", min=0.0, help="Seconds swiftformat may run before it is abandoned."),
    ] = None,
    use_emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate status lines with emoji.")] = True,
) -> None:
    """Run swiftformat in lint mode and post its findings.

    Raises:
        typer.Exit: Exit status 1 when error findings were reported or
            swiftformat produced no usable report, 2 for configuration
            problems, 0 otherwise.
    """

    project_root = root.resolve()
    try:
        settings = load_settings(project_root).merged(
            {
                "inline": inline,
                "config_file": config_file,
                "severity": severity,
                "quiet": quiet,
                "directory": directory,
                "swiftformat_path": swiftformat_path,
                "package_path": package_path,
            }
        )
    except ConfigError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=2) from exc

    style = _build_style(files, changed=changed, settings=settings)
    options = FormatOptions(
        style=style,
        inline=settings.inline,
        config_file=settings.config_file,
        severity=settings.severity,
        quiet=settings.quiet,
        tool_path=settings.tool_path,
        report_path=report_path or default_report_path(),
    )
    surface = TrackingSurface(_build_surface(surface_kind, use_emoji=use_emoji))
    violations = run_swiftformat(
        options,
        surface=surface,
        change_set=GitChangeSet(project_root, base_ref=base_ref) if changed else None,
        executor=ShellExecutor(cwd=project_root, timeout=timeout),
        path_provider=FixedPathProvider(str(project_root)),
        manifest_path=project_root / PACKAGE_MANIFEST,
    )

    if surface.failed:
        warn("swiftformat produced no usable report", use_emoji=use_emoji)
        raise typer.Exit(code=1)
    if not violations:
        ok("swiftformat found no issues", use_emoji=use_emoji)
        raise typer.Exit(code=0)
    errors = sum(1 for violation in violations if violation.severity is Severity.ERROR)
    summary = f"swiftformat reported {len(violations)} issue(s)"
    if errors:
        fail(summary, use_emoji=use_emoji)
        raise typer.Exit(code=1)
    ok(summary, use_emoji=use_emoji)
    raise typer.Exit(code=0)


def _build_style(files: list[str] | None, *, changed: bool, settings: ReviewSettings) -> FormatStyle:
    if files:
        return ExplicitFiles.of(files)
    if changed:
        return ModifiedAndCreatedFiles(directory=settings.directory)
    return AllFiles(directory=settings.directory)


def _build_surface(kind: SurfaceKind, *, use_emoji: bool) -> ReviewSurface:
    if kind is SurfaceKind.GITHUB:
        return GitHubActionsSurface(sys.stdout)
    return ConsoleReviewSurface(get_console(color=True, emoji=use_emoji))


__all__ = ["app", "lint", "main"]
