# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import os
import shutil

# Bandit: subprocess usage is intentional; commands are argv lists and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Protocol

from .constants import SCRIPT_INPUT_FILE_COUNT, SCRIPT_INPUT_FILE_PREFIX

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandOptions:
    """Execution options accepted by :func:`run_command`."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    capture_output: bool = False
    text: bool = True
    timeout: float | None = None
    discard_stdin: bool = False


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Normalise the subprocess argument sequence.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Argument list whose executable is resolved through ``PATH``.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be resolved.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute() or len(head_path.parts) > 1:
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Execute ``args`` after normalising the executable path.

    The exit status is never interpreted here; callers inspect ``returncode``.

    Args:
        args: Command and argument sequence to execute.
        options: Options configuring execution semantics.

    Returns:
        CompletedProcess: Subprocess execution metadata.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        subprocess.TimeoutExpired: When ``options.timeout`` elapses first.
    """

    normalized = _normalize_args(args)
    resolved_options = options or CommandOptions()
    return subprocess.run(  # nosec B603 - argv list, no shell
        normalized,
        cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
        env=dict(resolved_options.env) if resolved_options.env is not None else None,
        check=False,
        capture_output=resolved_options.capture_output,
        text=resolved_options.text,
        timeout=resolved_options.timeout,
        stdin=subprocess.DEVNULL if resolved_options.discard_stdin else None,
    )


def build_input_environment(files: Sequence[str]) -> dict[str, str]:
    """Return the ``SCRIPT_INPUT_FILE_*`` variables describing ``files``.

    Args:
        files: Paths handed to ``swiftformat --scriptinput``.

    Returns:
        dict[str, str]: ``SCRIPT_INPUT_FILE_COUNT`` plus one zero-indexed
        ``SCRIPT_INPUT_FILE_<n>`` entry per file.
    """

    environment = {SCRIPT_INPUT_FILE_COUNT: str(len(files))}
    for index, path in enumerate(files):
        environment[f"{SCRIPT_INPUT_FILE_PREFIX}{index}"] = path
    return environment


class ProcessExecutor(Protocol):
    """Run an external command and store its stdout in a report file."""

    def execute(
        self,
        command: Sequence[str],
        arguments: Sequence[str],
        environment: Mapping[str, str],
        output_file: Path,
    ) -> None:
        """Run ``command`` with ``arguments`` writing stdout to ``output_file``."""
        ...


class ShellExecutor:
    """Run commands through :func:`run_command`, redirecting stdout to a file.

    Failures never propagate. A tool that cannot be launched, times out, or
    whose report cannot be written leaves no report file behind; the
    orchestrator then reports the missing report.
    """

    def __init__(self, *, cwd: Path | None = None, timeout: float | None = None) -> None:
        self._cwd = cwd
        self._timeout = timeout

    def execute(
        self,
        command: Sequence[str],
        arguments: Sequence[str],
        environment: Mapping[str, str],
        output_file: Path,
    ) -> None:
        argv = [*command, *arguments]
        merged_env = {**os.environ, **environment}
        LOGGER.debug("command=%s env_overrides=%d output=%s", " ".join(argv), len(environment), output_file)
        options = CommandOptions(
            cwd=self._cwd,
            env=merged_env,
            capture_output=True,
            timeout=self._timeout,
            discard_stdin=True,
        )
        try:
            completed = run_command(argv, options=options)
        except OSError as exc:
            LOGGER.warning("unable to launch %s: %s", argv[0], exc)
            return
        except subprocess.TimeoutExpired as exc:
            LOGGER.warning("%s timed out after %.1fs", argv[0], exc.timeout)
            return
        if completed.returncode != 0:
            LOGGER.debug("%s exited with status %d: %s", argv[0], completed.returncode, completed.stderr or "")
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(completed.stdout or "", encoding="utf-8")
        except OSError as exc:
            LOGGER.warning("unable to write report %s: %s", output_file, exc)


__all__ = [
    "CommandOptions",
    "ProcessExecutor",
    "ShellExecutor",
    "build_input_environment",
    "run_command",
]
