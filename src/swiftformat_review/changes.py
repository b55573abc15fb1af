# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Change-set providers describing the files touched by a review."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from .process import CommandOptions, run_command

GitRunner = Callable[[Sequence[str], Path], list[str]]


@runtime_checkable
class ChangeSet(Protocol):
    """Expose the created and modified paths of the reviewed revision."""

    @property
    def created_files(self) -> Sequence[str]:
        """Return project-relative paths added by the change."""
        ...

    @property
    def modified_files(self) -> Sequence[str]:
        """Return project-relative paths modified by the change."""
        ...


@dataclass(frozen=True, slots=True)
class StaticChangeSet:
    """Change set built from explicit path lists."""

    created_files: tuple[str, ...] = field(default_factory=tuple)
    modified_files: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *, created: Sequence[str] = (), modified: Sequence[str] = ()) -> StaticChangeSet:
        """Build a change set from arbitrary sequences."""

        return cls(created_files=tuple(created), modified_files=tuple(modified))


class GitChangeSet:
    """Collect created and modified files reported by Git.

    With a ``base_ref`` the change set is the diff between the merge base of
    ``HEAD`` and ``base_ref`` and the working tree. Without one it is the
    uncommitted work against ``HEAD``, with untracked files counted as created.
    """

    def __init__(self, root: Path, *, base_ref: str | None = None, runner: GitRunner | None = None) -> None:
        """Create a Git-backed change set.

        Args:
            root: Repository root directory.
            base_ref: Optional branch or commit the review is compared against.
            runner: Optional command runner used to execute git commands.
        """

        self._root = root
        self._base_ref = base_ref
        self._runner = runner or self._default_runner
        self._created: tuple[str, ...] | None = None
        self._modified: tuple[str, ...] | None = None

    @property
    def created_files(self) -> Sequence[str]:
        if self._created is None:
            created = self._diff_names("A")
            if not self._base_ref:
                created = _dedupe([*created, *self._untracked()])
            self._created = tuple(created)
        return self._created

    @property
    def modified_files(self) -> Sequence[str]:
        if self._modified is None:
            self._modified = tuple(self._diff_names("M"))
        return self._modified

    def _diff_names(self, diff_filter: str) -> list[str]:
        cmd = ["git", "diff", "--name-only", f"--diff-filter={diff_filter}", self._resolve_diff_ref(), "--"]
        return _clean_lines(self._runner(cmd, self._root))

    def _untracked(self) -> list[str]:
        cmd = ["git", "ls-files", "--others", "--exclude-standard"]
        return _clean_lines(self._runner(cmd, self._root))

    def _resolve_diff_ref(self) -> str:
        if not self._base_ref:
            return "HEAD"
        output = self._runner(["git", "merge-base", "HEAD", self._base_ref], self._root)
        if output and output[0].strip():
            return output[0].strip()
        return self._base_ref

    @staticmethod
    def _default_runner(cmd: Sequence[str], root: Path) -> list[str]:
        """Execute ``cmd`` returning stdout lines while swallowing failures.

        Args:
            cmd: Git command to execute.
            root: Repository root directory.

        Returns:
            list[str]: Raw stdout lines, empty when git is unavailable or fails.
        """

        try:
            cp = run_command(cmd, options=CommandOptions(cwd=root, capture_output=True, text=True))
        except OSError:
            return []
        if cp.returncode != 0:
            return []
        return (cp.stdout or "").splitlines()


def _clean_lines(lines: Sequence[str]) -> list[str]:
    return [stripped for raw in lines if (stripped := raw.strip())]


def _dedupe(paths: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(paths))


__all__ = ["ChangeSet", "GitChangeSet", "GitRunner", "StaticChangeSet"]
