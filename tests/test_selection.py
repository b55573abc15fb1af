# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for file selection per format style."""

from __future__ import annotations

import pytest

from swiftformat_review.changes import StaticChangeSet
from swiftformat_review.models import AllFiles, ExplicitFiles, ModifiedAndCreatedFiles
from swiftformat_review.selection import filter_swift_files, is_swift_file, select_files


def test_all_files_returns_no_explicit_list() -> None:
    assert select_files(AllFiles()) is None
    assert select_files(AllFiles(directory="Sources")) is None


def test_changed_files_union_created_and_modified() -> None:
    change_set = StaticChangeSet.of(created=["New.swift", "README.md"], modified=["Old.swift"])

    assert select_files(ModifiedAndCreatedFiles(), change_set) == ["New.swift", "Old.swift"]


def test_changed_files_respects_directory_prefix() -> None:
    change_set = StaticChangeSet.of(created=["Sources/A.swift"], modified=["Tests/B.swift", "Sources/C.swift"])

    selected = select_files(ModifiedAndCreatedFiles(directory="Sources"), change_set)

    assert selected == ["Sources/A.swift", "Sources/C.swift"]


def test_changed_files_requires_change_set() -> None:
    with pytest.raises(ValueError, match="change set"):
        select_files(ModifiedAndCreatedFiles())


def test_explicit_files_are_filtered_by_extension() -> None:
    style = ExplicitFiles.of(["a.swift", "b.txt", "c.swift.orig", "Dir/d.swift"])

    assert select_files(style) == ["a.swift", "Dir/d.swift"]


def test_selection_can_be_empty() -> None:
    change_set = StaticChangeSet.of(modified=["CHANGELOG.md", "Harvey/SomeOtherFile.m", "circle.yml"])

    assert select_files(ModifiedAndCreatedFiles(), change_set) == []


@pytest.mark.parametrize(
    ("path", "expected"),
    [("A.swift", True), ("A.SWIFT", False), ("swift", False), ("A.m", False)],
)
def test_is_swift_file(path: str, expected: bool) -> None:
    assert is_swift_file(path) is expected


def test_filter_swift_files_preserves_order() -> None:
    assert filter_swift_files(["b.swift", "x.md", "a.swift"]) == ["b.swift", "a.swift"]
