# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project-level settings read from ``pyproject.toml`` or a standalone TOML file."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .models import BinaryPath, SwiftPackagePath, ToolInvocationPath
from .severity import Severity

PYPROJECT_FILE: Final[str] = "pyproject.toml"
STANDALONE_FILE: Final[str] = ".swiftformat-review.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "swiftformat-review"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ReviewSettings(BaseModel):
    """Defaults applied to every run unless overridden on the command line."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    inline: bool = False
    severity: Severity = Severity.ERROR
    quiet: bool = True
    config_file: str | None = None
    directory: str | None = None
    swiftformat_path: str | None = None
    package_path: str | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: str | Severity) -> Severity:
        return Severity.parse(value)

    @model_validator(mode="after")
    def _single_tool_source(self) -> ReviewSettings:
        if self.swiftformat_path and self.package_path:
            raise ValueError("swiftformat_path and package_path are mutually exclusive")
        return self

    @property
    def tool_path(self) -> ToolInvocationPath | None:
        """Return the configured swiftformat location, if any."""

        if self.swiftformat_path:
            return BinaryPath(self.swiftformat_path)
        if self.package_path:
            return SwiftPackagePath(self.package_path)
        return None

    def merged(self, overrides: Mapping[str, Any]) -> ReviewSettings:
        """Return a copy with the non-``None`` entries of ``overrides`` applied.

        Raises:
            ConfigError: If the merged settings are invalid.
        """

        payload = self.model_dump()
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return _validate(payload, source="command line")


def _validate(payload: Mapping[str, Any], *, source: str) -> ReviewSettings:
    try:
        return ReviewSettings.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"Invalid swiftformat-review settings in {source}: {exc}") from exc


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Unable to parse {path}: {exc}") from exc


def _normalise_keys(section: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in section.items()}


def load_settings(root: Path) -> ReviewSettings:
    """Load settings for the project rooted at ``root``.

    ``.swiftformat-review.toml`` wins over ``[tool.swiftformat-review]`` in
    ``pyproject.toml``. Missing files yield the defaults.

    Args:
        root: Project root directory.

    Returns:
        ReviewSettings: Validated settings.

    Raises:
        ConfigError: If a configuration file is malformed or holds invalid values.
    """

    standalone = root / STANDALONE_FILE
    if standalone.is_file():
        return _validate(_normalise_keys(_load_toml(standalone)), source=str(standalone))

    pyproject = root / PYPROJECT_FILE
    if not pyproject.is_file():
        return ReviewSettings()
    tool_section = _load_toml(pyproject).get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return ReviewSettings()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return ReviewSettings()
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {pyproject} must be a table")
    return _validate(_normalise_keys(section), source=str(pyproject))


__all__ = ["ConfigError", "ReviewSettings", "load_settings"]
