# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for dockerqa."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .platform.constants import DEFAULT_EXECUTABLE


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LinterSettings(BaseModel):
    """Describe how the hadolint executable is located."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    executable_name: str = Field(default=DEFAULT_EXECUTABLE, min_length=1)
    executable: Path | None = None


class FileSettings(BaseModel):
    """Select which files the CLI treats as Dockerfiles."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    patterns: tuple[str, ...] = ("Dockerfile", "Dockerfile.*", "*.dockerfile")

    @field_validator("patterns", mode="before")
    @classmethod
    def _coerce_patterns(cls, value: Any) -> Any:
        """Accept a single pattern string in place of a list.

        Args:
            value: Raw value supplied by the configuration source.

        Returns:
            Any: A tuple when ``value`` is a string, otherwise ``value`` unchanged.
        """

        if isinstance(value, str):
            return (value,)
        return value

    def matches(self, path: Path) -> bool:
        """Return ``True`` when the file name of ``path`` matches a pattern.

        Matching ignores case, so ``dockerfile`` and ``DOCKERFILE`` both match
        the ``Dockerfile`` pattern.
        """

        name = path.name.lower()
        return any(fnmatchcase(name, pattern.lower()) for pattern in self.patterns)


class OutputSettings(BaseModel):
    """Presentation preferences for console output."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    color: bool = True
    emoji: bool = True


class DockerQAConfig(BaseModel):
    """Top-level configuration container."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    linter: LinterSettings = Field(default_factory=LinterSettings)
    files: FileSettings = Field(default_factory=FileSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-mapping snapshot of the configuration."""

        return self.model_dump(mode="python")


__all__ = [
    "ConfigError",
    "DockerQAConfig",
    "FileSettings",
    "LinterSettings",
    "OutputSettings",
]
