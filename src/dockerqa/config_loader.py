# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load dockerqa configuration from ``pyproject.toml`` and ``.dockerqa.toml``."""

from __future__ import annotations

import logging
import os
import re
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .config import ConfigError, DockerQAConfig

LOGGER = logging.getLogger(__name__)

PROJECT_CONFIG_NAME: Final[str] = ".dockerqa.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "dockerqa"

_ENV_VAR_PATTERN = re.compile(r"\$(\w+)|\$\{([^}]+)\}")


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, env: Mapping[str, str] | None = None) -> None:
        self.path = path
        self.name = str(path)
        self._env = env if env is not None else os.environ

    def load(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            with self.path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read {self.path}: {exc}") from exc
        return _expand_env(self.select(data), self._env)

    def select(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return dict(data)


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.dockerqa]`` within ``pyproject.toml``."""

    def select(self, data: Mapping[str, Any]) -> dict[str, Any]:
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)


class ConfigLoader:
    """Merge configuration sources in precedence order onto the defaults."""

    def __init__(self, project_root: Path, sources: Sequence[TomlConfigSource]) -> None:
        self._project_root = project_root
        self._sources = tuple(sources)

    @property
    def sources(self) -> tuple[TomlConfigSource, ...]:
        """Return the sources in the order they are applied."""

        return self._sources

    @classmethod
    def for_root(cls, project_root: Path, *, env: Mapping[str, str] | None = None) -> ConfigLoader:
        """Build a loader reading ``pyproject.toml`` then ``.dockerqa.toml`` under ``project_root``.

        Args:
            project_root: Directory searched for configuration files.
            env: Environment used for ``$VAR`` expansion; defaults to ``os.environ``.

        Returns:
            ConfigLoader: Loader with the default precedence ordering.
        """

        root = project_root.resolve()
        return cls(
            root,
            [
                PyProjectConfigSource(root / PYPROJECT_NAME, env=env),
                TomlConfigSource(root / PROJECT_CONFIG_NAME, env=env),
            ],
        )

    def load(self) -> DockerQAConfig:
        """Return the merged configuration.

        Returns:
            DockerQAConfig: Defaults overridden by every non-empty source.

        Raises:
            ConfigError: If a source cannot be read or the merged data is invalid.
        """

        merged = DockerQAConfig().to_dict()
        applied: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            merged = _deep_merge(merged, fragment)
            applied.append(source.name)
        try:
            config = DockerQAConfig.model_validate(merged)
        except ValidationError as exc:
            origin = ", ".join(applied) or "defaults"
            raise ConfigError(f"Invalid configuration ({origin}): {exc}") from exc
        LOGGER.debug("Loaded configuration from: %s", ", ".join(applied) or "defaults")
        return config


def load_config(project_root: Path) -> DockerQAConfig:
    """Load configuration for ``project_root`` using the default sources."""

    return ConfigLoader.for_root(project_root).load()


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_env(data: Mapping[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    return {key: _expand_env_value(value, env) for key, value in data.items()}


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _expand_env_string(value, env)
    if isinstance(value, Mapping):
        return {k: _expand_env_value(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(v, env) for v in value]
    return value


def _expand_env_string(value: str, env: Mapping[str, str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        if key is None:
            return match.group(0)
        return env.get(key, match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


__all__ = [
    "PROJECT_CONFIG_NAME",
    "ConfigLoader",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
