# SPDX-License-Identifier: MIT
"""Probe configuration loaded from pyproject.toml and the environment.

Example pyproject.toml section::

    [tool.toolchain-version]
    toolchain = "rustc"
    args = ["--version", "--verbose"]
    minimum = "1.70.0"
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import FormatError
from .probe import VERBOSE_VERSION_ARGS
from .version import Version, parse_release

DEFAULT_TOOLCHAIN = "rustc"

# Overrides the configured toolchain, as cargo build scripts do.
TOOLCHAIN_ENV_VAR = "RUSTC"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class ProbeConfig:
    """Configuration for probing a toolchain.

    Attributes:
        toolchain: Path or command name of the toolchain executable
        args: Arguments that make the toolchain print its verbose version report
        minimum: Oldest acceptable version ("major.minor.patch"), if any
    """

    toolchain: str = DEFAULT_TOOLCHAIN
    args: tuple[str, ...] = field(default=VERBOSE_VERSION_ARGS)
    minimum: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.toolchain:
            raise ConfigError("toolchain must not be empty")
        self.args = tuple(self.args)
        if self.minimum is not None:
            try:
                parse_release(self.minimum)
            except FormatError as e:
                raise ConfigError(f"Invalid minimum version {self.minimum!r}: {e}") from e

    @property
    def minimum_version(self) -> Optional[Version]:
        """The minimum version parsed, or None when no minimum is set."""
        if self.minimum is None:
            return None
        return parse_release(self.minimum)

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "ProbeConfig":
        """Load configuration from the pyproject.toml in a project directory.

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        pyproject_path = Path(project_dir) / "pyproject.toml"
        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_dir}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "ProbeConfig":
        """Create a ProbeConfig from a parsed pyproject.toml dictionary."""
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")
        section = tool.get("toolchain-version", {})
        if not isinstance(section, dict):
            raise ConfigError("[tool.toolchain-version] must be a table")

        toolchain = section.get("toolchain", DEFAULT_TOOLCHAIN)
        if not isinstance(toolchain, str):
            raise ConfigError("tool.toolchain-version.toolchain must be a string")

        args = section.get("args", list(VERBOSE_VERSION_ARGS))
        if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
            raise ConfigError("tool.toolchain-version.args must be a list of strings")

        minimum = section.get("minimum")
        if minimum is not None and not isinstance(minimum, str):
            raise ConfigError("tool.toolchain-version.minimum must be a string")

        return cls(toolchain=toolchain, args=tuple(args), minimum=minimum)


def load_config(
    project_dir: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProbeConfig:
    """Load the probe configuration.

    Reads ``[tool.toolchain-version]`` from ``project_dir/pyproject.toml`` when
    that file exists, then lets the ``RUSTC`` environment variable override the
    toolchain.
    """
    if environ is None:
        environ = os.environ

    project_path = Path(project_dir) if project_dir is not None else Path.cwd()
    if (project_path / "pyproject.toml").exists():
        config = ProbeConfig.from_pyproject(project_path)
    else:
        config = ProbeConfig()

    override = environ.get(TOOLCHAIN_ENV_VAR)
    if override:
        config = replace(config, toolchain=override)
    return config
