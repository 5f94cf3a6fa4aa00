# SPDX-License-Identifier: MIT
"""Compiler toolchain version probing and comparison.

This package runs a toolchain's verbose version report, extracts the
``release:`` line and exposes it as an ordered Version value.

Example:
    >>> from toolchain_version import Version, from_toolchain, is_at_least
    >>>
    >>> version = from_toolchain("rustc")
    >>> is_at_least(version, 1, 70)
    True
    >>>
    >>> Version(1, 70, 0) < Version(1, 71, 0)
    True
"""

__version__ = "0.1.0"

from .version import (
    Version,
    parse_release,
    parse_report,
    RELEASE_PREFIX,
)
from .compare import (
    compare_versions,
    version_key,
    is_at_least,
    is_prerelease,
)
from .errors import (
    ToolchainVersionError,
    ExecutionError,
    ToolchainError,
    EncodingError,
    FormatError,
)
from .probe import (
    ToolchainOutput,
    Runner,
    VERBOSE_VERSION_ARGS,
    from_toolchain,
    probe_toolchain,
    run_toolchain,
)
from .config import (
    ConfigError,
    ProbeConfig,
    load_config,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_release",
    "parse_report",
    "RELEASE_PREFIX",
    # Version comparison
    "compare_versions",
    "version_key",
    "is_at_least",
    "is_prerelease",
    # Errors
    "ToolchainVersionError",
    "ExecutionError",
    "ToolchainError",
    "EncodingError",
    "FormatError",
    # Probing
    "ToolchainOutput",
    "Runner",
    "VERBOSE_VERSION_ARGS",
    "from_toolchain",
    "probe_toolchain",
    "run_toolchain",
    # Configuration
    "ConfigError",
    "ProbeConfig",
    "load_config",
]
