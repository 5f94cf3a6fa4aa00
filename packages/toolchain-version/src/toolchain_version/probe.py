# SPDX-License-Identifier: MIT
"""Run a compiler toolchain and read its release version.

The toolchain is invoked as ``<toolchain> --version --verbose`` and must print a
report containing a line of the form::

    release: 1.76.0-beta.4

Process execution goes through a :data:`Runner` so the parsing can be exercised
without spawning anything.
"""

from __future__ import annotations

import errno
import logging
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .errors import EncodingError, ExecutionError, ToolchainError
from .version import Version, parse_report

if TYPE_CHECKING:
    from .config import ProbeConfig

logger = logging.getLogger(__name__)

VERBOSE_VERSION_ARGS = ("--version", "--verbose")


@dataclass(frozen=True)
class ToolchainOutput:
    """Exit status and captured standard output of a finished toolchain process."""

    returncode: int
    stdout: bytes


Runner = Callable[[Sequence[str]], ToolchainOutput]


def run_toolchain(command: Sequence[str]) -> ToolchainOutput:
    """Run a command to completion and capture its standard output.

    Blocks until the process exits. Standard error is captured but discarded.

    Raises:
        OSError: If the process cannot be spawned
    """
    try:
        result = subprocess.run(
            list(command),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except ValueError as e:
        # e.g. an embedded null byte in the executable path or an argument
        raise OSError(errno.EINVAL, str(e)) from e
    return ToolchainOutput(returncode=result.returncode, stdout=result.stdout)


def from_toolchain(
    toolchain: str,
    *,
    runner: Optional[Runner] = None,
    args: Optional[Sequence[str]] = None,
) -> Version:
    """Get the release version of a toolchain from its verbose version report.

    Args:
        toolchain: Path or command name of the toolchain executable
        runner: Process runner; defaults to :func:`run_toolchain`
        args: Arguments requesting the verbose version report

    Returns:
        The parsed Version

    Raises:
        ExecutionError: If the toolchain cannot be spawned
        ToolchainError: If the toolchain exits with a non-zero status
        EncodingError: If the report is not valid UTF-8
        FormatError: If the report has no valid ``release:`` line
    """
    if runner is None:
        runner = run_toolchain
    command = [str(toolchain), *(VERBOSE_VERSION_ARGS if args is None else args)]
    logger.debug("probing toolchain version: %s", " ".join(command))

    try:
        output = runner(command)
    except OSError as e:
        raise ExecutionError(str(toolchain), e) from e

    if output.returncode != 0:
        raise ToolchainError(str(toolchain), output.returncode)

    try:
        report = output.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(str(toolchain), e.reason) from e

    version = parse_report(report)
    logger.debug("toolchain %s reports version %s", toolchain, version)
    return version


def probe_toolchain(config: ProbeConfig, runner: Optional[Runner] = None) -> Version:
    """Probe the toolchain named by a configuration."""
    return from_toolchain(config.toolchain, runner=runner, args=config.args)
