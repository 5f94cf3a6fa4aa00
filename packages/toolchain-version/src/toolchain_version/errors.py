# SPDX-License-Identifier: MIT
"""Exceptions raised while probing a toolchain for its version."""

from __future__ import annotations

from typing import Optional

COMPONENTS = ("release", "major", "minor", "patch")


class ToolchainVersionError(Exception):
    """Base class for every toolchain version failure."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ExecutionError(ToolchainVersionError):
    """Raised when the toolchain process cannot be spawned at all."""

    def __init__(self, toolchain: str, cause: OSError):
        self.toolchain = toolchain
        self.cause = cause
        super().__init__(f"failed to execute {toolchain}: {cause}")


class ToolchainError(ToolchainVersionError):
    """Raised when the toolchain runs but exits with a non-zero status."""

    def __init__(self, toolchain: str, returncode: int):
        self.toolchain = toolchain
        self.returncode = returncode
        super().__init__(f"could not execute toolchain {toolchain} (exit status {returncode})")


class EncodingError(ToolchainVersionError):
    """Raised when the version report is not valid UTF-8."""

    def __init__(self, toolchain: str, reason: str = ""):
        self.toolchain = toolchain
        message = f"version report of {toolchain} is not valid UTF-8"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class FormatError(ToolchainVersionError):
    """Raised when the version report does not contain a usable release line.

    Attributes:
        component: Which part failed: "release", "major", "minor" or "patch"
        text: The offending text, if there was any
    """

    def __init__(self, component: str, text: Optional[str] = None, message: str = ""):
        if component not in COMPONENTS:
            raise ValueError(f"Unknown version component: {component!r}")
        self.component = component
        self.text = text
        if not message:
            if component == "release":
                message = "release line not found"
            elif text is None:
                message = f"missing {component} version"
            else:
                message = f"invalid {component} version: {text!r}"
        super().__init__(message)
