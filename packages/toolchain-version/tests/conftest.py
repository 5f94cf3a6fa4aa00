# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for toolchain version tests."""

from __future__ import annotations

import stat
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from toolchain_version import ToolchainOutput

SAMPLE_REPORT = """\
rustc 1.23.0 (766bd11c8 2018-01-01)
binary: rustc
commit-hash: 766bd11c8a3c019ca53febdcd77b2215379dd67d
commit-date: 2018-01-01
host: x86_64-unknown-linux-gnu
release: 1.23.0
LLVM version: 4.0
"""


class FakeRunner:
    """Runner that records commands and returns a canned result."""

    def __init__(self, stdout: bytes | str = b"", returncode: int = 0):
        if isinstance(stdout, str):
            stdout = stdout.encode("utf-8")
        self.stdout = stdout
        self.returncode = returncode
        self.commands: list[list[str]] = []

    def __call__(self, command: Sequence[str]) -> ToolchainOutput:
        self.commands.append(list(command))
        return ToolchainOutput(returncode=self.returncode, stdout=self.stdout)


@pytest.fixture
def sample_report() -> str:
    """A verbose version report as printed by a stable toolchain."""
    return SAMPLE_REPORT


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def fake_toolchain(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an executable script that behaves like a toolchain.

    The script prints ``report`` on stdout when called with ``--version
    --verbose`` and exits with ``exit_code``.
    """
    if sys.platform == "win32":
        pytest.skip("shebang scripts are not executable on Windows")

    def _make(report: str, exit_code: int = 0, name: str = "fake-rustc") -> Path:
        script = tmp_path / name
        script.write_text(
            f"#!{sys.executable}\n"
            "import sys\n"
            "if sys.argv[1:] != ['--version', '--verbose']:\n"
            "    sys.exit(64)\n"
            f"sys.stdout.write({report!r})\n"
            "sys.stderr.write('warning: ignored\\n')\n"
            f"sys.exit({exit_code})\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make
