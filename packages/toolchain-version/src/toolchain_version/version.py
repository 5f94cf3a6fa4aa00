# SPDX-License-Identifier: MIT
"""Toolchain release versions.

A toolchain reports its release as ``MAJOR.MINOR.PATCH`` optionally followed by
``-EXTRA``, where EXTRA names a channel or build (``beta.2``, ``nightly``,
``nightly-2024-01-01``). EXTRA is kept verbatim and never interpreted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .errors import FormatError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .probe import Runner

RELEASE_PREFIX = "release: "

# Digits with an optional leading "+", e.g. "+1" parses as 1.
_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, slots=True)
class Version:
    """A toolchain version for making relative comparisons.

    Ordering looks at ``(major, minor, patch)`` only, so ``1.2.0-nightly`` is
    neither less nor greater than ``1.2.0``. Equality and hashing include the
    extra tag, so the two are still not equal.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        _extra: Channel or build tag found after the first hyphen, for use
            inside this package only
    """

    major: int
    minor: int
    patch: int
    _extra: Optional[str] = None

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self._extra is not None:
            version += f"-{self._extra}"
        return version

    def _key(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() >= other._key()

    @classmethod
    def from_toolchain(
        cls,
        toolchain: str,
        *,
        runner: Optional[Runner] = None,
        args: Optional[Sequence[str]] = None,
    ) -> Version:
        """Query ``toolchain --version --verbose`` and parse its release line.

        See :func:`toolchain_version.probe.from_toolchain`.
        """
        from .probe import from_toolchain

        return from_toolchain(toolchain, runner=runner, args=args)


def _parse_number(component: str, text: str) -> int:
    if not _NUMBER_PATTERN.fullmatch(text):
        raise FormatError(component, text)
    return int(text)


def parse_release(release: str) -> Version:
    """Parse the text following ``release: `` into a Version.

    Args:
        release: A release string such as "1.23.0" or "1.24.0-beta.4"

    Returns:
        The parsed Version

    Raises:
        FormatError: If a component is missing or is not a non-negative integer

    Examples:
        >>> parse_release("1.23.0")
        Version(major=1, minor=23, patch=0, _extra=None)

        >>> parse_release("1.24.0-beta.4")
        Version(major=1, minor=24, patch=0, _extra='beta.4')
    """
    # Everything after the first hyphen is the channel tag, e.g. "beta.N" or "nightly".
    numbers, sep, extra = release.partition("-")

    parts = numbers.split(".", 2)
    if len(parts) < 2:
        raise FormatError("minor")
    if len(parts) < 3:
        raise FormatError("patch")

    major = _parse_number("major", parts[0])
    minor = _parse_number("minor", parts[1])
    patch = _parse_number("patch", parts[2])

    return Version(major, minor, patch, extra if sep else None)


def find_release_line(report: str) -> Optional[str]:
    """Return the text after ``release: `` on the first matching line, if any."""
    for line in report.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line.startswith(RELEASE_PREFIX):
            return line[len(RELEASE_PREFIX) :]
    return None


def parse_report(report: str) -> Version:
    """Parse a verbose version report into a Version.

    Only the first line starting with ``release: `` is considered; every other
    line of the report is ignored.

    Raises:
        FormatError: If the release line is absent or malformed
    """
    release = find_release_line(report)
    if release is None:
        raise FormatError("release")
    return parse_release(release)
