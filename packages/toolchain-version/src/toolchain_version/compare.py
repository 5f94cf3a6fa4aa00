# SPDX-License-Identifier: MIT
"""Version comparison helpers.

Only ``major.minor.patch`` takes part in comparisons. A channel tag such as
``-nightly`` or ``-beta.2`` never makes a version older or newer.
"""

from __future__ import annotations

from typing import Union

from .version import Version, parse_release


def _as_version(version: Union[str, Version]) -> Version:
    return parse_release(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two toolchain versions.

    Args:
        version1: First version (release string or Version object)
        version2: Second version (release string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 share major.minor.patch
        1 if version1 > version2

    Raises:
        FormatError: If either release string is invalid

    Examples:
        >>> compare_versions("1.70.0", "1.71.0")
        -1
        >>> compare_versions("1.70.0-nightly", "1.70.0")
        0
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return 0


def version_key(version: Union[str, Version]) -> tuple[int, int, int]:
    """Return a sort key for a version.

    Examples:
        >>> sorted(["1.10.0", "1.9.0-beta", "1.9.1"], key=version_key)
        ['1.9.0-beta', '1.9.1', '1.10.0']
    """
    v = _as_version(version)
    return (v.major, v.minor, v.patch)


def is_at_least(version: Version, major: int, minor: int, patch: int = 0) -> bool:
    """Return True if the version is ``major.minor.patch`` or newer."""
    return version >= Version(major, minor, patch)


def is_prerelease(version: Version) -> bool:
    """Return True if the version carries a channel tag (beta, nightly, dev...)."""
    return version._extra is not None
