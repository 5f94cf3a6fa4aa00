# SPDX-License-Identifier: MIT
"""Unit and property-based tests for version comparison.

These tests verify that:
- Ordering follows (major, minor, patch) lexicographically
- The extra tag never affects ordering but always affects equality
- Parsing a release line is a pure function of its text
"""

from __future__ import annotations

from typing import Optional

import pytest
from hypothesis import given, strategies as st

from toolchain_version import (
    FormatError,
    Version,
    compare_versions,
    is_at_least,
    is_prerelease,
    parse_release,
    parse_report,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=2**80)

# Any text on a single line; the extra tag is opaque
extras = st.one_of(
    st.none(),
    st.text(alphabet=st.characters(exclude_characters="\r\n"), max_size=20),
)


@st.composite
def versions(draw, extra: Optional[st.SearchStrategy] = None):
    """Generate a Version with an optional extra tag."""
    return Version(
        draw(numbers),
        draw(numbers),
        draw(numbers),
        draw(extras if extra is None else extra),
    )


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        assert compare_versions("1.9.0", "1.10.0") == -1
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_patch_difference(self):
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_extra_ignored(self):
        """Test that channel tags do not change the comparison."""
        assert compare_versions("1.70.0-nightly", "1.70.0") == 0
        assert compare_versions("1.70.0-beta.1", "1.70.0-beta.2") == 0

    def test_version_objects(self):
        assert compare_versions(Version(1, 2, 3), "1.2.4") == -1

    def test_invalid_string(self):
        with pytest.raises(FormatError):
            compare_versions("1.0", "1.0.0")


class TestVersionKey:
    """Tests for version_key function."""

    def test_sort_strings(self):
        assert sorted(["1.10.0", "1.9.0-beta", "1.9.1"], key=version_key) == [
            "1.9.0-beta",
            "1.9.1",
            "1.10.0",
        ]

    def test_key_ignores_extra(self):
        assert version_key("1.2.3-nightly") == (1, 2, 3)


class TestFeatureGates:
    """Tests for is_at_least and is_prerelease."""

    def test_is_at_least(self):
        v = Version(1, 70, 2)
        assert is_at_least(v, 1, 70)
        assert is_at_least(v, 1, 70, 2)
        assert not is_at_least(v, 1, 70, 3)
        assert not is_at_least(v, 1, 71)
        assert is_at_least(v, 0, 99, 99)

    def test_is_at_least_nightly(self):
        """Test that a nightly of the required release satisfies it."""
        assert is_at_least(parse_release("1.71.0-nightly"), 1, 71)

    def test_is_prerelease(self):
        assert is_prerelease(parse_release("1.71.0-beta.3"))
        assert is_prerelease(parse_release("1.71.0-"))
        assert not is_prerelease(parse_release("1.71.0"))
        assert not is_prerelease(Version(1, 71, 0))


# =============================================================================
# Properties
# =============================================================================


@given(numbers, numbers, numbers)
def test_construct_equals_itself(major, minor, patch):
    v = Version(major, minor, patch)
    assert v == v
    assert v == Version(major, minor, patch)
    assert v._extra is None


@given(versions(), versions())
def test_ordering_matches_triple_comparison(a, b):
    ta = (a.major, a.minor, a.patch)
    tb = (b.major, b.minor, b.patch)
    assert (a < b) == (ta < tb)
    assert (a <= b) == (ta <= tb)
    assert (a > b) == (ta > tb)
    assert (a >= b) == (ta >= tb)
    assert compare_versions(a, b) == (ta > tb) - (ta < tb)


@given(versions(), versions())
def test_ordering_is_total(a, b):
    assert (a < b) + (a > b) + (a <= b and a >= b) == 1


@given(versions(), versions(), versions())
def test_ordering_is_transitive(a, b, c):
    if a <= b and b <= c:
        assert a <= c


@given(numbers, numbers, numbers, extras, extras)
def test_extra_only_affects_equality(major, minor, patch, extra1, extra2):
    a = Version(major, minor, patch, extra1)
    b = Version(major, minor, patch, extra2)
    assert not a < b
    assert not a > b
    assert a <= b and a >= b
    assert (a == b) == (extra1 == extra2)


@given(versions())
def test_report_parsing_is_pure(v):
    report = f"binary: rustc\nrelease: {v}\nLLVM version: 17.0\n"
    first = parse_report(report)
    assert first == parse_report(report)
    assert first == v


@given(versions(extra=st.text(alphabet=st.characters(exclude_characters="\r\n"))))
def test_extra_round_trips_verbatim(v):
    assert parse_release(str(v))._extra == v._extra
