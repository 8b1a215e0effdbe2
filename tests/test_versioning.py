# tests/test_versioning.py
"""Tests for semantic version bumping."""

import pytest

from promptvault.models import VersionBump
from promptvault.services.versioning import bump_version, normalize_bump, parse_version


class TestBumpVersion:
    """Tests for bump_version()."""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("patch", "1.2.4"),
            ("minor", "1.3.0"),
            ("major", "2.0.0"),
            (VersionBump.MINOR, "1.3.0"),
        ],
    )
    def test_bump_kinds(self, kind, expected):
        assert bump_version("1.2.3", kind) == expected

    def test_default_kind_is_patch(self):
        assert bump_version("1.0.0") == "1.0.1"

    def test_unknown_kind_is_patch(self):
        assert bump_version("1.2.3", "huge") == "1.2.4"
        assert bump_version("1.2.3", None) == "1.2.4"

    def test_kind_is_case_sensitive(self):
        """Only the exact lowercase kinds are special; anything else bumps patch."""
        assert bump_version("1.2.3", "MAJOR") == "1.2.4"
        assert bump_version("1.2.3", " minor ") == "1.2.4"

    def test_wrong_shape_resets(self):
        """Anything that is not three dot-separated parts becomes 1.0.0."""
        assert bump_version("bad", "patch") == "1.0.0"
        assert bump_version("1.2", "major") == "1.0.0"
        assert bump_version("1.2.3.4", "minor") == "1.0.0"
        assert bump_version("", "patch") == "1.0.0"
        assert bump_version(None, "patch") == "1.0.0"

    def test_unparseable_components_fall_back(self):
        """Bad major defaults to 1, bad minor/patch default to 0."""
        assert bump_version("x.2.3", "patch") == "1.2.4"
        assert bump_version("1.y.3", "patch") == "1.0.4"
        assert bump_version("1.2.z", "patch") == "1.2.1"
        assert bump_version("-1.2.3", "major") == "2.0.0"

    def test_large_numbers(self):
        assert bump_version("10.99.999", "patch") == "10.99.1000"


class TestParseVersion:
    """Tests for parse_version()."""

    def test_parses_three_parts(self):
        assert parse_version("3.4.5") == (3, 4, 5)

    def test_returns_none_for_wrong_shape(self):
        assert parse_version("3.4") is None


class TestNormalizeBump:
    """Tests for normalize_bump()."""

    def test_known_kinds(self):
        assert normalize_bump("major") is VersionBump.MAJOR
        assert normalize_bump("minor") is VersionBump.MINOR

    def test_unknown_kind(self):
        assert normalize_bump("other") is VersionBump.PATCH
        assert normalize_bump("Major") is VersionBump.PATCH
        assert normalize_bump(None) is VersionBump.PATCH
