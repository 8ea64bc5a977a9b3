"""Tests for semantic version parsing."""

import pytest

from core.errors import VersionParseError
from core.version import parse_version, try_parse_version


class TestParseVersion:
    """Test parsing of semantic version strings."""

    def test_parse_plain_version(self):
        """Should parse a bare major.minor.patch version."""
        version = parse_version("1.2.3")
        assert (version.major, version.minor, version.patch) == (1, 2, 3)
        assert version.prerelease is None
        assert str(version) == "1.2.3"

    def test_parse_strips_v_prefix(self):
        """Should accept a leading v and drop it from the string form."""
        assert str(parse_version("v2.0.1")) == "2.0.1"
        assert parse_version("V2.0.1") == parse_version("2.0.1")
        assert parse_version(" 1.0.0 ") == parse_version("1.0.0")

    def test_parse_prerelease_and_build(self):
        """Should keep pre-release and build parts."""
        version = parse_version("v1.4.0-rc.1+build.7")
        assert version.prerelease == "rc.1"
        assert version.build == "build.7"
        assert version.is_prerelease
        assert str(version) == "1.4.0-rc.1+build.7"

    @pytest.mark.parametrize("value", [
        "", "1", "1.2", "1.2.3.4", "latest", "release-1.2.3", "v", "1.2.x",
        "1.2.3-", "01.2.3", "1.2.3-01",
    ])
    def test_parse_rejects_invalid(self, value):
        """Should reject strings that are not major.minor.patch semantic versions."""
        with pytest.raises(VersionParseError):
            parse_version(value)

    def test_try_parse_returns_none(self):
        """Should return None instead of raising."""
        assert try_parse_version("not-a-version") is None
        assert try_parse_version("1.0.0") == parse_version("1.0.0")


class TestVersionOrdering:
    """Test comparison of parsed versions."""

    def test_numeric_ordering(self):
        """Should compare components numerically, not lexically."""
        assert parse_version("1.10.0") > parse_version("1.9.9")
        assert parse_version("2.0.0") > parse_version("1.99.99")
        assert parse_version("0.0.2") > parse_version("0.0.1")

    def test_prerelease_sorts_before_release(self):
        """Should order a pre-release below its release."""
        assert parse_version("1.0.0-alpha") < parse_version("1.0.0-beta")
        assert parse_version("1.0.0-beta") < parse_version("1.0.0-rc.1")
        assert parse_version("1.0.0-rc.1") < parse_version("1.0.0")

    def test_build_metadata_ignored(self):
        """Should treat versions differing only in build metadata as equal."""
        assert parse_version("1.0.0+abc") == parse_version("1.0.0")
        assert hash(parse_version("1.0.0+abc")) == hash(parse_version("1.0.0"))

    def test_descending_sort(self):
        """Should support sorting and max."""
        versions = [parse_version(v) for v in ["1.0.0", "v3.1.0", "2.5.0", "3.0.0"]]
        ordered = sorted(versions, reverse=True)
        assert [str(v) for v in ordered] == ["3.1.0", "3.0.0", "2.5.0", "1.0.0"]
        assert max(versions) == parse_version("3.1.0")

    @pytest.mark.parametrize("value", [
        "1.0.0-alpha.beta", "1.0.0-0.3.7", "1.0.0-x.7.z.92",
        "2.0.0-nightly.1", "1.0.0-SNAPSHOT", "1.2.3-1",
    ])
    def test_accepts_any_semver_prerelease(self, value):
        """Should accept every pre-release form allowed by semantic versioning."""
        assert str(parse_version(value)) == value

    def test_prerelease_identifier_precedence(self):
        """Should order pre-release identifiers field by field."""
        ordered = [
            "1.0.0-alpha", "1.0.0-alpha.1", "1.0.0-alpha.beta", "1.0.0-beta",
            "1.0.0-beta.2", "1.0.0-beta.11", "1.0.0-rc.1", "1.0.0",
        ]
        versions = [parse_version(v) for v in ordered]
        assert sorted(reversed(versions)) == versions

    def test_dev_is_not_below_alpha(self):
        """Should compare alphanumeric identifiers in ASCII order."""
        assert parse_version("1.0.0-dev") > parse_version("1.0.0-beta")
        assert parse_version("1.0.0-alpha.0") > parse_version("1.0.0-alpha")
        assert parse_version("1.0.0-1") < parse_version("1.0.0-alpha")
