"""Semantic version parsing and comparison."""

from dataclasses import dataclass, field

import semver

from .errors import VersionParseError


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A parsed semantic version.

    Ordering and equality use only the precedence key, so ``v1.2.0`` equals
    ``1.2.0`` and build metadata never changes the result of a comparison.
    """

    key: semver.Version = field(repr=False)
    major: int = field(compare=False)
    minor: int = field(compare=False)
    patch: int = field(compare=False)
    prerelease: str | None = field(default=None, compare=False)
    build: str | None = field(default=None, compare=False)

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text


def parse_version(value: str) -> SemanticVersion:
    """Parse a version string into a SemanticVersion.

    Args:
        value: Version string, optionally prefixed with "v"

    Returns:
        Parsed semantic version

    Raises:
        VersionParseError: If the string is not a major.minor.patch semantic
            version
    """
    text = value.strip() if isinstance(value, str) else ""
    if text[:1] in ("v", "V"):
        text = text[1:]

    try:
        parsed = semver.Version.parse(text)
    except ValueError:
        raise VersionParseError(f"Invalid semantic version: {value!r}")

    return SemanticVersion(
        # Build metadata does not take part in precedence
        key=parsed.replace(build=None),
        major=parsed.major,
        minor=parsed.minor,
        patch=parsed.patch,
        prerelease=parsed.prerelease,
        build=parsed.build,
    )


def try_parse_version(value: str) -> SemanticVersion | None:
    """Parse a version string, returning None on failure."""
    try:
        return parse_version(value)
    except VersionParseError:
        return None
