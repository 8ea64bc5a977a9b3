"""Core data models for tagwatch."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class ManifestRecord:
    """A package manifest read from the scanned repository."""

    name: str
    declared_version: str
    source_url: str = ""
    file_path: str = ""


@dataclass(frozen=True)
class ResolvedLatest:
    """Highest version found upstream for a package."""

    version_string: str
    provider: str = "url"  # github, gitlab, codeberg, url


@dataclass(frozen=True)
class UpdateOutcome:
    """A reportable difference between declared and upstream versions."""

    repo_group: str
    package_name: str
    current_version: str
    latest_version: str
    is_regression: bool = False


@dataclass
class Report:
    """Outcomes collected during one run."""

    run_date: date
    outcomes: list[UpdateOutcome] = field(default_factory=list)

    @property
    def has_updates(self) -> bool:
        return bool(self.outcomes)

    @property
    def regressions(self) -> list[UpdateOutcome]:
        return [outcome for outcome in self.outcomes if outcome.is_regression]
