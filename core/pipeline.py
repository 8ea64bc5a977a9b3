"""Sequential update scan over manifest records."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .errors import ResolutionError
from .evaluate import evaluate
from .models import ManifestRecord, ResolvedLatest
from .report import ReportAggregator

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    def resolve(self, source_url: str) -> ResolvedLatest: ...


class Throttle(Protocol):
    def pause(self) -> None: ...


@dataclass
class ScanStats:
    """Counters for one scan."""

    scanned: int = 0
    skipped: int = 0
    failed: int = 0
    reported: int = 0


def scan(
    records: Iterable[ManifestRecord],
    resolver: Resolver,
    aggregator: ReportAggregator,
    throttle: Throttle | None = None,
) -> ScanStats:
    """Resolve, evaluate and collect outcomes for each manifest in order.

    Records without a source URL are skipped. A resolution failure skips
    that package only. The throttle pauses after every resolved or failed
    package, whatever the outcome.
    """
    stats = ScanStats()
    for record in records:
        if not record.source_url:
            logger.debug("Skipping %s: no source URL", record.name)
            stats.skipped += 1
            continue

        stats.scanned += 1
        try:
            latest = resolver.resolve(record.source_url)
        except ResolutionError as e:
            logger.error("Failed to get latest version for %s: %s", record.name, e)
            stats.failed += 1
        else:
            outcome = evaluate(
                record.declared_version,
                latest.version_string,
                package_name=record.name,
                repo_group=aggregator.group_for(record.file_path),
            )
            if outcome:
                aggregator.add(outcome)
                stats.reported += 1

        if throttle is not None:
            throttle.pause()

    logger.info(
        "Scanned %d packages: %d reported, %d failed, %d skipped",
        stats.scanned, stats.reported, stats.failed, stats.skipped,
    )
    return stats
