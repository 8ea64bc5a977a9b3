"""CLI application for tagwatch."""

import logging
from contextlib import nullcontext

import typer
from rich.console import Console
from rich.logging import RichHandler

from core.config import Settings
from core.dispatch import ChunkedDispatcher
from core.errors import TagwatchError
from core.parse_manifest import walk_manifests
from core.pipeline import scan as run_scan
from core.report import ReportAggregator, render_report
from core.resolve_upstream import UpstreamResolver
from core.sinks import ConsoleSink, WebhookSink
from core.throttle import FixedDelay
from core.workspace import clean_working_copy, prepare_working_copy

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("tagwatch")


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


app = typer.Typer(
    name="tagwatch",
    help="tagwatch - Report packages whose upstream has a newer (or older) version",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """tagwatch - Report packages whose upstream has a newer (or older) version."""


@app.command()
def scan(
    repo_url: str | None = typer.Option(None, "--repo-url", help="Manifest repository to clone"),
    repo_dir: str | None = typer.Option(None, "--repo-dir", help="Directory for the working copy"),
    delay: float | None = typer.Option(None, "--delay", min=0.0, help="Seconds to wait after each package"),
    keep: bool = typer.Option(False, "--keep", help="Keep the working copy after the run"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the report instead of posting it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Scan the manifest repository and post the update checklist."""
    configure_logging(verbose)

    try:
        settings = Settings.from_env()
        webhook_url = None if dry_run else settings.require_webhook()
        root = prepare_working_copy(repo_url or settings.repo_url, repo_dir or settings.repo_dir)
    except TagwatchError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)

    try:
        aggregator = ReportAggregator(root)
        throttle = FixedDelay(settings.request_delay if delay is None else delay)
        with UpstreamResolver(settings) as resolver:
            run_scan(walk_manifests(root), resolver, aggregator, throttle)

        text = render_report(aggregator.build(), mention=settings.mention)
        sink_context = nullcontext(ConsoleSink(console)) if dry_run else WebhookSink(webhook_url)
        with sink_context as sink:
            summary = ChunkedDispatcher(sink).dispatch(text)
        if summary.failed:
            logger.warning("%d of %d chunks could not be delivered", summary.failed, summary.total)
    finally:
        if not keep:
            clean_working_copy(root)

    logger.info("Done.")


if __name__ == "__main__":
    app()
