"""Chunked delivery of report text to a message sink."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from .errors import DeliveryError

logger = logging.getLogger(__name__)

MAX_CHUNK_LENGTH = 1900


class Sink(Protocol):
    def send(self, content: str) -> None: ...


@dataclass
class DispatchSummary:
    """Result of dispatching one text."""

    sent: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.sent + self.failed


def split_chunks(text: str, limit: int = MAX_CHUNK_LENGTH) -> list[str]:
    """Split text into trimmed chunks of at most ``limit`` characters.

    A chunk is cut at the last line break inside the window so lines are kept
    whole; a line longer than the limit is cut at the limit. Chunks that are
    empty after trimming are dropped.
    """
    if limit <= 0:
        raise ValueError("limit must be positive")

    chunks = []
    remaining = text
    while remaining:
        window = remaining[:limit]
        if len(remaining) > limit:
            cut = window.rfind("\n")
            if cut > 0:
                window = window[:cut]

        remaining = remaining[len(window):].lstrip()
        chunk = window.strip()
        if chunk:
            chunks.append(chunk)
    return chunks


class ChunkedDispatcher:
    """Sends text to a sink in bounded chunks, best effort."""

    def __init__(self, sink: Sink, limit: int = MAX_CHUNK_LENGTH):
        self.sink = sink
        self.limit = limit

    def dispatch(self, text: str) -> DispatchSummary:
        """Deliver text chunk by chunk.

        A failed chunk is logged and skipped; later chunks are still sent.

        Args:
            text: Full message text

        Returns:
            Count of sent and failed chunks
        """
        logger.debug("Dispatching message, length=%d", len(text))
        summary = DispatchSummary()
        for chunk in split_chunks(text, self.limit):
            try:
                self.sink.send(chunk)
            except (DeliveryError, httpx.HTTPError) as e:
                logger.error("Failed to deliver chunk of %d chars: %s", len(chunk), e)
                summary.failed += 1
            else:
                summary.sent += 1
        return summary
