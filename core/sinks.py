"""Message sinks accepting one chunk per call."""

import logging

import httpx
from rich.console import Console

from .errors import DeliveryError

logger = logging.getLogger(__name__)


class WebhookSink:
    """Posts chunks to a Discord-style webhook as JSON."""

    def __init__(
        self, url: str, client: httpx.Client | None = None, timeout: float = 10.0
    ):
        self.url = url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "WebhookSink":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def send(self, content: str) -> None:
        try:
            response = self._client.post(self.url, json={"content": content})
        except httpx.HTTPError as e:
            raise DeliveryError(f"webhook POST error: {e}")

        if not response.is_success:
            raise DeliveryError(
                f"webhook returned status {response.status_code}",
                status_code=response.status_code,
            )
        logger.debug("Webhook POST success, status %d", response.status_code)


class ConsoleSink:
    """Prints chunks to the terminal instead of delivering them."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def send(self, content: str) -> None:
        self.console.rule(style="dim")
        self.console.print(content, markup=False, highlight=False)
