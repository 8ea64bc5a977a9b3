"""Upstream version resolution from provider tag listings."""

import logging
import re

import httpx

from .config import Settings
from .errors import MalformedURLError, NoValidVersionsError, ResolutionError
from .models import ResolvedLatest
from .providers import Provider
from .version import SemanticVersion, try_parse_version

logger = logging.getLogger(__name__)

_URL_VERSION_RE = re.compile(r"(\d+\.\d+\.\d+)")


class UpstreamResolver:
    """Resolver for the latest upstream version of a package."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ):
        """Initialize upstream resolver.

        Args:
            settings: Settings holding the per-provider credentials
            client: HTTP client to use; one is created when omitted
            timeout: Request timeout in seconds for a created client
        """
        self.settings = settings or Settings()
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def __enter__(self) -> "UpstreamResolver":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def resolve(self, source_url: str) -> ResolvedLatest:
        """Resolve the latest version for a package source URL.

        Args:
            source_url: Declared source URL of the package

        Returns:
            Highest valid version found upstream

        Raises:
            ResolutionError: If no version could be determined
        """
        provider = Provider.detect(source_url)
        if provider is None:
            return ResolvedLatest(version_string=version_from_url(source_url))

        ref = provider.parse_repo(source_url)
        try:
            request = provider.build_request(ref, self.settings.credential_for(provider))
        except httpx.InvalidURL as e:
            raise MalformedURLError(f"invalid {provider.value} URL: {source_url} ({e})")
        request.extensions["timeout"] = self._client.timeout.as_dict()
        logger.debug("Fetching %s tags for %s", provider.value, ref.path)
        tag_names = self._fetch_tag_names(request)
        latest = latest_version(tag_names)
        return ResolvedLatest(version_string=str(latest), provider=provider.value)

    def _fetch_tag_names(self, request: httpx.Request) -> list[str]:
        try:
            response = self._client.send(request)
        except httpx.HTTPError as e:
            raise ResolutionError(f"request to {request.url.host} failed: {e}")

        if not response.is_success:
            raise ResolutionError(
                f"API returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ResolutionError(f"malformed response body: {e}")

        if not isinstance(payload, list):
            raise ResolutionError("malformed response body: expected a list of tags")

        names = []
        for tag in payload:
            if not isinstance(tag, dict):
                raise ResolutionError("malformed response body: tag is not an object")
            name = tag.get("name")
            if isinstance(name, str):
                names.append(name)
        return names


def latest_version(tag_names: list[str]) -> SemanticVersion:
    """Return the highest semantic version among tag names.

    Tags that are not semantic versions are ignored.

    Raises:
        NoValidVersionsError: If none of the tags parse
    """
    versions = [v for v in (try_parse_version(name) for name in tag_names) if v]
    if not versions:
        raise NoValidVersionsError()
    return max(versions)


def version_from_url(url: str) -> str:
    """Extract a bare major.minor.patch version embedded in a URL."""
    match = _URL_VERSION_RE.search(url)
    if not match:
        raise ResolutionError(f"no version found in URL: {url}")
    logger.debug("Extracted version from URL (%s): %s", url, match.group(1))
    return match.group(1)
