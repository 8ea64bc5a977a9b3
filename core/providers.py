"""Upstream version providers and their URL and request rules."""

import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

import httpx

from .errors import MalformedURLError


@dataclass(frozen=True)
class RepoRef:
    """Owner and repository name parsed from a source URL."""

    owner: str
    repo: str

    @property
    def path(self) -> str:
        return f"{self.owner}/{self.repo}"


class Provider(Enum):
    """Supported tag-listing providers, in detection order."""

    GITHUB = "github"
    GITLAB = "gitlab"
    CODEBERG = "codeberg"

    @property
    def host(self) -> str:
        return _HOSTS[self]

    @classmethod
    def detect(cls, url: str) -> "Provider | None":
        """Return the first provider whose host appears in the URL."""
        for provider in cls:
            if provider.host in url:
                return provider
        return None

    def parse_repo(self, url: str) -> RepoRef:
        """Extract owner/repo from the segments following the host.

        Raises:
            MalformedURLError: If the URL does not contain both segments
        """
        pattern = re.escape(self.host) + r"/([^/?#]+)/([^/?#]+)"
        match = re.search(pattern, url)
        if not match:
            raise MalformedURLError(f"invalid {self.value} URL: {url}")

        owner, repo = match.group(1), match.group(2)
        if repo.endswith(".git"):
            repo = repo[: -len(".git")]
        if not repo or not _printable(owner + repo):
            raise MalformedURLError(f"invalid {self.value} URL: {url}")
        return RepoRef(owner=owner, repo=repo)

    def tags_url(self, ref: RepoRef) -> str:
        if self is Provider.GITLAB:
            project = quote(ref.path, safe="")
            return f"https://gitlab.com/api/v4/projects/{project}/repository/tags"
        if self is Provider.CODEBERG:
            return f"https://codeberg.org/api/v1/repos/{ref.owner}/{ref.repo}/tags"
        return f"https://api.github.com/repos/{ref.owner}/{ref.repo}/tags"

    def auth_headers(self, token: str | None) -> dict[str, str]:
        """Credential header for this provider; empty when no token is set."""
        if not token:
            return {}
        if self is Provider.GITLAB:
            return {"PRIVATE-TOKEN": token}
        return {"Authorization": f"token {token}"}

    def build_request(self, ref: RepoRef, token: str | None = None) -> httpx.Request:
        """Build the tag listing request for a repository."""
        headers = {"Accept": "application/json", "User-Agent": "tagwatch"}
        if self is Provider.GITHUB:
            headers["Accept"] = "application/vnd.github+json"
        headers.update(self.auth_headers(token))
        return httpx.Request(
            "GET", self.tags_url(ref), params=_PAGE_PARAMS[self], headers=headers
        )


def _printable(text: str) -> bool:
    return all(ch.isprintable() and not ch.isspace() for ch in text)


_HOSTS = {
    Provider.GITHUB: "github.com",
    Provider.GITLAB: "gitlab.com",
    Provider.CODEBERG: "codeberg.org",
}

_PAGE_PARAMS = {
    Provider.GITHUB: {"per_page": "100"},
    Provider.GITLAB: {"per_page": "100"},
    Provider.CODEBERG: {"limit": "50"},
}
