"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from core.config import Settings


@pytest.fixture
def sample_manifest():
    """Sample package manifest content for testing."""
    return json.dumps({
        "name": "tool",
        "version": "1.2.0",
        "source": {"url": "https://github.com/acme/tool/releases/download/v1.2.0/tool.tar.gz"},
    })


@pytest.fixture
def manifest_tree(tmp_path):
    """Create a small manifest repository layout for testing."""
    def write(rel_path, data):
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    write("core/tool/tool.json", {
        "name": "tool", "version": "1.2.0",
        "source": {"url": "https://github.com/acme/tool/archive/v1.2.0.tar.gz"},
    })
    write("core/zlib/zlib.json", {
        "name": "zlib", "version": "1.3.1",
        "source": {"url": "https://zlib.net/zlib-1.3.1.tar.gz"},
    })
    write("extra/nourl/pkg.json", {"name": "nourl", "version": "0.1.0"})
    write("extra/readme.txt", "not a manifest")
    write("extra/broken.json", "{not json")
    write(".git/config.json", {"name": "git", "version": "1.0.0"})
    return tmp_path


@pytest.fixture
def settings():
    """Settings with every credential configured."""
    return Settings(
        webhook_url="https://discord.test/api/webhooks/1/abc",
        github_token="gh-token",
        gitlab_token="gl-token",
        codeberg_token="cb-token",
    )


@pytest.fixture
def tags_client():
    """Build an httpx client that answers every request with a tag listing."""
    def build(tags=None, status_code=200, content=None, requests=None):
        def handler(request):
            if requests is not None:
                requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=[{"name": t} for t in tags or []])

        return httpx.Client(transport=httpx.MockTransport(handler))

    return build
