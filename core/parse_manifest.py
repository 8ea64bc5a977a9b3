"""Package manifest (JSON) parsing and discovery."""

import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .models import ManifestRecord

logger = logging.getLogger(__name__)


class ManifestParser:
    """Parser for JSON package manifests of shape {name, version, source.url}."""

    def __init__(self, suffix: str = ".json", skip_dirs: tuple[str, ...] = (".git",)):
        self.suffix = suffix
        self.skip_dirs = skip_dirs

    def parse(self, content: str, file_path: str = "") -> ManifestRecord | None:
        """Parse manifest content into a ManifestRecord, or None if it is not one."""
        try:
            data = json.loads(content)
        except ValueError:
            return None

        if not isinstance(data, dict):
            return None

        name = data.get("name")
        version = data.get("version")
        if not isinstance(name, str) or not isinstance(version, str):
            return None

        source = data.get("source")
        url = source.get("url") if isinstance(source, dict) else None

        return ManifestRecord(
            name=name,
            declared_version=version,
            source_url=url.strip() if isinstance(url, str) else "",
            file_path=file_path,
        )

    def walk(self, root: str | Path) -> Iterator[ManifestRecord]:
        """Yield manifests below root in lexical path order."""
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in self.skip_dirs)
            for filename in sorted(filenames):
                if not filename.endswith(self.suffix):
                    continue

                path = os.path.join(dirpath, filename)
                try:
                    content = Path(path).read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    logger.debug("Skipping unreadable file %s: %s", path, e)
                    continue

                record = self.parse(content, path)
                if record:
                    yield record


def parse_manifest(content: str, file_path: str = "") -> ManifestRecord | None:
    """Parse JSON manifest content.

    Args:
        content: The manifest file content
        file_path: Path the content was read from

    Returns:
        Parsed ManifestRecord, or None for non-manifest content
    """
    return ManifestParser().parse(content, file_path)


def walk_manifests(root: str | Path) -> Iterator[ManifestRecord]:
    """Yield every manifest found below ``root``."""
    return ManifestParser().walk(root)
