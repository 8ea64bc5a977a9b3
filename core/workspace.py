"""Local working copy of the manifest repository."""

import logging
import shutil
import subprocess
from pathlib import Path

from .errors import WorkspaceError

logger = logging.getLogger(__name__)


def _git(*args: str, timeout: float | None = None) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            ["git", *args], capture_output=True, text=True, timeout=timeout
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise WorkspaceError(f"git {args[0]} failed: {e}")


def is_checkout(path: str | Path) -> bool:
    """Return True if path is the root of a readable git checkout."""
    path = Path(path)
    if not (path / ".git").exists():
        return False
    result = _git("-C", str(path), "rev-parse", "--git-dir")
    return result.returncode == 0


def clean_working_copy(path: str | Path) -> None:
    """Remove the working copy; failures are logged, never raised."""
    logger.debug("Cleaning up repository folder %s", path)
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return
    except OSError as e:
        logger.error("Failed to remove repo folder %s: %s", path, e)
    else:
        logger.debug("Repo folder removed successfully")


def prepare_working_copy(
    repo_url: str, dest: str | Path, timeout: float | None = 300.0
) -> Path:
    """Clone the manifest repository into ``dest``.

    An existing checkout at ``dest`` belongs to another run and is left
    alone; a corrupted one is removed and cloned again.

    Args:
        repo_url: Repository to clone
        dest: Target directory
        timeout: Clone timeout in seconds

    Returns:
        Path of the fresh working copy

    Raises:
        WorkspaceError: If dest is in use or the clone fails
    """
    dest = Path(dest)
    if dest.exists():
        if is_checkout(dest):
            raise WorkspaceError(f"Repository already exists at {dest}")
        logger.warning("Repo at %s corrupted. Removing and recloning", dest)
        clean_working_copy(dest)

    logger.info("Cloning %s into %s", repo_url, dest)
    result = _git("clone", "--depth", "1", repo_url, str(dest), timeout=timeout)
    if result.returncode != 0:
        raise WorkspaceError(f"Failed to clone repo: {result.stderr.strip()}")
    return dest
