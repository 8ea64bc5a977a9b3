"""Classification of declared versions against upstream."""

import logging

from .models import UpdateOutcome
from .version import try_parse_version

logger = logging.getLogger(__name__)


def evaluate(
    declared: str,
    latest: str,
    *,
    package_name: str = "",
    repo_group: str = "",
) -> UpdateOutcome | None:
    """Compare a declared version with the latest upstream version.

    Args:
        declared: Version declared in the manifest
        latest: Latest version resolved upstream
        package_name: Package the versions belong to
        repo_group: Group the manifest belongs to

    Returns:
        An outcome when the versions differ, None when they are equal or
        either one is not a valid semantic version
    """
    current_ver = try_parse_version(declared)
    latest_ver = try_parse_version(latest)

    if current_ver is None:
        logger.warning(
            "Manifest for %s has invalid declared version %r", package_name, declared
        )
        return None
    if latest_ver is None:
        logger.debug("Ignoring %s: invalid upstream version %r", package_name, latest)
        return None
    if current_ver == latest_ver:
        return None

    is_regression = current_ver > latest_ver
    if is_regression:
        logger.warning("Package retroceded: %s %s → %s", package_name, declared, latest)

    return UpdateOutcome(
        repo_group=repo_group,
        package_name=package_name,
        current_version=declared,
        latest_version=latest,
        is_regression=is_regression,
    )
