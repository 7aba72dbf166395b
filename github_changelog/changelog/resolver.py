"""Resolves the release pair a changelog section is built from."""

from collections.abc import Sequence

import structlog

from .exceptions import NoReleaseFoundError
from .models import Release

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def resolve_releases(releases: Sequence[Release], owner: str = "", repo_name: str = "") -> tuple[Release | None, Release]:
    """Pick the previous and next release out of a newest-first release listing.

    The listing order is trusted as returned by GitHub; no sorting happens here.

    Args:
        releases: Releases of the repository, newest first.
        owner: Repository owner, used in the error message only.
        repo_name: Repository name, used in the error message only.

    Returns:
        Tuple of (previous release or None for a first release, next release).

    Raises:
        NoReleaseFoundError: If ``releases`` is empty.
    """
    if not releases:
        raise NoReleaseFoundError(owner, repo_name)

    next_release = releases[0]
    previous_release = releases[1] if len(releases) > 1 else None

    logger.info(
        "Resolved releases",
        next_release=next_release.tag_name,
        previous_release=previous_release.tag_name if previous_release else None,
    )
    return previous_release, next_release
