"""Selects the issues and pull requests closed between two releases."""

from collections.abc import Iterable
from datetime import datetime

import structlog

from .exceptions import InvalidReleaseError
from .models import Issue, PullRequest, Release

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def release_window(previous_release: Release | None, next_release: Release) -> tuple[datetime, datetime] | None:
    """Return the open interval (previous, next) of publish timestamps.

    Returns None when there is no previous release, meaning there is no window to diff against.

    Raises:
        InvalidReleaseError: If a release needed to bound the window was never published.
    """
    if next_release.published_at is None:
        raise InvalidReleaseError(next_release.tag_name)
    if previous_release is None:
        return None
    if previous_release.published_at is None:
        raise InvalidReleaseError(previous_release.tag_name)
    return previous_release.published_at, next_release.published_at


def _within(timestamp: datetime | None, window: tuple[datetime, datetime]) -> bool:
    start, end = window
    return timestamp is not None and start < timestamp < end


def filter_issues(issues: Iterable[Issue], previous_release: Release | None, next_release: Release) -> list[Issue]:
    """Keep the issues closed strictly between the two releases, dropping pull requests.

    Source order is preserved.
    """
    window = release_window(previous_release, next_release)
    if window is None:
        logger.info("No previous release, skipping closed issues", next_release=next_release.tag_name)
        return []

    filtered = [issue for issue in issues if not issue.is_pull_request and _within(issue.closed_at, window)]
    logger.debug("Filtered closed issues", count=len(filtered), numbers=[issue.number for issue in filtered])
    return filtered


def filter_pulls(pulls: Iterable[PullRequest], previous_release: Release | None, next_release: Release) -> list[PullRequest]:
    """Keep the pull requests merged strictly between the two releases.

    Pull requests closed without merging are dropped. Source order is preserved.
    """
    window = release_window(previous_release, next_release)
    if window is None:
        logger.info("No previous release, skipping merged pull requests", next_release=next_release.tag_name)
        return []

    filtered = [pull for pull in pulls if _within(pull.merged_at, window)]
    logger.debug("Filtered merged pull requests", count=len(filtered), numbers=[pull.number for pull in filtered])
    return filtered
