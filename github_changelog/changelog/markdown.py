"""Markdown rendering and splicing for changelogs."""

from datetime import timezone

import structlog

from ..utils.constants import (
    CLOSED_ISSUES_HEADING,
    DEFAULT_CHANGELOG_TITLE,
    FIRST_RELEASE_CHANGELOG_TEMPLATE,
    FULL_CHANGELOG_TEMPLATE,
    ISSUE_TEMPLATE,
    MERGED_PULL_REQUESTS_HEADING,
    PULL_REQUEST_TEMPLATE,
    PUBLISHED_DATE_FORMAT,
    RELEASE_HEADER_TEMPLATE,
)
from .exceptions import InvalidReleaseError
from .models import ChangelogSection, Issue, PullRequest, Release

logger = structlog.get_logger(__name__)


def format_release_header(release: Release) -> str:
    """Format the ``## [tag](link) (YYYY-MM-DD)`` header line."""
    if release.published_at is None:
        raise InvalidReleaseError(release.tag_name)
    published_at = release.published_at
    if published_at.tzinfo is not None:
        published_at = published_at.astimezone(timezone.utc)
    return RELEASE_HEADER_TEMPLATE.format(
        tag_name=release.tag_name,
        link=release.html_url,
        published_on=published_at.strftime(PUBLISHED_DATE_FORMAT),
    )


def format_full_changelog_link(previous_release: Release | None, next_release: Release, owner: str, repo_name: str, host: str) -> str:
    """Format the comparison link line.

    Without a previous release there is nothing to compare, so the line links to the
    commit history of the next tag instead.
    """
    if previous_release is None:
        return FIRST_RELEASE_CHANGELOG_TEMPLATE.format(host=host, owner=owner, repo_name=repo_name, next_tag=next_release.tag_name)
    return FULL_CHANGELOG_TEMPLATE.format(
        host=host,
        owner=owner,
        repo_name=repo_name,
        previous_tag=previous_release.tag_name,
        next_tag=next_release.tag_name,
    )


def format_issue(issue: Issue) -> str:
    """Format a closed issue bullet."""
    return ISSUE_TEMPLATE.format(title=issue.title, number=issue.number, link=issue.html_url)


def format_pull_request(pull: PullRequest) -> str:
    """Format a merged pull request bullet."""
    return PULL_REQUEST_TEMPLATE.format(
        title=pull.title,
        number=pull.number,
        link=pull.html_url,
        author=pull.author_login,
        author_link=pull.author_html_url,
    )


def render_section(section: ChangelogSection, owner: str, repo_name: str, host: str = "github.com") -> str:
    """Render a changelog section into a markdown fragment.

    The fragment starts with an empty line so that, once spliced under the title,
    it is separated from it by a blank line. Subsections only appear when they have
    entries.
    """
    lines: list[str] = [
        "",
        format_release_header(section.next_release),
        "",
        format_full_changelog_link(section.previous_release, section.next_release, owner, repo_name, host),
    ]

    if section.issues:
        lines.extend(["", CLOSED_ISSUES_HEADING])
        lines.extend(format_issue(issue) for issue in section.issues)

    if section.pull_requests:
        lines.extend(["", MERGED_PULL_REQUESTS_HEADING])
        lines.extend(format_pull_request(pull) for pull in section.pull_requests)

    logger.debug(
        "Rendered changelog fragment",
        version=section.next_release.tag_name,
        issues=len(section.issues),
        pull_requests=len(section.pull_requests),
    )
    return "\n".join(lines)


def splice_fragment(document: str | None, fragment: str, title: str = DEFAULT_CHANGELOG_TITLE) -> str:
    """Insert a fragment directly below the title line of a changelog document.

    Everything after the title line is kept untouched and in order. A missing or
    blank document is started from ``title``.
    """
    if document is None or not document.strip():
        document = f"{title}\n"

    lines = document.split("\n")
    spliced = [lines[0], fragment, *lines[1:]]
    return "\n".join(spliced)
