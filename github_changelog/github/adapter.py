"""GitHub client adapter for the githubkit library."""

from datetime import datetime
from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GitHubException
from githubkit.versions.latest.models import Issue as GitHubIssue
from githubkit.versions.latest.models import PullRequestSimple
from githubkit.versions.latest.models import Release as GitHubRelease

from github_changelog.changelog.models import Issue, PullRequest, Release
from github_changelog.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_PER_PAGE

from .abc import ChangelogClientBase
from .client import GitHubClient, get_github_token_client
from .exceptions import UpstreamError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

GHOST_LOGIN = "ghost"
"""Login GitHub shows for pull requests whose author account was deleted."""


def raise_upstream_error(func: F) -> F:
    """Decorator turning any githubkit failure into an UpstreamError, logging the details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except GitHubException as exc:
            response = getattr(exc, "response", None)
            logger.error(
                "GitHub API call failed",
                function=func.__name__,
                error_type=type(exc).__name__,
                status_code=getattr(response, "status_code", None),
                url=str(getattr(response, "url", "")) or None,
            )
            raise UpstreamError(func.__name__, exc) from exc

    return wrapper  # type: ignore


def release_from_github(release: GitHubRelease) -> Release:
    """Convert a githubkit release into a Release."""
    return Release(tag_name=release.tag_name, html_url=release.html_url, published_at=release.published_at)


def issue_from_github(issue: GitHubIssue) -> Issue:
    """Convert a githubkit issue into an Issue.

    The ``pull_request`` field is only set (truthy) on issues that are pull requests.
    """
    return Issue(
        title=issue.title,
        number=issue.number,
        html_url=issue.html_url,
        closed_at=issue.closed_at,
        is_pull_request=bool(getattr(issue, "pull_request", None)),
    )


def pull_request_from_github(pull: PullRequestSimple) -> PullRequest:
    """Convert a githubkit pull request into a PullRequest."""
    user = pull.user
    return PullRequest(
        title=pull.title,
        number=pull.number,
        html_url=pull.html_url,
        merged_at=pull.merged_at,
        author_login=user.login if user else GHOST_LOGIN,
        author_html_url=user.html_url if user else f"https://github.com/{GHOST_LOGIN}",
    )


class GitHubKitAdapter(ChangelogClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str, per_page: int = DEFAULT_PER_PAGE) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name
        self.per_page = per_page

    @classmethod
    async def create(
        cls,
        owner: str,
        repo_name: str,
        github_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Repository owner or organization
            repo_name: Repository name
            github_token: Token used to authenticate
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_token_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    # Release Operations
    @raise_upstream_error
    async def list_releases(self) -> list[Release]:
        """List releases for the repository, newest first."""
        logger.debug("Fetching releases", owner=self.owner, repo=self.repo_name, per_page=self.per_page)
        response: Response[list[GitHubRelease]] = await self.client.rest.repos.async_list_releases(
            owner=self.owner,
            repo=self.repo_name,
            per_page=self.per_page,
        )
        releases = [release_from_github(release) for release in response.parsed_data]
        for release in releases:
            logger.debug(
                "Release found",
                tag_name=release.tag_name,
                published_at=release.published_at.isoformat() if release.published_at else "N/A",
            )
        logger.info(f"Total releases found: {len(releases)}")
        return releases

    # Issue Operations
    @raise_upstream_error
    async def list_closed_issues(self, since: datetime) -> list[Issue]:
        """List closed issues (and pull requests, flagged as such) updated since a timestamp."""
        logger.debug("Fetching closed issues", owner=self.owner, repo=self.repo_name, since=since.isoformat())
        response: Response[list[GitHubIssue]] = await self.client.rest.issues.async_list_for_repo(
            owner=self.owner,
            repo=self.repo_name,
            state="closed",
            since=since,
            per_page=self.per_page,
        )
        issues = [issue_from_github(issue) for issue in response.parsed_data]
        logger.info(f"Total closed issues found: {len(issues)}")
        return issues

    # Pull Request Operations
    @raise_upstream_error
    async def list_closed_pull_requests(self) -> list[PullRequest]:
        """List closed pull requests for the repository."""
        logger.debug("Fetching closed pull requests", owner=self.owner, repo=self.repo_name)
        response: Response[list[PullRequestSimple]] = await self.client.rest.pulls.async_list(
            owner=self.owner,
            repo=self.repo_name,
            state="closed",
            per_page=self.per_page,
        )
        pulls = [pull_request_from_github(pull) for pull in response.parsed_data]
        logger.info(f"Total closed pull requests found: {len(pulls)}")
        return pulls
