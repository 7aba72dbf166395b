"""Main changelog generation orchestration."""

import structlog

from ..configuration.models import ChangelogConfig
from ..github.abc import ChangelogClientBase
from ..github.adapter import GitHubKitAdapter
from .document import ChangelogDocument
from .markdown import render_section
from .models import ChangelogResult, ChangelogSection, ChangelogStatus, Issue, PullRequest, Release
from .resolver import resolve_releases
from .window import filter_issues, filter_pulls, release_window

logger = structlog.get_logger(__name__)


class ChangelogGenerator:
    """Builds the changelog section for the most recent release and writes it to the changelog file.

    All GitHub data is fetched before the document is touched, so a failed run never
    leaves a partially updated changelog behind.
    """

    def __init__(self, config: ChangelogConfig, adapter: ChangelogClientBase | None = None) -> None:
        """Initialize with the reconciled configuration.

        Args:
            config: Reconciled configuration for this run
            adapter: GitHub client to use; created from ``config`` on first use when omitted
        """
        self.config = config
        self.adapter = adapter
        self.document = ChangelogDocument(config.changelog_path)

    async def initialize(self) -> ChangelogClientBase:
        """Initialize GitHub adapter."""
        self.adapter = await GitHubKitAdapter.create(
            owner=self.config.owner,
            repo_name=self.config.repo_name,
            github_token=self.config.token,
            github_api_url=self.config.github_api_url,
        )
        logger.info("GitHub adapter initialized", owner=self.config.owner, repo_name=self.config.repo_name)
        return self.adapter

    async def build_section(self) -> ChangelogSection:
        """Fetch releases, issues and pull requests and select those belonging to the newest release."""
        adapter = self.adapter or await self.initialize()

        releases: list[Release] = await adapter.list_releases()
        previous_release, next_release = resolve_releases(releases, self.config.owner, self.config.repo_name)

        window = release_window(previous_release, next_release)
        issues: list[Issue] = []
        pulls: list[PullRequest] = []
        if window is None:
            logger.info("First release, no previous release to compare against", version=next_release.tag_name)
        else:
            since, _ = window
            issues = filter_issues(await adapter.list_closed_issues(since=since), previous_release, next_release)
            pulls = filter_pulls(await adapter.list_closed_pull_requests(), previous_release, next_release)

        logger.info(
            "Built changelog section",
            version=next_release.tag_name,
            closed_issues=len(issues),
            merged_pull_requests=len(pulls),
        )
        return ChangelogSection(
            previous_release=previous_release,
            next_release=next_release,
            issues=tuple(issues),
            pull_requests=tuple(pulls),
        )

    def render(self, section: ChangelogSection) -> str:
        """Render a section with this repository's comparison links."""
        return render_section(section, self.config.owner, self.config.repo_name, self.config.web_host)

    async def generate(self, dry_run: bool = False) -> ChangelogResult:
        """Generate the changelog section for the newest release.

        Args:
            dry_run: If True, render the fragment but don't write the changelog file

        Returns:
            Result of the generation process
        """
        section = await self.build_section()
        fragment = self.render(section)
        version = section.next_release.tag_name
        path = str(self.config.changelog_path)

        if dry_run:
            logger.info("Dry run mode - not writing changelog", path=path)
            return ChangelogResult(status=ChangelogStatus.DRY_RUN, version=version, path=path, fragment=fragment)

        written = self.document.update(section, fragment)
        status = ChangelogStatus.WRITTEN if written else ChangelogStatus.UNCHANGED
        return ChangelogResult(status=status, version=version, path=path, fragment=fragment)
