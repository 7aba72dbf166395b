"""Shared constants used across the application."""

# Changelog Constants
# -------------------

# Default File Settings
DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"
"""Default path to the changelog file, relative to the working directory."""

DEFAULT_CHANGELOG_TITLE = "# Changelog"
"""Title line written at the top of a freshly created changelog."""

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API URL."""

DEFAULT_PER_PAGE = 100
"""Number of items requested from each listing endpoint (a single page is fetched)."""

# Markdown Templates
# ------------------

RELEASE_HEADER_TEMPLATE = "## [{tag_name}]({link}) ({published_on})"
"""Header line of a changelog fragment."""

RELEASE_HEADER_PREFIX = "## [{tag_name}]("
"""Start of the header line of an already written section for a tag."""

FULL_CHANGELOG_TEMPLATE = "[Full Changelog](https://{host}/{owner}/{repo_name}/compare/{previous_tag}...{next_tag})"
"""Comparison link between the previous and next release tags."""

FIRST_RELEASE_CHANGELOG_TEMPLATE = "[Full Changelog](https://{host}/{owner}/{repo_name}/commits/{next_tag})"
"""Degraded comparison link used when there is no previous release to compare against."""

CLOSED_ISSUES_HEADING = "**Closed issues:**"
"""Subheading preceding the closed issue bullets."""

MERGED_PULL_REQUESTS_HEADING = "**Merged pull requests:**"
"""Subheading preceding the merged pull request bullets."""

ISSUE_TEMPLATE = "- {title} [#{number}]({link})"
"""Bullet line for a closed issue."""

PULL_REQUEST_TEMPLATE = "- {title} [#{number}]({link}) ([{author}]({author_link}))"
"""Bullet line for a merged pull request."""

PUBLISHED_DATE_FORMAT = "%Y-%m-%d"
"""strftime format of the release date shown in the header line."""

# Logging
# -------

REDACTED_PLACEHOLDER = "***"
"""Replacement text for secrets found in log output."""
