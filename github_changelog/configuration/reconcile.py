"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

import structlog

from github_changelog.configuration.env import Settings
from github_changelog.configuration.exceptions import ConfigurationError, RequiredConfigurationElementError
from github_changelog.configuration.models import ChangelogConfig
from github_changelog.utils.github import split_repository_in_configuration

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def resolve_owner_and_repo_name(owner: str | None, repo: str | None) -> tuple[str, str]:
    """Work out the owner and repository name from an owner and a repo that may be 'owner/name'.

    Raises:
        RequiredConfigurationElementError: If the repository, or an owner for a bare name, is missing.
        ConfigurationError: If the repository is malformed.
    """
    if not repo:
        raise RequiredConfigurationElementError(name="Repository", cli_name="--repo", env_name="REPO")

    if "/" not in repo.strip("/"):
        if not owner:
            raise RequiredConfigurationElementError(name="Repository owner", cli_name="--owner", env_name="OWNER")
        return owner, repo.strip("/")

    try:
        split_owner, repo_name = split_repository_in_configuration(repo)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    if owner and owner != split_owner:
        logger.warning("Owner differs from the owner in the repository name, using the latter", owner=owner, repo=repo)
    return split_owner, repo_name


def reconcile_changelog_configuration(
    cli_token: str | None = None,
    cli_owner: str | None = None,
    cli_repo: str | None = None,
    cli_github_api_url: str | None = None,
    cli_changelog_path: Path | None = None,
    cli_debug: bool = False,
    settings: Settings | None = None,
) -> ChangelogConfig:
    """Reconcile command line arguments with environment settings.

    Command line values take precedence; empty values count as unset.

    Raises:
        RequiredConfigurationElementError: If the token or repository is missing.
        ConfigurationError: If the repository is malformed.
    """
    if settings is None:
        settings = Settings()

    token = cli_token or settings.GITHUB_TOKEN
    if not token:
        raise RequiredConfigurationElementError(name="GitHub token", cli_name="--token", env_name="GITHUB_TOKEN")

    owner, repo_name = resolve_owner_and_repo_name(cli_owner or settings.OWNER, cli_repo or settings.REPO)

    config = ChangelogConfig(
        token=token,
        owner=owner,
        repo_name=repo_name,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        changelog_path=cli_changelog_path or settings.CHANGELOG_PATH,
        debug=cli_debug or settings.DEBUG,
    )
    logger.debug("Reconciled configuration", config=config)
    return config
