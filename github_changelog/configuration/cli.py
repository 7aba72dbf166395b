"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path
from typing import NoReturn

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer import Option
from typing_extensions import Annotated

from github_changelog.changelog.exceptions import ChangelogError
from github_changelog.changelog.generator import ChangelogGenerator
from github_changelog.changelog.models import ChangelogStatus
from github_changelog.configuration.exceptions import ConfigurationError
from github_changelog.configuration.reconcile import reconcile_changelog_configuration
from github_changelog.github.exceptions import UpstreamError
from github_changelog.utils.github import mask_secret_in_github_actions, running_in_github_actions
from github_changelog.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.callback()
def main_callback() -> None:
    """Generate CHANGELOG.md sections from GitHub releases, issues and pull requests."""


def fail(message: str) -> NoReturn:
    """Report a fatal error and exit with a non-zero status."""
    if running_in_github_actions():
        typer.echo(f"::error::{message}")
    typer.echo(message, err=True)
    raise typer.Exit(1)


@typer_app.command(name="generate")
def generate_cli(
    token: Annotated[str | None, Option("--token", help="GitHub token (falls back to GITHUB_TOKEN / INPUT_TOKEN).")] = None,
    owner: Annotated[str | None, Option("--owner", help="Repository owner or organization (falls back to OWNER / INPUT_OWNER).")] = None,
    repo: Annotated[str | None, Option("--repo", help="Repository name or owner/name (falls back to REPO / INPUT_REPO / GITHUB_REPOSITORY).")] = None,
    github_api_url: Annotated[str | None, Option("--github-api-url", help="GitHub API URL (falls back to GITHUB_API_URL).")] = None,
    changelog_path: Annotated[Path | None, Option("--changelog-path", help="Path to the changelog file (falls back to CHANGELOG_PATH).")] = None,
    dry_run: Annotated[bool, Option("--dry-run", help="Print the new section instead of writing the changelog.")] = False,
    debug: Annotated[bool, Option("--debug", help="Enable debug logging.")] = False,
) -> None:
    """Add a section for the most recent release to the changelog."""
    configure_logging(debug=debug, secrets=[token or ""])

    try:
        config = reconcile_changelog_configuration(
            cli_token=token,
            cli_owner=owner,
            cli_repo=repo,
            cli_github_api_url=github_api_url,
            cli_changelog_path=changelog_path,
            cli_debug=debug,
        )
    except (ConfigurationError, ValidationError) as exc:
        fail(f"Configuration error: {exc}")

    mask_secret_in_github_actions(config.token)
    configure_logging(debug=config.debug, secrets=[config.token])

    generator = ChangelogGenerator(config)
    try:
        result = asyncio.run(generator.generate(dry_run=dry_run))
    except (UpstreamError, ChangelogError) as exc:
        fail(f"Error generating changelog: {exc}")

    if result.status == ChangelogStatus.DRY_RUN:
        typer.echo(result.fragment)
    elif result.status == ChangelogStatus.WRITTEN:
        typer.echo(f"Added section for {result.version} to {result.path}")
    else:
        typer.echo(f"Nothing new to add for {result.version}, {result.path} left unchanged")
    typer.echo("Finish!")


if __name__ == "__main__":
    typer_app()
