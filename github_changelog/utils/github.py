"""Contains utility functions for GitHub interactions."""

import os
from urllib.parse import urlparse


def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("Repository is required in config.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def derive_web_host(github_api_url: str) -> str:
    """Derive the web host from a GitHub API URL.

    ``https://api.github.com`` maps to ``github.com``; a GitHub Enterprise Server
    URL such as ``https://ghe.example.com/api/v3`` maps to ``ghe.example.com``.
    """
    host = urlparse(github_api_url).netloc or github_api_url
    if host.startswith("api."):
        host = host.removeprefix("api.")
    return host


def running_in_github_actions() -> bool:
    """Whether the process runs as a GitHub Actions step."""
    return os.getenv("GITHUB_ACTIONS") == "true"


def mask_secret_in_github_actions(secret: str) -> None:
    """Ask the GitHub Actions runner to redact ``secret`` from its logs."""
    if secret and running_in_github_actions():
        print(f"::add-mask::{secret}", flush=True)
