"""Contains unit tests for the utils.github module."""

import pytest

from github_changelog.utils.github import (
    derive_web_host,
    mask_secret_in_github_actions,
    split_repository_in_configuration,
)


def test_split_repository_valid() -> None:
    """Test splitting a valid owner/repo string."""
    owner, repo = split_repository_in_configuration("octocat/Hello-World")
    assert owner == "octocat"
    assert repo == "Hello-World"


def test_split_repository_missing() -> None:
    """Test that ValueError is raised if repo is None."""
    with pytest.raises(ValueError, match="Repository is required in config."):
        split_repository_in_configuration(None)


@pytest.mark.parametrize(
    "malformed_repo",
    [
        pytest.param("", id="empty string"),
        pytest.param("/", id="only a slash"),
        pytest.param("octocat-HelloWorld", id="no slash"),
        pytest.param("owner/repo/extra", id="too many parts"),
    ],
)
def test_split_repository_various_malformed(malformed_repo: str) -> None:
    """Test that ValueError is raised if repo is malformed (various cases)."""
    with pytest.raises(ValueError):
        split_repository_in_configuration(malformed_repo)


@pytest.mark.parametrize(
    "github_api_url,expected",
    [
        pytest.param("https://api.github.com", "github.com", id="github.com"),
        pytest.param("https://api.github.com/", "github.com", id="trailing slash"),
        pytest.param("https://ghe.example.com/api/v3", "ghe.example.com", id="enterprise server"),
        pytest.param("https://api.example.ghe.com", "example.ghe.com", id="enterprise cloud"),
    ],
)
def test_derive_web_host(github_api_url: str, expected: str) -> None:
    """Test deriving the web host from the API URL."""
    assert derive_web_host(github_api_url) == expected


def test_mask_secret_in_github_actions(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the token is registered as a mask when running in GitHub Actions."""
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    mask_secret_in_github_actions("ghp_secret")
    assert capsys.readouterr().out == "::add-mask::ghp_secret\n"


def test_mask_secret_outside_github_actions(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that nothing is printed outside GitHub Actions."""
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    mask_secret_in_github_actions("ghp_secret")
    assert capsys.readouterr().out == ""
