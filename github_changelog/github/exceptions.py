"""Contains exceptions raised when talking to the GitHub API."""


class UpstreamError(Exception):
    """Raised when a GitHub API call fails (HTTP error, network error or timeout)."""

    def __init__(self, operation: str, cause: Exception) -> None:
        """Initializes the exception with the failed operation and its cause."""
        super().__init__(f"GitHub API call '{operation}' failed: {cause}")
        self.operation = operation
        self.cause = cause
