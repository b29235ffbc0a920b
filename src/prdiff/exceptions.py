"""Custom exceptions for prdiff."""


class PRDiffError(Exception):
    """Base exception for all prdiff errors."""


class ConfigError(PRDiffError):
    """Missing or invalid action inputs."""


class GitHubAPIError(PRDiffError):
    """A GitHub API request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(GitHubAPIError):
    """A GitHub API response does not match the expected shape."""
