"""
GitHub API helper utilities.

Provides rate limit handling and error response processing for GitHub API calls.
"""

import logging

import httpx

from ghwrapper.exceptions import GitHubAPIError

logger = logging.getLogger(__name__)


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if not available."""
        return int(self.reset) if self.reset else None

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining is not None and int(self.remaining) == 0


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Handle common error responses from GitHub API.

    Args:
        response: The HTTP response from GitHub API
        resource: What was requested, for error context (e.g. a commit URL)

    Raises:
        GitHubAPIError: For authentication, authorization, or other API errors
    """
    rate_info = RateLimitInfo(response)

    if response.status_code == 401:
        raise GitHubAPIError("Invalid or expired GitHub token", 401)
    elif response.status_code == 404:
        raise GitHubAPIError(f"Resource not found: {resource}", 404)
    elif response.status_code == 422:
        # GitHub answers 422 for hashes that do not exist in the repository
        raise GitHubAPIError(f"Unprocessable reference: {resource}", 422)
    elif response.status_code == 403:
        if rate_info.is_exhausted:
            raise GitHubAPIError(
                "GitHub API rate limit exceeded",
                403,
                rate_limit_reset=rate_info.reset_timestamp,
            )
        raise GitHubAPIError("GitHub API forbidden", 403)
    elif response.status_code != 200:
        raise GitHubAPIError(
            f"GitHub API error: {response.status_code}", response.status_code
        )
