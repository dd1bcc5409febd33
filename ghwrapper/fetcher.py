"""Fetching single commits by API URL for the cache's fallback lookup."""

import logging

import httpx

from ghwrapper.config import settings
from ghwrapper.deserializers import deserialize_commit
from ghwrapper.exceptions import GitHubAPIError
from ghwrapper.helpers import handle_error_response
from ghwrapper.http_client import get_github_client
from ghwrapper.types import GitHubCommit

logger = logging.getLogger(__name__)


class GitHubCommitFetcher:
    """
    Callable that loads a commit from its ``commit_url``.

    Relative URLs resolve against ``settings.api_base_url`` on the shared
    client. Never raises: malformed URLs, transport and decoding failures
    are logged and reported as a miss, matching the resolver contract.
    """

    def __init__(self, token: str | None = None, client: httpx.Client | None = None):
        token = settings.github_token if token is None else token
        self._client = client
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": settings.api_version,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    def __call__(self, url: str) -> GitHubCommit | None:
        client = self._client or get_github_client()
        try:
            response = client.get(url, headers=self._headers)
            handle_error_response(response, url)
            return deserialize_commit(response.json())
        except GitHubAPIError as e:
            logger.warning(f"Commit lookup failed for {url}: {e.message}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Commit lookup failed for {url}: {e}")
        except ValueError as e:  # Bad JSON or missing commit fields
            logger.warning(f"Unexpected commit payload from {url}: {e}")
        return None
