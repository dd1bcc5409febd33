"""
Shared HTTP client for GitHub API lookups.

Provides a singleton Client with connection pooling for the commit URL
fallback, so repeated misses against the cache reuse one connection pool.
"""

import logging

import httpx

from ghwrapper.config import settings

logger = logging.getLogger(__name__)

# Module-level singleton client
_client: httpx.Client | None = None


def get_github_client() -> httpx.Client:
    """
    Get or create the shared HTTP client for GitHub API calls.

    Auth headers are passed per-request, not stored on the client.

    Returns:
        Shared httpx.Client configured for GitHub API
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.Client(
            base_url=settings.api_base_url,
            timeout=httpx.Timeout(settings.request_timeout, connect=settings.connect_timeout),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            follow_redirects=True,
            http2=True,
        )
        logger.debug("Created new GitHub HTTP client with connection pooling")
    return _client


def close_github_client() -> None:
    """Close the shared HTTP client."""
    global _client
    if _client is not None and not _client.is_closed:
        _client.close()
        _client = None
        logger.debug("Closed GitHub HTTP client")
