"""GitHub contributions heatmap fetcher.

Retrieves the markup served at ``/users/<username>/contributions``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from ...observability.loguru_config import get_logger

if TYPE_CHECKING:
    from ...config.settings import Settings

__all__ = ["FetchError", "GitHubContributionsClient"]

log = get_logger("github")


class FetchError(Exception):
    """Raised when the contributions document cannot be retrieved."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class GitHubContributionsClient:
    """Fetch contributions heatmaps over HTTP."""

    def __init__(
        self,
        *,
        base_url: str = "https://github.com",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Parameters
        ----------
        base_url
            Site base URL
        timeout
            Request timeout in seconds
        transport
            Optional httpx transport (tests pass ``httpx.MockTransport``)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> GitHubContributionsClient:
        return cls(base_url=settings.base_url, timeout=settings.timeout_seconds)

    def contributions_url(self, username: str) -> str:
        return f"{self.base_url}/users/{username}/contributions"

    def fetch_contributions(self, username: str) -> str:
        """Fetch the heatmap markup of a user.

        Raises
        ------
        ValueError
            If username is empty
        FetchError
            On timeout, connection failure, or an HTTP error status
        """
        username = username.strip()
        if not username:
            raise ValueError("username must not be empty")

        url = self.contributions_url(username)
        log.debug("Fetching contributions from {url}", url=url)

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport, follow_redirects=True) as client:
                response = client.get(url)
        except httpx.TimeoutException as e:
            log.warning("Timed out fetching {url}", url=url)
            raise FetchError(f"Request to {url} timed out after {self.timeout}s", url=url) from e
        except httpx.ConnectError as e:
            log.warning("Could not connect to {url}", url=url)
            raise FetchError(f"Failed fetch from {url}: {e}", url=url) from e
        except httpx.HTTPError as e:
            log.warning("HTTP error fetching {url}", url=url)
            raise FetchError(f"Failed fetch from {url}: {e}", url=url) from e

        if response.status_code >= 400:
            log.warning("Fetching {url} returned {status}", url=url, status=response.status_code)
            raise FetchError(
                f"Failed fetch from {url}: HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        return response.text
