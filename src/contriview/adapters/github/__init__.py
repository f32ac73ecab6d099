"""GitHub contributions fetcher."""

from .client import FetchError, GitHubContributionsClient

__all__ = ["FetchError", "GitHubContributionsClient"]
