"""
GitHub API client for fetching user activity.
"""

import logging

import requests

logger = logging.getLogger(__name__)


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""

    pass


class GitHubClient:
    """Client for interacting with the GitHub API."""

    BASE_URL = "https://api.github.com"
    MAX_PAGES = 3

    def __init__(self, token: str, username: str):
        """
        Initialize the GitHub client.

        Args:
            token: GitHub personal access token
            username: GitHub username to fetch events for
        """
        self.token = token
        self.username = username
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    def get_user_events(self, per_page: int = 100, pages: int = 1) -> list[dict]:
        """
        Fetch recent events for the configured user.

        GitHub only serves the last 90 days of events, capped at 300.

        Args:
            per_page: Number of events per page (max 100)
            pages: Number of pages to fetch (max 3)

        Returns:
            List of event dictionaries from the GitHub API

        Raises:
            GitHubClientError: If the API request fails
        """
        url = f"{self.BASE_URL}/users/{self.username}/events"
        events: list[dict] = []

        for page in range(1, min(pages, self.MAX_PAGES) + 1):
            params = {"per_page": min(per_page, 100), "page": page}
            logger.debug("Fetching events for %s, page %d", self.username, page)

            response = self.session.get(url, params=params)
            batch = self._check_response(response)
            events.extend(batch)

            if len(batch) < params["per_page"]:
                break

        logger.info("Fetched %d events for %s", len(events), self.username)
        return events

    def _check_response(self, response) -> list[dict]:
        if response.status_code == 401:
            raise GitHubClientError(
                "Authentication failed. Check your GITHUB_TOKEN is valid."
            )
        elif response.status_code == 404:
            raise GitHubClientError(f"User '{self.username}' not found on GitHub.")
        elif response.status_code == 403:
            # Check for rate limiting
            remaining = response.headers.get("X-RateLimit-Remaining", "unknown")
            raise GitHubClientError(
                f"API rate limit exceeded or access forbidden. "
                f"Remaining requests: {remaining}"
            )
        elif not response.ok:
            raise GitHubClientError(
                f"GitHub API error: {response.status_code} - {response.text}"
            )

        return response.json()
