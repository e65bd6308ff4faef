# apps/profiles/services/github_client.py

import requests
from typing import Any, Dict, List, Optional
from logging import getLogger
from urllib.parse import quote

from django.conf import settings

logger = getLogger(__name__)


class GitHubLookupError(Exception):
    """Raised when the repositories of a GitHub user cannot be fetched, for any reason."""


class GitHubClient:
    """
    A small client for the GitHub REST API, used to show a profile's most
    recent public repositories. Every failure is reported as GitHubLookupError;
    there is no retry.
    """
    REPOS_PER_PAGE = 5
    USER_AGENT = "ucsb-connect"

    def __init__(self, base_url: str, token: Optional[str] = None, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "GitHubClient":
        return cls(
            base_url=settings.GITHUB_API_URL,
            token=settings.GITHUB_TOKEN,
            timeout=settings.GITHUB_REQUEST_TIMEOUT,
        )

    def _headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self.USER_AGENT, "Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def fetch_repos(self, username: str) -> List[Dict[str, Any]]:
        """
        Returns up to five repositories of `username`, oldest created first.
        """
        url = f"{self.base_url}/users/{quote(username, safe='')}/repos"
        params = {"per_page": self.REPOS_PER_PAGE, "sort": "created:asc"}

        try:
            response = requests.get(url, params=params, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status() # Raises an HTTPError for 4xx or 5xx status codes
            return response.json()
        except requests.exceptions.Timeout as exc:
            logger.error(f"Request to GitHub timed out: {url}")
            raise GitHubLookupError(f"GitHub request timed out for {username!r}") from exc
        except requests.exceptions.ConnectionError as exc:
            logger.error(f"Could not connect to GitHub at {url}")
            raise GitHubLookupError("Could not connect to GitHub") from exc
        except requests.exceptions.HTTPError as exc:
            logger.warning(f"GitHub returned an error for {username!r}: {exc.response.status_code}")
            raise GitHubLookupError(f"GitHub returned {exc.response.status_code} for {username!r}") from exc
        except (requests.exceptions.RequestException, ValueError) as exc:
            logger.error(f"Unexpected error fetching GitHub repos for {username!r}: {exc}")
            raise GitHubLookupError(f"Could not read GitHub repos for {username!r}") from exc
