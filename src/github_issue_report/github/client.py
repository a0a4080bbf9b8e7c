"""GitHub REST client for reading repository issues.

Only the single listing call needed for a report is implemented. The raw JSON
objects are returned untouched so they can be handed to the classifier
verbatim.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import requests

from github_issue_report import __version__
from github_issue_report.core.config import GitHubConfig
from github_issue_report.errors import IssueFetchError

logger = logging.getLogger(__name__)

RawIssue = dict[str, Any]


class GitHubClient:
    """Small wrapper around a ``requests.Session`` authenticated for GitHub."""

    def __init__(
        self,
        config: GitHubConfig,
        session: requests.Session | None = None,
    ) -> None:
        if not config.token:
            raise ValueError("GitHub token is required")

        self.config = config
        self._rest_base_url = config.base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {config.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": f"github-issue-report/{__version__}",
            }
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def issues_url(self, owner: str, repo: str) -> str:
        owner = owner.strip().strip("/")
        repo = repo.strip().strip("/")
        if not owner:
            raise ValueError("owner is required")
        if not repo:
            raise ValueError("repo is required")
        return f"{self._rest_base_url}/repos/{owner}/{repo}/issues"

    def list_issues(self, owner: str, repo: str) -> list[RawIssue]:
        """Return every issue (open and closed) on the API's default page.

        The listing is neither paginated, filtered nor re-ordered.

        Raises:
            requests.HTTPError: GitHub answered with a non-2xx status.
            requests.RequestException: The request could not be completed.
            IssueFetchError: The response body was not a JSON array.
        """

        url = self.issues_url(owner, repo)
        logger.debug("Listing issues", extra={"url": url})

        resp = self._session.get(url, params={"state": "all"}, timeout=self.config.timeout)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            raise IssueFetchError(
                f"Unexpected issues response for {owner}/{repo}: expected a JSON array, "
                f"got {type(data).__name__}"
            )
        return data

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
        logger.debug("GitHub client closed")
