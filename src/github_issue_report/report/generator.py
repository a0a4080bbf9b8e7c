"""Sequential report generation: fetch once, then classify issue by issue."""

from __future__ import annotations

import logging
from collections.abc import Callable

from github_issue_report.github.client import GitHubClient
from github_issue_report.report.classifier import IssueClassifier
from github_issue_report.report.schema import ClassifiedReport

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class ReportGenerator:
    """Drives one report run for a repository.

    The first failure (fetch or classification) propagates to the caller; no
    partial report is returned.
    """

    def __init__(self, github: GitHubClient, classifier: IssueClassifier) -> None:
        self.github = github
        self.classifier = classifier

    def generate(
        self,
        owner: str,
        repo: str,
        on_progress: ProgressCallback | None = None,
    ) -> list[ClassifiedReport]:
        """Classify every issue of ``owner/repo`` in fetch order.

        Args:
            owner: Repository owner.
            repo: Repository name.
            on_progress: Called as ``(0, total)`` once the issues are fetched,
                then ``(i, total)`` after the i-th issue is classified.

        Returns:
            One report per fetched issue, in the same order.
        """

        logger.info("Fetching issues", extra={"repo": f"{owner}/{repo}"})
        issues = self.github.list_issues(owner, repo)
        total = len(issues)
        logger.info(f"Fetched {total} issues", extra={"repo": f"{owner}/{repo}", "count": total})
        if on_progress is not None:
            on_progress(0, total)

        reports: list[ClassifiedReport] = []
        for index, issue in enumerate(issues, start=1):
            reports.append(self.classifier.classify(issue))
            logger.info(f"Analyzed issue {index}/{total}")
            if on_progress is not None:
                on_progress(index, total)

        return reports
