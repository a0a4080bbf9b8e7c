"""GitHub integration."""

from github_issue_report.github.client import GitHubClient, RawIssue

__all__ = ["GitHubClient", "RawIssue"]
