"""Core package initialization."""

from github_issue_report.core.config import GitHubConfig, LLMConfig, ReportConfig

__all__ = [
    "GitHubConfig",
    "LLMConfig",
    "ReportConfig",
]
