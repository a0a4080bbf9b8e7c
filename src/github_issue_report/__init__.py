"""GitHub Issue Report.

Fetches the issues of a repository and classifies each one into a structured
report record with a schema-constrained LLM completion:
- configuration loaded from the environment and `.env`
- structured logging
- a strictly sequential fetch -> classify -> print run
"""

__version__ = "0.1.0"

from github_issue_report.core.config import ReportConfig

__all__ = ["__version__", "ReportConfig"]
